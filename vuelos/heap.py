"""A binary max-heap priority queue ordered by a comparison function, and heap sort."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, MutableSequence, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]

_EMPTY_MESSAGE = "La cola esta vacia"


def _downheap(items: MutableSequence[T], index: int, size: int, cmp: Comparator) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and cmp(items[left], items[largest]) > 0:
            largest = left
        if right < size and cmp(items[right], items[largest]) > 0:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def _upheap(items: MutableSequence[T], index: int, cmp: Comparator) -> None:
    while index:
        parent = (index - 1) // 2
        if cmp(items[index], items[parent]) <= 0:
            return
        items[index], items[parent] = items[parent], items[index]
        index = parent


def _heapify(items: MutableSequence[T], cmp: Comparator) -> None:
    size = len(items)
    for index in reversed(range(size // 2)):
        _downheap(items, index, size, cmp)


class PriorityQueue(Generic[T]):
    """A max-priority queue: the item that compares greatest comes out first.

    cmp(a, b) returns a positive number when a has higher priority than b,
    zero when equal and a negative number otherwise.
    """

    def __init__(self, cmp: Comparator, items: Iterable[T] = ()) -> None:
        self._cmp = cmp
        self._items: list[T] = list(items)
        _heapify(self._items, cmp)

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._items

    def enqueue(self, item: T) -> None:
        """Add an item."""
        self._items.append(item)
        _upheap(self._items, len(self._items) - 1, self._cmp)

    def peek_max(self) -> T:
        """Return the highest-priority item without removing it."""
        if not self._items:
            raise IndexError(_EMPTY_MESSAGE)
        return self._items[0]

    def dequeue(self) -> T:
        """Remove and return the highest-priority item."""
        if not self._items:
            raise IndexError(_EMPTY_MESSAGE)
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        top = items.pop()
        _downheap(items, 0, len(items), self._cmp)
        return top

    def __len__(self) -> int:
        return len(self._items)


def heap_sort(items: MutableSequence[T], cmp: Comparator) -> None:
    """Sort items in place in ascending order according to cmp."""
    _heapify(items, cmp)
    for end in reversed(range(1, len(items))):
        items[0], items[end] = items[end], items[0]
        _downheap(items, 0, end, cmp)