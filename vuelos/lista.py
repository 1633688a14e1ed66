"""A singly linked list with an external iterator that can insert and delete."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_EMPTY_MESSAGE = "La lista esta vacia"
_EXHAUSTED_MESSAGE = "El iterador termino de iterar"


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next_node: Optional[_Node[T]] = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList(Generic[T]):
    """A singly linked list with O(1) insertion at both ends."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._first: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        self._length = 0
        for item in items:
            self.insert_last(item)

    def is_empty(self) -> bool:
        """Return True if the list has no elements."""
        return self._length == 0

    def insert_first(self, item: T) -> None:
        """Insert an item at the start of the list."""
        node = _Node(item, self._first)
        if self._first is None:
            self._last = node
        self._first = node
        self._length += 1

    def insert_last(self, item: T) -> None:
        """Insert an item at the end of the list."""
        node = _Node(item)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._length += 1

    def delete_first(self) -> T:
        """Remove and return the first item."""
        if self._first is None:
            raise IndexError(_EMPTY_MESSAGE)
        removed = self._first
        self._first = removed.next
        self._length -= 1
        if self._first is None:
            self._last = None
        return removed.value

    def first(self) -> T:
        """Return the first item."""
        if self._first is None:
            raise IndexError(_EMPTY_MESSAGE)
        return self._first.value

    def last(self) -> T:
        """Return the last item."""
        if self._last is None:
            raise IndexError(_EMPTY_MESSAGE)
        return self._last.value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.value
            node = node.next

    def iterate(self, visit: Callable[[T], bool]) -> None:
        """Call visit on each item in order until it returns a false value."""
        for item in self:
            if not visit(item):
                break

    def iterator(self) -> ListIterator[T]:
        """Return an external iterator positioned at the first item."""
        return ListIterator(self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


class ListIterator(Generic[T]):
    """A cursor over a LinkedList that can insert and delete at its position."""

    def __init__(self, owner: LinkedList[T]) -> None:
        self._list = owner
        self._current: Optional[_Node[T]] = owner._first
        self._previous: Optional[_Node[T]] = None

    def current(self) -> T:
        """Return the item under the cursor."""
        if self._current is None:
            raise IndexError(_EXHAUSTED_MESSAGE)
        return self._current.value

    def has_next(self) -> bool:
        """Return True if the cursor is on an item."""
        return self._current is not None

    def advance(self) -> None:
        """Move the cursor to the next item."""
        if self._current is None:
            raise IndexError(_EXHAUSTED_MESSAGE)
        self._previous = self._current
        self._current = self._current.next

    def insert(self, item: T) -> None:
        """Insert an item before the cursor; the cursor then points at it."""
        owner = self._list
        node = _Node(item, self._current)
        if self._current is None:
            owner._last = node
        if self._previous is None:
            owner._first = node
        else:
            self._previous.next = node
        self._current = node
        owner._length += 1

    def delete(self) -> T:
        """Remove and return the item under the cursor; the cursor moves to the next one."""
        if self._current is None:
            raise IndexError(_EXHAUSTED_MESSAGE)
        owner = self._list
        removed = self._current
        if removed is owner._last:
            owner._last = self._previous
        if self._previous is None:
            owner._first = removed.next
        else:
            self._previous.next = removed.next
        self._current = removed.next
        owner._length -= 1
        return removed.value