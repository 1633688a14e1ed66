"""An ordered map backed by an unbalanced binary search tree."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar

from vuelos.pila import Stack

K = TypeVar("K")
V = TypeVar("V")

Comparator = Callable[[K, K], int]

_MISSING_KEY_MESSAGE = "La clave no pertenece al diccionario"
_EXHAUSTED_MESSAGE = "El iterador termino de iterar"


class _Node(Generic[K, V]):
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node[K, V]] = None
        self.right: Optional[_Node[K, V]] = None


class BinarySearchTree(Generic[K, V]):
    """An ordered map; cmp(a, b) is negative, zero or positive as a < b, a == b, a > b.

    Missing keys raise KeyError. Range bounds are inclusive; None means unbounded.
    """

    def __init__(self, cmp: Comparator) -> None:
        self._cmp = cmp
        self._root: Optional[_Node[K, V]] = None
        self._count = 0

    def _search(self, key: K) -> Tuple[Optional[_Node[K, V]], Optional[_Node[K, V]]]:
        parent: Optional[_Node[K, V]] = None
        node = self._root
        while node is not None:
            order = self._cmp(key, node.key)
            if order == 0:
                break
            parent = node
            node = node.left if order < 0 else node.right
        return node, parent

    def put(self, key: K, value: V) -> None:
        """Store value under key, replacing any previous value."""
        node, parent = self._search(key)
        if node is not None:
            node.value = value
            return
        new_node = _Node(key, value)
        if parent is None:
            self._root = new_node
        elif self._cmp(key, parent.key) < 0:
            parent.left = new_node
        else:
            parent.right = new_node
        self._count += 1

    def contains(self, key: K) -> bool:
        """Return True if key is stored."""
        return self._search(key)[0] is not None

    def get(self, key: K) -> V:
        """Return the value stored under key."""
        node = self._search(key)[0]
        if node is None:
            raise KeyError(_MISSING_KEY_MESSAGE)
        return node.value

    def delete(self, key: K) -> V:
        """Remove key and return the value it held."""
        node, parent = self._search(key)
        if node is None:
            raise KeyError(_MISSING_KEY_MESSAGE)
        value = node.value
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.key = successor.key
            node.value = successor.value
            if successor_parent.left is successor:
                successor_parent.left = successor.right
            else:
                successor_parent.right = successor.right
        self._count -= 1
        return value

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs in key order."""
        return self._walk(None, None)

    def _walk(self, start: Optional[K], end: Optional[K]) -> Iterator[Tuple[K, V]]:
        cursor = self.iterator_range(start, end)
        while cursor.has_next():
            yield cursor.current()
            cursor.advance()

    def iterate(self, visit: Callable[[K, V], bool]) -> None:
        """Call visit(key, value) in key order until it returns a false value."""
        self.iterate_range(None, None, visit)

    def iterate_range(
        self, start: Optional[K], end: Optional[K], visit: Callable[[K, V], bool]
    ) -> None:
        """Like iterate, limited to keys between start and end inclusive."""
        for key, value in self._walk(start, end):
            if not visit(key, value):
                break

    def iterator(self) -> TreeIterator[K, V]:
        """Return an external in-order iterator."""
        return self.iterator_range(None, None)

    def iterator_range(self, start: Optional[K], end: Optional[K]) -> TreeIterator[K, V]:
        """Return an external in-order iterator over keys in [start, end]."""
        return TreeIterator(self, start, end)


class TreeIterator(Generic[K, V]):
    """An in-order cursor over a BinarySearchTree, optionally bounded."""

    def __init__(
        self, tree: BinarySearchTree[K, V], start: Optional[K], end: Optional[K]
    ) -> None:
        self._cmp = tree._cmp
        self._start = start
        self._end = end
        self._stack: Stack[_Node[K, V]] = Stack()
        self._push_from(tree._root)

    def _push_from(self, node: Optional[_Node[K, V]]) -> None:
        while node is not None:
            if self._start is not None and self._cmp(node.key, self._start) < 0:
                node = node.right
            else:
                if self._end is None or self._cmp(node.key, self._end) <= 0:
                    self._stack.push(node)
                node = node.left

    def has_next(self) -> bool:
        """Return True if the cursor is on a pair."""
        return not self._stack.is_empty()

    def current(self) -> Tuple[K, V]:
        """Return the (key, value) pair under the cursor."""
        if self._stack.is_empty():
            raise IndexError(_EXHAUSTED_MESSAGE)
        node = self._stack.peek()
        return node.key, node.value

    def advance(self) -> None:
        """Move the cursor to the next pair in key order."""
        if self._stack.is_empty():
            raise IndexError(_EXHAUSTED_MESSAGE)
        node = self._stack.pop()
        if node.right is not None:
            self._push_from(node.right)