"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY_MESSAGE = "La pila esta vacia"


class Stack(Generic[T]):
    """A LIFO stack; reading from an empty stack raises IndexError."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return len(self) == 0

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def peek(self) -> T:
        """Return the top item without removing it."""
        return self._filled()[-1]

    def pop(self) -> T:
        """Remove and return the top item."""
        return self._filled().pop()

    def _filled(self) -> list[T]:
        if not self._items:
            raise IndexError(_EMPTY_MESSAGE)
        return self._items