"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY_MESSAGE = "La cola esta vacia"


class Queue(Generic[T]):
    """A FIFO queue; reading from an empty queue raises IndexError."""

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"Queue({list(self._queue)!r})"

    def is_empty(self) -> bool:
        """Tell whether nothing is waiting in the queue."""
        return len(self) == 0

    def enqueue(self, item: T) -> None:
        """Add an item at the back of the queue."""
        self._queue.append(item)

    def peek(self) -> T:
        """Return the front item without removing it."""
        return self._nonempty()[0]

    def dequeue(self) -> T:
        """Remove and return the front item."""
        return self._nonempty().popleft()

    def _nonempty(self) -> deque[T]:
        if not self._queue:
            raise IndexError(_EMPTY_MESSAGE)
        return self._queue