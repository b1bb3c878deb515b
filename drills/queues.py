"""A bounded first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = ["BoundedQueue"]


class BoundedQueue:
    """Queue holding at most ``capacity`` items.

    Iteration and :meth:`index_of` run from the most recently added item to
    the oldest one, which is the next to leave.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value``; raise OverflowError when the queue is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("queue is full")
        self._items.appendleft(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.pop()

    def index_of(self, value: Any) -> int | None:
        """Return the position of ``value`` counted from the newest item, or None."""
        try:
            return self._items.index(value)
        except ValueError:
            return None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)