"""A bounded stack and a bracket balance checker."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["BoundedStack", "is_balanced"]


class BoundedStack:
    """Last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise OverflowError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)


_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_balanced(expression: str) -> bool:
    """Tell whether the round, square and curly brackets in ``expression`` match up.

    Characters other than brackets are ignored.
    """
    open_brackets: list[str] = []
    for char in expression:
        if char in _OPENERS:
            open_brackets.append(char)
        elif char in _PAIRS:
            if not open_brackets or open_brackets.pop() != _PAIRS[char]:
                return False
    return not open_brackets