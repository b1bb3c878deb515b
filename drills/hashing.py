"""Open-addressing hash table using linear probing with replacement."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["LinearProbingTable"]


class LinearProbingTable:
    """Fixed-size table of integers placed by ``value % size``.

    A colliding value probes forward for the next free slot. If the occupant
    of a value's home slot was itself displaced from elsewhere, the new value
    takes the home slot and the occupant moves on instead.
    """

    def __init__(self, size: int = 8) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self._slots: list[int | None] = [None] * size
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _home(self, value: int) -> int:
        return value % len(self._slots)

    def _probe(self, start: int) -> Iterator[int]:
        size = len(self._slots)
        for step in range(1, size):
            yield (start + step) % size

    def insert(self, value: int) -> int:
        """Store ``value`` and return the slot it landed in.

        Raises OverflowError when every slot is already taken.
        """
        home = self._home(value)
        occupant = self._slots[home]
        if occupant is None:
            self._slots[home] = value
            self._count += 1
            return home
        if self._count == len(self._slots):
            raise OverflowError(f"hash table is full with {len(self._slots)} values")
        free = next(index for index in self._probe(home) if self._slots[index] is None)
        self._count += 1
        if self._home(occupant) == home:
            self._slots[free] = value
            return free
        self._slots[home] = value
        self._slots[free] = occupant
        return home

    def search(self, value: int) -> int | None:
        """Return the slot holding ``value``, or None if it is not stored."""
        home = self._home(value)
        current = self._slots[home]
        if current == value:
            return home
        if current is None:
            return None
        for index in self._probe(home):
            current = self._slots[index]
            if current == value:
                return index
            if current is None:
                return None
        return None

    def slots(self) -> tuple[int | None, ...]:
        """Return the slot contents in order, with None for empty slots."""
        return tuple(self._slots)