"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["binary_search", "linear_search"]


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    return next((index for index, item in enumerate(values) if item == target), None)


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None."""

    def search(low: int, high: int) -> int | None:
        if high < low:
            return None
        middle = low + (high - low) // 2
        if values[middle] == target:
            return middle
        if values[middle] > target:
            return search(low, middle - 1)
        return search(middle + 1, high)

    return search(0, len(values) - 1)