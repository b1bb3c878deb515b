"""Array drills: knapsack, book allocation, maximum sums and digit avoidance."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

__all__ = [
    "digit_removal_cost",
    "knapsack",
    "max_subarray_sum",
    "max_subarray_sum_brute",
    "max_window_sum",
    "min_pages",
]


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items whose weights fit within ``capacity``.

    Each item may be taken at most once.
    """
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    needed = 1
    load = 0
    for count in pages:
        load += count
        if load > limit:
            needed += 1
            load = count
        if needed > students:
            return False
    return True


def min_pages(pages: Sequence[int], students: int) -> int | None:
    """Split ``pages`` into ``students`` contiguous runs minimising the largest run.

    Returns the smallest possible maximum, or None when there are fewer books
    than students.
    """
    if students < 1:
        raise ValueError(f"students must be at least 1, got {students}")
    if len(pages) < students:
        return None
    low, high = max(pages), sum(pages)
    result = None
    while low <= high:
        middle = (low + high) // 2
        if _fits(pages, students, middle):
            result = middle
            high = middle - 1
        else:
            low = middle + 1
    return result


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's method)."""
    items = iter(values)
    try:
        current = best = next(items)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in items:
        current = current + value if current >= 0 else value
        best = max(best, current)
    return best


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run by trying every start."""
    if not values:
        raise ValueError("values must not be empty")
    return max(max(accumulate(values[start:])) for start in range(len(values)))


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive values."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if len(values) < k:
        raise ValueError(f"window of {k} is longer than the {len(values)} values")
    window = best = sum(values[:k])
    for entering, leaving in zip(values[k:], values):
        window += entering - leaving
        best = max(best, window)
    return best


def digit_removal_cost(n: int, d: int) -> int:
    """Return the least non-negative amount to add to ``n`` so no digit equals ``d``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not 0 <= d <= 9:
        raise ValueError(f"d must be a single digit, got {d}")
    text = str(n)
    length = len(text)
    position = text.find(str(d))
    if position < 0:
        return 0
    if d == 0:
        candidate = text[:position] + "1" * (length - position)
    elif d == 9:
        raisable = max(
            (index for index, char in enumerate(text[:position]) if char <= "7"),
            default=-1,
        )
        if raisable < 0:
            candidate = "1" + "0" * length
        else:
            candidate = (
                text[:raisable]
                + str(int(text[raisable]) + 1)
                + "0" * (length - raisable - 1)
            )
    else:
        candidate = text[:position] + str(d + 1) + "0" * (length - position - 1)
    return int(candidate) - n