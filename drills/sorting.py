"""Classic comparison sorts.

Every function takes any iterable of mutually comparable items and returns a
new ascending list; the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, NamedTuple

__all__ = [
    "PancakeResult",
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "merge_sorted",
    "pancake_sort",
    "selection_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeated adjacent swaps, stopping early once a pass swaps nothing."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def _sift_down(items: MutableSequence[Any], length: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < length and items[left] > items[largest]:
            largest = left
        if right < length and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    length = len(items)
    for root in range(length // 2 - 1, -1, -1):
        _sift_down(items, length, root)
    for end in range(length - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the already sorted prefix."""
    items = list(values)
    for k in range(1, len(items)):
        current = items[k]
        j = k - 1
        while j >= 0 and current <= items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining item into place."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Sort both sequences, join them and return the combined sorted list."""
    return sorted([*sorted(first), *sorted(second)])


class PancakeResult(NamedTuple):
    """Sorted values together with the prefix lengths that were flipped."""

    values: list[Any]
    flips: list[int]


def _is_sorted(items: list[Any]) -> bool:
    return all(a <= b for a, b in zip(items, items[1:]))


def _flip(items: list[Any], k: int) -> None:
    items[:k] = items[k - 1 :: -1]


def pancake_sort(values: Iterable[Any]) -> PancakeResult:
    """Sort using only prefix reversals.

    Each pass brings the largest unsorted item to the front and then flips it
    into its final place; both flip lengths are recorded, even trivial ones.
    """
    items = list(values)
    flips: list[int] = []
    for unsorted in range(len(items), 0, -1):
        if _is_sorted(items):
            break
        largest = max(range(unsorted), key=items.__getitem__)
        _flip(items, largest + 1)
        flips.append(largest + 1)
        _flip(items, unsorted)
        flips.append(unsorted)
    return PancakeResult(items, flips)