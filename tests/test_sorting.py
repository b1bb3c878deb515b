import random

from drills.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    merge_sorted,
    pancake_sort,
    selection_sort,
)


def _random_lists():
    rng = random.Random(1234)
    cases = [[], [1], [2, 1], [5, 5, 5], list(range(10)), list(range(10, 0, -1))]
    for size in range(2, 40, 3):
        cases.append([rng.randint(-50, 50) for _ in range(size)])
    return cases


def test_bubble_sort_matches_builtin_sorted():
    for case in _random_lists():
        assert bubble_sort(case) == sorted(case)


def test_heap_sort_matches_builtin_sorted():
    for case in _random_lists():
        assert heap_sort(case) == sorted(case)


def test_insertion_sort_matches_builtin_sorted():
    for case in _random_lists():
        assert insertion_sort(case) == sorted(case)


def test_selection_sort_matches_builtin_sorted():
    for case in _random_lists():
        assert selection_sort(case) == sorted(case)


def test_merge_sort_matches_builtin_sorted():
    for case in _random_lists():
        assert merge_sort(case) == sorted(case)


def test_input_not_modified():
    data = [3, 1, 2]
    assert bubble_sort(data) == [1, 2, 3]
    assert heap_sort(data) == [1, 2, 3]
    assert insertion_sort(data) == [1, 2, 3]
    assert selection_sort(data) == [1, 2, 3]
    assert merge_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_accepts_iterables():
    expected = [1, 2, 4, 9]
    assert bubble_sort(iter([4, 2, 9, 1])) == expected
    assert heap_sort(iter([4, 2, 9, 1])) == expected
    assert insertion_sort(iter([4, 2, 9, 1])) == expected
    assert selection_sort(iter([4, 2, 9, 1])) == expected
    assert merge_sort(iter([4, 2, 9, 1])) == expected


def test_merge_sort_example():
    assert merge_sort([12, 11, 13, 5, 6, 7]) == [5, 6, 7, 11, 12, 13]


def test_merge_sort_is_stable():
    class Item:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __le__(self, other):
            return self.key <= other.key

    data = [Item(1, "a"), Item(0, "b"), Item(1, "c"), Item(0, "d")]
    assert [item.tag for item in merge_sort(data)] == ["b", "d", "a", "c"]


def test_merge_sorted_example():
    assert merge_sorted([6, 4], [8, 3, 9]) == [3, 4, 6, 8, 9]


def test_merge_sorted_invariant():
    for first in _random_lists():
        second = list(reversed(first))[:5]
        assert merge_sorted(first, second) == sorted(first + second)


def _replay(values, flips):
    items = list(values)
    for k in flips:
        items[:k] = reversed(items[:k])
    return items


def test_pancake_sort_sorts_and_flips_replay():
    for case in _random_lists():
        result = pancake_sort(case)
        assert result.values == sorted(case)
        assert _replay(case, result.flips) == sorted(case)
        assert len(result.flips) % 2 == 0
        assert all(1 <= k <= len(case) for k in result.flips)


def test_pancake_sort_already_sorted_needs_no_flips():
    values, flips = pancake_sort([1, 2, 3, 4])
    assert values == [1, 2, 3, 4]
    assert flips == []


def test_pancake_sort_flip_pairs_shrink():
    result = pancake_sort([3, 1, 4, 1, 5, 9, 2, 6])
    placements = result.flips[1::2]
    assert placements == sorted(placements, reverse=True)
    assert placements[0] == 8