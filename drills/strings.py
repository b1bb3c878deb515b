"""String drills: anagram checks and character counts."""

from __future__ import annotations

from collections import Counter

__all__ = ["are_anagrams", "char_frequency"]


def are_anagrams(first: str, second: str) -> bool:
    """Tell whether the two strings hold the same characters the same number of times."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def char_frequency(text: str, char: str) -> int:
    """Count how often the single character ``char`` occurs in ``text``."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return text.count(char)