"""Number-theory drills: primes, digit powers, modular powers and friends."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import takewhile
from math import factorial, gcd
from typing import NamedTuple

__all__ = [
    "DEFAULT_MODULUS",
    "Move",
    "fibonacci",
    "gcd_weighted_sum",
    "hanoi_moves",
    "is_armstrong",
    "kth_permutation",
    "nth_prime",
    "power_mod",
]

DEFAULT_MODULUS = 1_000_000_007


def nth_prime(n: int) -> int:
    """Return the ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    primes = [2]
    candidate = 3
    while len(primes) < n:
        divisors = takewhile(lambda p: p * p <= candidate, primes)
        if all(candidate % p for p in divisors):
            primes.append(candidate)
        candidate += 2
    return primes[n - 1]


def is_armstrong(number: int) -> bool:
    """Tell whether ``number`` equals the sum of its digits, each raised to the digit count."""
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    digits = [int(char) for char in str(number)]
    order = len(digits)
    return sum(digit**order for digit in digits) == number


def power_mod(base: int, exponent: int, modulus: int = DEFAULT_MODULUS) -> int:
    """Compute ``base ** exponent`` modulo ``modulus`` by recursive squaring.

    An exponent of zero yields 1 whatever the modulus.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if exponent == 0:
        return 1
    half = power_mod(base, exponent // 2, modulus)
    result = half * half % modulus
    if exponent % 2 == 1:
        result = result * base % modulus
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th term of the sequence 1, 1, 2, 3, 5, ... (index from 0)."""
    if n < 2:
        return 1
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def gcd_weighted_sum(n: int) -> int:
    """Return the sum of ``i * gcd(i, n)`` for ``i`` from 1 to ``n``."""
    return sum(i * gcd(i, n) for i in range(1, n + 1))


def kth_permutation(n: int, k: int) -> str:
    """Return the ``k``-th (1-based) lexicographic permutation of 1..n as a string."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    total = factorial(n)
    if not 1 <= k <= total:
        raise ValueError(f"k must lie between 1 and {total}, got {k}")
    remaining = list(range(1, n + 1))
    rank = k - 1
    block = total
    parts: list[str] = []
    while remaining:
        block //= len(remaining)
        index, rank = divmod(rank, block)
        parts.append(str(remaining.pop(index)))
    return "".join(parts)


class Move(NamedTuple):
    """One step of the Tower of Hanoi: a disc travels from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move the disc {self.disk} from {self.source} to {self.target}"


def hanoi_moves(
    disks: int, source: str = "A", target: str = "C", spare: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``disks`` discs from ``source`` to ``target``."""
    if disks < 0:
        raise ValueError(f"disks must be non-negative, got {disks}")
    if disks == 0:
        return
    yield from hanoi_moves(disks - 1, source, spare, target)
    yield Move(disks, source, target)
    yield from hanoi_moves(disks - 1, spare, target, source)