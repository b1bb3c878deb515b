from itertools import permutations
from math import factorial

import pytest

from drills.numbers import (
    DEFAULT_MODULUS,
    Move,
    fibonacci,
    gcd_weighted_sum,
    hanoi_moves,
    is_armstrong,
    kth_permutation,
    nth_prime,
    power_mod,
)


def test_first_primes_match_seed_values():
    assert nth_prime(1) == 2
    assert nth_prime(2) == 3


def test_sixth_prime_is_thirteen():
    assert nth_prime(6) == 13


def test_primes_are_increasing_and_prime():
    primes = [nth_prime(i) for i in range(1, 40)]
    assert primes == sorted(set(primes))
    assert all(all(p % d for d in range(2, p)) for p in primes)


def test_nth_prime_rejects_zero():
    with pytest.raises(ValueError):
        nth_prime(0)


def test_armstrong_examples():
    assert is_armstrong(407) is True
    assert is_armstrong(1542) is False


@pytest.mark.parametrize("digit", range(10))
def test_single_digits_are_armstrong(digit):
    assert is_armstrong(digit) is True


def test_armstrong_rejects_negative():
    with pytest.raises(ValueError):
        is_armstrong(-5)


@pytest.mark.parametrize(
    "base, exponent, modulus",
    [(2, 10, 1000), (3, 200, 97), (12345, 6789, DEFAULT_MODULUS), (7, 1, 5)],
)
def test_power_mod_agrees_with_builtin(base, exponent, modulus):
    assert power_mod(base, exponent, modulus) == pow(base, exponent, modulus)


def test_power_mod_default_modulus():
    assert power_mod(2, 100) == pow(2, 100, DEFAULT_MODULUS)


def test_power_mod_zero_exponent_is_one():
    assert power_mod(5, 0, 1) == 1


def test_power_mod_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power_mod(2, -1, 7)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 1
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_gcd_weighted_sum_small():
    assert gcd_weighted_sum(0) == 0
    assert gcd_weighted_sum(1) == 1


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13])
def test_gcd_weighted_sum_for_primes(p):
    assert gcd_weighted_sum(p) == p * (p - 1) // 2 + p * p


@pytest.mark.parametrize("n", range(1, 6))
def test_kth_permutation_matches_lexicographic_order(n):
    expected = ["".join(map(str, p)) for p in permutations(range(1, n + 1))]
    assert [kth_permutation(n, k) for k in range(1, factorial(n) + 1)] == expected


@pytest.mark.parametrize("n, k", [(3, 0), (3, 7), (0, 1)])
def test_kth_permutation_rejects_out_of_range(n, k):
    with pytest.raises(ValueError):
        kth_permutation(n, k)


def _play(disks, moves, source="A", target="C", spare="B"):
    rods = {source: list(range(disks, 0, -1)), target: [], spare: []}
    for move in moves:
        disc = rods[move.source].pop()
        assert disc == move.disk
        assert not rods[move.target] or rods[move.target][-1] > disc
        rods[move.target].append(disc)
    return rods


@pytest.mark.parametrize("disks", range(0, 8))
def test_hanoi_solves_puzzle_in_minimum_moves(disks):
    moves = list(hanoi_moves(disks))
    assert len(moves) == 2**disks - 1
    rods = _play(disks, moves)
    assert rods["C"] == list(range(disks, 0, -1))


def test_hanoi_custom_rod_names():
    moves = list(hanoi_moves(3, "x", "z", "y"))
    rods = _play(3, moves, "x", "z", "y")
    assert rods["z"] == [3, 2, 1]


def test_hanoi_single_disc_message():
    assert [str(m) for m in hanoi_moves(1)] == ["Move the disc 1 from A to C"]
    assert list(hanoi_moves(1)) == [Move(1, "A", "C")]


def test_hanoi_rejects_negative():
    with pytest.raises(ValueError):
        list(hanoi_moves(-1))