"""A small integer calculator with an interactive menu."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

__all__ = [
    "add",
    "divide",
    "main",
    "multiply",
    "square",
    "square_root",
    "subtract",
]


def add(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``; an empty collection sums to 0."""
    return sum(numbers, 0)


def subtract(first: int, second: int) -> int:
    """Return ``first - second``."""
    return first - second


def multiply(first: int, second: int) -> int:
    """Return ``first * second``."""
    return first * second


def divide(dividend: int, divisor: int) -> int:
    """Integer division that truncates toward zero."""
    if divisor == 0:
        raise ZeroDivisionError("divisor cannot be zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def square(number: int) -> int:
    """Return ``number`` squared."""
    return number * number


def square_root(number: float) -> float:
    """Return the square root of a non-negative number."""
    if number < 0:
        raise ValueError(f"cannot take the square root of {number}")
    return math.sqrt(number)


_MENU = (
    "Select any operation from the calculator"
    "\n1 = Addition"
    "\n2 = Subtraction"
    "\n3 = Multiplication"
    "\n4 = Division"
    "\n5 = Square"
    "\n6 = Square Root"
    "\n7 = Exit"
    "\n \n Make a choice: "
)
_EXIT_CHOICE = 7
_ERROR = "Something is wrong..!!"
_SEPARATOR = " \n------------------------------"


class _TokenReader:
    """Reads whitespace-separated integers from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = (token for line in stream for token in line.split())

    def read_int(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise EOFError from None
        return int(token)


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _read_pair(reader: _TokenReader) -> tuple[int, int]:
    _prompt(" \n Enter the First number = ")
    first = reader.read_int()
    _prompt("\n Enter the Second number = ")
    second = reader.read_int()
    return first, second


def _addition(reader: _TokenReader) -> None:
    _prompt("How many numbers you want to add: ")
    count = reader.read_int()
    print("Please enter the number one by one: ")
    numbers = [reader.read_int() for _ in range(count)]
    _prompt(f"\n Sum of the numbers = {add(numbers)}")


def _subtraction(reader: _TokenReader) -> None:
    first, second = _read_pair(reader)
    _prompt(f"\n Subtraction of the number = {subtract(first, second)}")


def _multiplication(reader: _TokenReader) -> None:
    first, second = _read_pair(reader)
    _prompt(f"\n Multiplication of two numbers = {multiply(first, second)}")


def _division(reader: _TokenReader) -> None:
    dividend, divisor = _read_pair(reader)
    while divisor == 0:
        _prompt("\n Divisor cannot be zero\n Please enter the divisor once again: ")
        divisor = reader.read_int()
    _prompt(f"\n Division of two numbers = {divide(dividend, divisor)}")


def _squaring(reader: _TokenReader) -> None:
    _prompt(" \n Enter a number to find the Square: ")
    number = reader.read_int()
    _prompt(f" \n Square of {number} is : {square(number)}")


def _rooting(reader: _TokenReader) -> None:
    _prompt("\n Enter the number to find the Square Root:")
    number = reader.read_int()
    _prompt(f" \n Square Root of {number} is : {square_root(number):g}")


_ACTIONS: dict[int, Callable[[_TokenReader], None]] = {
    1: _addition,
    2: _subtraction,
    3: _multiplication,
    4: _division,
    5: _squaring,
    6: _rooting,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive calculator on standard input until Exit or end of input."""
    parser = argparse.ArgumentParser(
        prog="drills-calculator", description="Interactive integer calculator."
    )
    parser.parse_args(argv)
    reader = _TokenReader(sys.stdin)
    while True:
        _prompt(_MENU)
        try:
            choice: int | None = reader.read_int()
        except EOFError:
            print()
            return 0
        except ValueError:
            choice = None
        if choice == _EXIT_CHOICE:
            return 0
        action = _ACTIONS.get(choice) if choice is not None else None
        if action is None:
            _prompt(_ERROR)
        else:
            try:
                action(reader)
            except EOFError:
                print()
                return 0
            except ValueError:
                _prompt(_ERROR)
        print(_SEPARATOR)