"""Matrix transposition and the N-queens puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["n_queens", "transpose"]

Board = tuple[tuple[int, ...], ...]


def transpose(matrix: Iterable[Iterable[Any]]) -> list[list[Any]]:
    """Return the transpose of a rectangular matrix given as rows."""
    rows = [list(row) for row in matrix]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    return [list(column) for column in zip(*rows)]


def n_queens(n: int) -> Iterator[Board]:
    """Yield every placement of ``n`` non-attacking queens on an n-by-n board.

    Boards hold 1 where a queen stands and 0 elsewhere; they come in the order
    found by placing queens row by row, trying columns from left to right.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    placement: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> Iterator[Board]:
        if row == n:
            yield tuple(
                tuple(int(column == queen) for column in range(n)) for queen in placement
            )
            return
        for column in range(n):
            if (
                column in columns
                or row - column in diagonals
                or row + column in anti_diagonals
            ):
                continue
            placement.append(column)
            columns.add(column)
            diagonals.add(row - column)
            anti_diagonals.add(row + column)
            yield from place(row + 1)
            placement.pop()
            columns.discard(column)
            diagonals.discard(row - column)
            anti_diagonals.discard(row + column)

    yield from place(0)