"""Pure-strategy bounds of a matrix game: lower and upper values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

Matrix = Sequence[Sequence[float]]

__all__ = ["Extremum", "max_min", "min_max", "min_element"]


@dataclass(frozen=True)
class Extremum:
    """A bound of the game and the row or column that attains it.

    ``index`` is ``None`` when no row or column improved on the starting value.
    """

    value: float
    index: int | None


def _rows(matrix: Matrix) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def max_min(matrix: Matrix, start: float = float("-inf")) -> Extremum:
    """Return the largest of the row minima (the lower value of the game).

    ``start`` is the value a row minimum must exceed to be taken; the first
    row reaching the best minimum wins ties.
    """
    best = Extremum(start, None)
    for index, row in enumerate(_rows(matrix)):
        smallest = min(row)
        if best.value < smallest:
            best = Extremum(smallest, index)
    return best


def min_max(matrix: Matrix) -> Extremum:
    """Return the smallest of the column maxima (the upper value of the game).

    The first column reaching the best maximum wins ties.
    """
    best = Extremum(float("inf"), None)
    for index, column in enumerate(zip(*_rows(matrix))):
        largest = max(column)
        if largest < best.value:
            best = Extremum(largest, index)
    return best


def min_element(matrix: Matrix) -> float:
    """Return the smallest entry of the matrix."""
    return min(min(row) for row in _rows(matrix))