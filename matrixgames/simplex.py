"""Tableau simplex method for minimisation under ``<=`` constraints."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .formatting import format_simplex_table

__all__ = ["SimplexError", "SimplexResult", "simplex"]

_MAX_PIVOTS = 10_000


class SimplexError(ArithmeticError):
    """Raised when the simplex method cannot continue."""


@dataclass(frozen=True)
class SimplexResult:
    """Optimal objective value and the values of the original variables."""

    value: float
    x: tuple[float, ...]


def _ratio_row(table: list[list[float]], rows: int, column: int) -> int | None:
    best, chosen = float("inf"), None
    for index in range(rows):
        divisor = table[index][column]
        if divisor == 0:
            continue
        ratio = table[index][0] / divisor
        if 0 < ratio < best:
            best, chosen = ratio, index
    return chosen


def _choose_pivot(table: list[list[float]], rows: int, columns: int) -> tuple[int, int] | None:
    """Return (row, free-variable index) to exchange, or None when done."""
    rhs = [row[0] for row in table[:rows]]
    worst = min(range(rows), key=rhs.__getitem__)
    if rhs[worst] < 0:
        column = next((j for j in range(columns) if table[worst][j + 1] < 0), None)
    else:
        column = next((j for j in range(columns) if table[rows][j + 1] > 0), None)
    if column is None:
        return None
    row = _ratio_row(table, rows, column + 1)
    if row is None:
        raise SimplexError("no admissible pivot row: the problem is unbounded")
    return row, column


def _pivot(table: list[list[float]], row: int, column: int) -> list[list[float]]:
    pivot = table[row][column]
    result = []
    for i, line in enumerate(table):
        factor = line[column]
        new_line = []
        for j, value in enumerate(line):
            if i == row and j == column:
                new_line.append(1.0 / pivot)
            elif i == row:
                new_line.append(value / pivot)
            elif j == column:
                new_line.append(-value / pivot)
            else:
                new_line.append(value - factor * table[row][j] / pivot)
        result.append(new_line)
    return result


def simplex(
    costs: Sequence[float],
    constraints: Sequence[Sequence[float]],
    bounds: Sequence[float],
    out: TextIO | None = None,
) -> SimplexResult:
    """Minimise ``costs . x`` subject to ``constraints x <= bounds``, ``x >= 0``.

    Every intermediate table, then the result line, is written to ``out``
    when it is given.
    """
    columns, rows = len(costs), len(constraints)
    if columns == 0 or rows == 0:
        raise ValueError("need at least one variable and one constraint")
    if len(bounds) != rows:
        raise ValueError("need one bound per constraint")
    if any(len(row) != columns for row in constraints):
        raise ValueError("every constraint needs one coefficient per variable")

    table = [[float(b), *(float(a) for a in row)] for b, row in zip(bounds, constraints)]
    table.append([0.0, *(-float(c) for c in costs)])
    free = list(range(columns))
    basis = list(range(columns, columns + rows))

    for _ in range(_MAX_PIVOTS):
        if out is not None:
            out.write(format_simplex_table(table, basis, free))
        choice = _choose_pivot(table, rows, columns)
        if choice is None:
            break
        row, column = choice
        free[column], basis[row] = basis[row], free[column]
        table = _pivot(table, row, column + 1)
    else:
        raise SimplexError(f"no optimum after {_MAX_PIVOTS} pivots")

    x = [0.0] * columns
    for index, variable in enumerate(basis):
        if variable < columns:
            x[variable] = table[index][0]
    value = table[rows][0]

    if out is not None:
        out.write(f"F={value:.3f} uv: " + "".join(f"{v:.3f} " for v in x) + "\n")
    return SimplexResult(value, tuple(x))