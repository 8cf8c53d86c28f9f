"""Iterative (fictitious play) solution of a matrix game."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .maxmin import max_min, min_element

__all__ = ["BrownRobinsonResult", "brown_robinson_table", "brown_robinson"]

Matrix = Sequence[Sequence[float]]

_MAX_STEPS = 10_000_000

_HEADER = (
    "N"
    + " | selection A".ljust(25)
    + "".join(
        title.ljust(15)
        for title in (
            " | selection B",
            " | Winning A",
            " | Winning B",
            " | max",
            " | min",
            " | e",
        )
    )
    + "\n"
)


@dataclass(frozen=True)
class BrownRobinsonResult:
    """Bounds on the game value, strategy estimates and the number of steps."""

    lower: float
    upper: float
    p: tuple[float, ...]
    q: tuple[float, ...]
    steps: int

    @property
    def value(self) -> float:
        """Midpoint of the lower and upper estimates."""
        return (self.lower + self.upper) / 2


def _checked(matrix: Matrix, tolerance: float) -> list[list[float]]:
    rows = [[float(x) for x in row] for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")
    if not tolerance > 0:
        raise ValueError("tolerance must be positive")
    return rows


def _first_min(values: list[float]) -> int:
    return min(range(len(values)), key=values.__getitem__)


def _first_max(values: list[float]) -> int:
    return max(range(len(values)), key=values.__getitem__)


def _not_converged() -> ArithmeticError:
    return ArithmeticError(f"no convergence within {_MAX_STEPS} steps")


def brown_robinson_table(
    matrix: Matrix, out: TextIO | None = None, tolerance: float = 0.1
) -> BrownRobinsonResult:
    """Run fictitious play from the first row and column, writing a step table.

    Stops once the best upper and best lower estimates seen so far differ by
    no more than ``tolerance``. ``lower`` and ``upper`` are those best
    estimates. The strategy estimates are the choice counts divided by
    ``steps + 1``.
    """
    rows = _checked(matrix, tolerance)
    columns = [list(column) for column in zip(*rows)]
    row_counts = [0] * len(rows)
    column_counts = [0] * len(columns)
    gains = [0.0] * len(rows)
    losses = [0.0] * len(columns)
    best_lower, best_upper = float("-inf"), float("inf")
    row = column = 0

    if out is not None:
        out.write(_HEADER)

    for step in range(1, _MAX_STEPS + 1):
        gains = [g + a for g, a in zip(gains, columns[column])]
        losses = [v + a for v, a in zip(losses, rows[row])]
        prefix = f"{step:<5} |   x{row + 1:<5} |  y{column + 1:<5} | ["

        column = _first_min(losses)
        column_counts[column] += 1
        lower = losses[column] / step
        best_lower = max(best_lower, lower)

        row = _first_max(gains)
        row_counts[row] += 1
        upper = gains[row] / step
        best_upper = min(best_upper, upper)

        gap = abs(best_upper - best_lower)
        if out is not None:
            out.write(
                prefix
                + ", ".join(f"{g:5.0f}" for g in gains)
                + "]  |  ["
                + ", ".join(f"{v:5.0f}" for v in losses)
                + f"] | {upper:6.3f} | {lower:6.3f}  | {gap:.3f}\n"
            )
        if not gap > tolerance:
            break
    else:
        raise _not_converged()

    total = step + 1
    return BrownRobinsonResult(
        best_lower,
        best_upper,
        tuple(c / total for c in row_counts),
        tuple(c / total for c in column_counts),
        step,
    )


def brown_robinson(matrix: Matrix, tolerance: float = 0.001) -> BrownRobinsonResult:
    """Run fictitious play starting from the maximin row.

    A matrix with negative entries is shifted to positive values for the
    iteration and the estimates are shifted back. Stops once the current
    upper and lower estimates differ by no more than ``tolerance``. The
    input matrix is left unchanged.
    """
    rows = _checked(matrix, tolerance)
    smallest = min_element(rows)
    offset = smallest - 1 if smallest < 0 else 0.0
    if offset:
        rows = [[x - offset for x in row] for row in rows]
    columns = [list(column) for column in zip(*rows)]

    start = max_min(rows).index
    if start is None:
        raise ValueError("matrix has no finite maximin row")
    row = start
    row_counts = [0] * len(rows)
    column_counts = [0] * len(columns)
    row_counts[row] = 1
    chosen_rows, chosen_columns = 1, 0
    gains = [0.0] * len(rows)
    losses = list(rows[row])

    for _ in range(_MAX_STEPS):
        column = _first_min(losses)
        column_counts[column] += 1
        chosen_columns += 1
        lower = losses[column] / chosen_rows
        gains = [g + a for g, a in zip(gains, columns[column])]

        best = max(gains)
        if best > 0:
            row = _first_max(gains)
        else:
            best = 0.0
        row_counts[row] += 1
        chosen_rows += 1
        upper = best / chosen_columns
        losses = [v + a for v, a in zip(losses, rows[row])]

        if not abs(upper - lower) > tolerance:
            break
    else:
        raise _not_converged()

    if offset:
        lower += offset
        upper += offset
    return BrownRobinsonResult(
        lower,
        upper,
        tuple(c / chosen_rows for c in row_counts),
        tuple(c / chosen_columns for c in column_counts),
        chosen_columns,
    )