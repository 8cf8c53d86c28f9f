"""Mixed-strategy solution of a matrix game through two linear programs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .simplex import simplex

__all__ = ["GameSolution", "solve_game"]


@dataclass(frozen=True)
class GameSolution:
    """Game values found from each player's program and their strategies."""

    first_value: float
    second_value: float
    p: tuple[float, ...]
    q: tuple[float, ...]


def _write_problem(
    out: TextIO,
    player: int,
    variable: str,
    costs: Sequence[float],
    constraints: Sequence[Sequence[float]],
    bounds: Sequence[float],
) -> None:
    def terms(coefficients: Sequence[float]) -> str:
        return " + ".join(
            f"{c:.2f}{variable.lower()}{i}" for i, c in enumerate(coefficients, 1)
        )

    out.write(f"(task) player №{player}:\n")
    out.write(f"F({variable})={terms(costs)} --> min\n")
    for row, bound in zip(constraints, bounds):
        out.write(f"{terms(row)} <={bound:.2f}\n")


def solve_game(
    matrix: Sequence[Sequence[float]], out: TextIO | None = None
) -> GameSolution:
    """Solve a game with a positive value by the simplex method.

    The first player's program minimises the sum of ``u`` under
    ``A^T u >= 1``; the second's maximises the sum of ``v`` under
    ``A v <= 1``. Both programs and their tables go to ``out`` if given.
    """
    rows = [[float(x) for x in row] for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")

    costs = [1.0] * len(rows)
    constraints = [[-value for value in column] for column in zip(*rows)]
    bounds = [-1.0] * width
    if out is not None:
        _write_problem(out, 1, "U", costs, constraints, bounds)
    first = simplex(costs, constraints, bounds, out)
    if first.value == 0:
        raise ValueError("the game value must be positive")
    p = tuple(x / first.value for x in first.x)

    costs = [-1.0] * width
    bounds = [1.0] * len(rows)
    if out is not None:
        _write_problem(out, 2, "V", costs, rows, bounds)
    second = simplex(costs, rows, bounds, out)
    total = -second.value
    if total == 0:
        raise ValueError("the game value must be positive")
    q = tuple(x / total for x in second.x)

    return GameSolution(1 / first.value, 1 / total, p, q)