"""Two-player non-zero-sum (bimatrix) games: Pareto and Nash solutions."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .formatting import format_vector
from .linalg import solve_by_inverse

__all__ = [
    "MixedEquilibrium",
    "is_pareto_optimal",
    "is_nash_equilibrium",
    "pareto_set",
    "nash_set",
    "random_matrix",
    "mixed_equilibrium",
    "write_report",
]

Matrix = Sequence[Sequence[float]]

GIVEN_FIRST = ((4.0, 5.0), (0.0, 7.0))
GIVEN_SECOND = ((7.0, 2.0), (2.0, 3.0))

_SMALL = 2
_LARGE = 10
_SMALL_UPPER = 150
_LARGE_UPPER = 100

_NO_NASH = "[!] There is no Nash solution in pure strategies\n"


@dataclass(frozen=True)
class MixedEquilibrium:
    """Mixed strategies of both players and the payoff each of them gets.

    ``x`` is the first player's strategy, which makes the second player
    indifferent; ``y`` is the second player's, which makes the first
    indifferent.
    """

    x: tuple[float, ...]
    y: tuple[float, ...]
    first_value: float
    second_value: float


def _pair(first: Matrix, second: Matrix) -> tuple[list[list[float]], list[list[float]]]:
    a = [list(row) for row in first]
    b = [list(row) for row in second]
    if not a or not a[0]:
        raise ValueError("matrices must have at least one row and one column")
    width = len(a[0])
    if any(len(row) != width for row in a):
        raise ValueError("matrix rows must all have the same length")
    if len(b) != len(a) or any(len(row) != width for row in b):
        raise ValueError("both payoff matrices must have the same shape")
    return a, b


def _check_cell(a: list[list[float]], row: int, column: int) -> None:
    if not (0 <= row < len(a) and 0 <= column < len(a[0])):
        raise IndexError(f"cell ({row}, {column}) lies outside the matrix")


def _cells(a: list[list[float]]):
    return ((i, j) for i in range(len(a)) for j in range(len(a[0])))


def is_pareto_optimal(first: Matrix, second: Matrix, row: int, column: int) -> bool:
    """Return True if no other cell is at least as good for both players
    and strictly better for one of them."""
    a, b = _pair(first, second)
    _check_cell(a, row, column)
    own1, own2 = a[row][column], b[row][column]
    for i, j in _cells(a):
        if (i, j) == (row, column):
            continue
        v1, v2 = a[i][j], b[i][j]
        if (v1 >= own1 and v2 > own2) or (v1 > own1 and v2 >= own2):
            return False
    return True


def is_nash_equilibrium(first: Matrix, second: Matrix, row: int, column: int) -> bool:
    """Return True if neither player gains by deviating alone.

    A cell where both payoffs are equal is never reported as an equilibrium.
    """
    a, b = _pair(first, second)
    _check_cell(a, row, column)
    own1, own2 = a[row][column], b[row][column]
    if any(a[i][column] > own1 for i in range(len(a)) if i != row):
        return False
    if any(b[row][j] > own2 for j in range(len(b[0])) if j != column):
        return False
    return own1 != own2


def pareto_set(first: Matrix, second: Matrix) -> list[tuple[int, int]]:
    """Return the Pareto-optimal cells in row-major order."""
    a, b = _pair(first, second)
    return [cell for cell in _cells(a) if is_pareto_optimal(a, b, *cell)]


def nash_set(first: Matrix, second: Matrix) -> list[tuple[int, int]]:
    """Return the pure-strategy Nash equilibria in row-major order."""
    a, b = _pair(first, second)
    return [cell for cell in _cells(a) if is_nash_equilibrium(a, b, *cell)]


def random_matrix(
    size: int, upper: int, rng: random.Random | None = None
) -> list[list[int]]:
    """Return a square matrix of integers drawn uniformly from 0 .. upper - 1."""
    if size < 1:
        raise ValueError("size must be positive")
    if upper < 1:
        raise ValueError("upper must be positive")
    rng = rng or random.Random()
    return [[rng.randrange(upper) for _ in range(size)] for _ in range(size)]


def mixed_equilibrium(first: Matrix, second: Matrix) -> MixedEquilibrium:
    """Find the completely mixed equilibrium of a square bimatrix game.

    Raises ValueError when either matrix is singular.
    """
    a, b = _pair(first, second)
    if len(a) != len(a[0]):
        raise ValueError("matrices must be square")
    by_second = solve_by_inverse(b)
    by_first = solve_by_inverse(a)
    return MixedEquilibrium(by_second.p, by_first.q, by_first.value, by_second.value)


def _number(value: float) -> str:
    return str(value) if isinstance(value, int) else f"{value:g}"


def _write_matrix(out: TextIO, title: str, matrix: Matrix) -> None:
    out.write(f"{title}:\n")
    for row in matrix:
        out.write("".join(f"{_number(value):>5}" for value in row) + "\n")


def _write_cells(
    out: TextIO, first: Matrix, second: Matrix, cells: list[tuple[int, int]]
) -> None:
    for i, j in cells:
        out.write(
            f"\ti: {i + 1}\tj: {j + 1}"
            f"\tM1: {_number(first[i][j])}\tM2: {_number(second[i][j])}\n"
        )


def _write_game(
    out: TextIO,
    titles: tuple[str, str],
    first: Matrix,
    second: Matrix,
    pareto_header: str = "[The Pareto solution]",
    no_nash_prefix: str = "\n",
) -> list[tuple[int, int]]:
    _write_matrix(out, titles[0], first)
    _write_matrix(out, titles[1], second)
    out.write(f"\n{pareto_header}\n")
    _write_cells(out, first, second, pareto_set(first, second))
    out.write("\n[The Nash solution]\n")
    equilibria = nash_set(first, second)
    _write_cells(out, first, second, equilibria)
    if not equilibria:
        out.write(no_nash_prefix + _NO_NASH)
    return equilibria


def write_report(out: TextIO, rng: random.Random | None = None) -> None:
    """Write Pareto and Nash solutions of random games and of the given game."""
    rng = rng or random.Random()
    dilemma = [random_matrix(_SMALL, _SMALL_UPPER, rng) for _ in range(2)]
    dispute = [random_matrix(_SMALL, _SMALL_UPPER, rng) for _ in range(2)]
    crossroads = [random_matrix(_SMALL, _SMALL_UPPER, rng) for _ in range(2)]
    large = [random_matrix(_LARGE, _LARGE_UPPER, rng) for _ in range(2)]

    _write_game(
        out,
        ("The 1st matrix is 10x10", "The 2st matrix is 10x10"),
        *large,
        no_nash_prefix="",
    )
    _write_game(
        out,
        (
            "The 1st 2x2 matrix for the Prisoner's «Dilemma game»",
            "The 2st 2x2 matrix for the Prisoner's «Dilemma game»",
        ),
        *dilemma,
    )
    _write_game(
        out,
        (
            "The 1st 2x2 matrix for the game  «Family Dispute»",
            "The 2st 2x2 matrix for the game  «Family Dispute»",
        ),
        *dispute,
    )
    _write_game(
        out,
        (
            "The 1st 2x2 matrix for the game «Crossroads»",
            "The 2st 2x2 matrix for the game «Crossroads»",
        ),
        *crossroads,
        pareto_header="[The Pareto solution]:",
    )
    equilibria = _write_game(
        out,
        (
            "The 1st 2x2 matrix from the given option",
            "The 2st 2x2 matrix from the given option",
        ),
        GIVEN_FIRST,
        GIVEN_SECOND,
    )

    out.write("\n[!] The solution is in mixed strategies\n")
    if len(equilibria) != 1:
        solution = mixed_equilibrium(GIVEN_FIRST, GIVEN_SECOND)
        out.write(format_vector("x", solution.x, 3, fixed=False))
        out.write(format_vector("y", solution.y, 3, fixed=False))
        out.write(f"v1:    {solution.first_value:.3f}\n")
        out.write(f"v2:    {solution.second_value:.3f}\n")
    else:
        out.write(
            "\n[!] One player has a strictly dominant strategy, "
            "there is only one Nash solution\n"
        )