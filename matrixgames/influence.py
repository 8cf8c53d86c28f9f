"""Opinion dynamics under a trust matrix and a game between influence agents."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from itertools import chain
from typing import TextIO

from .linalg import dot, matrix_vector

__all__ = [
    "random_trust_matrix",
    "within_tolerance",
    "converge",
    "influence_step",
    "play_influence_game",
    "write_report",
]

Matrix = Sequence[Sequence[float]]

_SIZE = 10
_TOLERANCE = 1e-6
_MAX_ITERATIONS = 100_000
_FIRST_AGENTS = (1, 2)
_SECOND_AGENTS = (3, 4)


def _uniform(rng: random.Random, low: float, high: float) -> float:
    return rng.random() * (high - low) + low


def _square(matrix: Matrix, size: int) -> list[list[float]]:
    rows = [[float(x) for x in row] for row in matrix]
    if not rows:
        raise ValueError("matrix must not be empty")
    if len(rows) != size or any(len(row) != size for row in rows):
        raise ValueError("matrix must be square and match the opinion vector")
    return rows


def _matmul(first: list[list[float]], second: list[list[float]]) -> list[list[float]]:
    columns = list(zip(*second))
    return [[dot(row, column) for column in columns] for row in first]


def random_trust_matrix(
    size: int = _SIZE, rng: random.Random | None = None
) -> list[list[float]]:
    """Return a random row-stochastic matrix with positive entries.

    Each entry but the last of a row is drawn around an even share of what
    the row still has left; the last entry takes the remainder, so every row
    sums to 1.
    """
    if size < 1:
        raise ValueError("size must be positive")
    rng = rng or random.Random()
    matrix = []
    for _ in range(size):
        remaining = 1.0
        step = 1.0 / size
        row = []
        for left in range(size - 1, 0, -1):
            value = _uniform(rng, 0.001, step * 2 - 0.001)
            row.append(value)
            remaining -= value
            step = remaining / left
        row.append(remaining)
        matrix.append(row)
    return matrix


def within_tolerance(
    first: Sequence[float], second: Sequence[float], tolerance: float
) -> bool:
    """Return True if the vectors differ by at most ``tolerance`` everywhere."""
    if len(first) != len(second):
        raise ValueError("vectors must have the same length")
    return all(abs(a - b) <= tolerance for a, b in zip(first, second))


def _not_converged() -> ArithmeticError:
    return ArithmeticError(f"no convergence within {_MAX_ITERATIONS} iterations")


def converge(
    matrix: Matrix, opinions: Sequence[float], tolerance: float = _TOLERANCE
) -> tuple[list[float], list[list[float]], int]:
    """Apply the trust matrix until opinions stop changing.

    Returns the final opinions, the matrix raised to the power
    ``iterations + 1`` and the number of iterations made.
    """
    rows = _square(matrix, len(opinions))
    current = [float(x) for x in opinions]
    power = [list(row) for row in rows]
    for iteration in range(1, _MAX_ITERATIONS + 1):
        previous = current
        current = matrix_vector(rows, current)
        power = _matmul(power, rows)
        if within_tolerance(current, previous, tolerance):
            return current, power, iteration
    raise _not_converged()


def influence_step(
    matrix: Matrix,
    opinions: Sequence[float],
    first: Iterable[int],
    second: Iterable[int],
) -> list[float]:
    """Return the opinions after one round of mutual influence.

    The first player's agents, then the second's, then everyone else are
    updated from the current opinions; an agent listed more than once has its
    update added once per listing.
    """
    rows = _square(matrix, len(opinions))
    first, second = list(first), list(second)
    size = len(rows)
    for index in chain(first, second):
        if not 0 <= index < size:
            raise ValueError(f"agent index {index} is outside 0 .. {size - 1}")
    agents = set(first) | set(second)
    others = [i for i in range(size) if i not in agents]
    result = [0.0] * size
    for index in chain(first, second, others):
        result[index] += dot(rows[index], opinions)
    return result


def play_influence_game(
    matrix: Matrix,
    opinions: Sequence[float],
    first: Iterable[int] = _FIRST_AGENTS,
    second: Iterable[int] = _SECOND_AGENTS,
    tolerance: float = _TOLERANCE,
) -> tuple[list[float], int]:
    """Iterate influence rounds until opinions settle.

    Returns the final opinions and the number of rounds.
    """
    first, second = list(first), list(second)
    current = [float(x) for x in opinions]
    for iteration in range(1, _MAX_ITERATIONS + 1):
        previous = current
        current = influence_step(matrix, current, first, second)
        if within_tolerance(current, previous, tolerance):
            return current, iteration
    raise _not_converged()


def _matrix_text(matrix: Matrix) -> str:
    return "".join("".join(f"{x:6.3f}" for x in row) + "\n" for row in matrix)


def _vector_text(vector: Sequence[float]) -> str:
    return "".join(f"{x:8.3f}" for x in vector) + "\n"


def write_report(out: TextIO, seed: int | None = 43) -> None:
    """Write the consensus run and the influence game for a random network."""
    rng = random.Random(seed)
    matrix = random_trust_matrix(_SIZE, rng)
    out.write("[Trust Matrix]\n")
    out.write(_matrix_text(matrix))

    initial = [_uniform(rng, 1, 20) for _ in range(_SIZE)]
    out.write("[Initial opinions (X0)]\n")
    out.write(_vector_text(initial))

    final, power, iterations = converge(matrix, initial)
    out.write(f"Number of iterations n:   {iterations}\n")
    out.write("Final opinions after n iterations of X(n):    \n")
    out.write(_vector_text(final))
    out.write("[Final matrix (all rows must be the same)]\n")
    out.write(_matrix_text(power))
    out.write("\n")

    out.write("[Game with information influence]\n")
    u = _uniform(rng, 10, 100)
    v = -_uniform(rng, 10, 100)
    out.write(f"Management for agents of influence of the first player u: {u:.3f}\n")
    out.write(f"Control for agents of influence of the second player v:   {v:.3f}\n")
    out.write(
        "Indices of agents of influence of the first player:   "
        + "".join(f"{i} " for i in _FIRST_AGENTS)
        + "\n"
    )
    out.write(
        "Indices of agents of influence of the second player:  "
        + "".join(f"{i} " for i in _SECOND_AGENTS)
        + "\n"
    )
    for index in _FIRST_AGENTS:
        initial[index] = u
    for index in _SECOND_AGENTS:
        initial[index] = v
    out.write("[Initial opinions (X0)]\n")
    out.write(_vector_text(initial))

    final, iterations = play_influence_game(
        matrix, initial, _FIRST_AGENTS, _SECOND_AGENTS
    )
    out.write(f"Number of iterations n:   {iterations}\n")
    out.write("[Final opinions after n iterations X(n)]\n")
    out.write(_vector_text(final))
    out.write(
        "The first player wins" if final[0] >= 0 else "The second player wins"
    )