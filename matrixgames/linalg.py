"""Small dense linear algebra and the inverse-matrix solution of a game."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

Matrix = Sequence[Sequence[float]]
Vector = Sequence[float]

_ZERO_THRESHOLD = 1e-9

__all__ = [
    "InverseSolution",
    "determinant",
    "inverse",
    "vector_matrix",
    "matrix_vector",
    "dot",
    "solve_by_inverse",
]


@dataclass(frozen=True)
class InverseSolution:
    """Game value and mixed strategies found through the inverse matrix."""

    value: float
    p: tuple[float, ...]
    q: tuple[float, ...]


def _square(matrix: Matrix) -> list[list[float]]:
    rows = [[float(x) for x in row] for row in matrix]
    if not rows:
        raise ValueError("matrix must not be empty")
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _minor(rows: list[list[float]], skip_row: int, skip_column: int) -> list[list[float]]:
    return [
        row[:skip_column] + row[skip_column + 1:]
        for index, row in enumerate(rows)
        if index != skip_row
    ]


def _det(rows: list[list[float]]) -> float:
    size = len(rows)
    if size == 1:
        return rows[0][0]
    if size == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for column, pivot in enumerate(rows[0]):
        if pivot == 0:
            continue
        sign = -1 if column % 2 else 1
        total += sign * pivot * _det(_minor(rows, 0, column))
    return total


def determinant(matrix: Matrix) -> float:
    """Return the determinant by cofactor expansion along the first row."""
    return _det(_square(matrix))


def inverse(matrix: Matrix) -> list[list[float]]:
    """Return the inverse via the adjugate; entries below 1e-9 become 0.

    Raises ValueError for a singular or non-square matrix.
    """
    rows = _square(matrix)
    size = len(rows)
    if size == 1:
        cofactors = [[1.0]]
    else:
        cofactors = [
            [
                (-1 if (r + c) % 2 else 1) * _det(_minor(rows, r, c))
                for c in range(size)
            ]
            for r in range(size)
        ]
    det = sum(value * cofactor for value, cofactor in zip(rows[0], cofactors[0]))
    if det == 0:
        raise ValueError("matrix is singular")
    result = []
    for column in zip(*cofactors):
        entries = [value / det for value in column]
        result.append([0.0 if abs(x) < _ZERO_THRESHOLD else x for x in entries])
    return result


def vector_matrix(vector: Vector, matrix: Matrix) -> list[float]:
    """Return the row vector ``vector`` times ``matrix``."""
    rows = [list(row) for row in matrix]
    if len(vector) != len(rows):
        raise ValueError("vector length must equal the number of matrix rows")
    if not rows:
        return []
    return [dot(vector, column) for column in zip(*rows, strict=True)]


def matrix_vector(matrix: Matrix, vector: Vector) -> list[float]:
    """Return ``matrix`` times the column vector ``vector``."""
    return [dot(row, vector) for row in matrix]


def dot(first: Vector, second: Vector) -> float:
    """Return the scalar product of two vectors of equal length."""
    if len(first) != len(second):
        raise ValueError("vectors must have the same length")
    return sum(a * b for a, b in zip(first, second))


def solve_by_inverse(matrix: Matrix) -> InverseSolution:
    """Solve a square game whose optimal strategies use every row and column.

    With C the inverse and u the vector of ones: value = 1 / (uCu),
    p = uC / (uCu), q = Cu / (uCu).
    """
    adjoint = inverse(matrix)
    ones = [1.0] * len(adjoint)
    row_sums = vector_matrix(ones, adjoint)
    total = dot(row_sums, ones)
    if total == 0:
        raise ValueError("game has no interior solution")
    p = tuple(x / total for x in row_sums)
    q = tuple(x / total for x in matrix_vector(adjoint, ones))
    return InverseSolution(1 / total, p, q)