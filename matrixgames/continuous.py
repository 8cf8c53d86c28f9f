"""Continuous convex-concave game on the unit square and its grid approximations."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate, repeat
from typing import TextIO

from .brown_robinson import brown_robinson
from .maxmin import max_min, min_max

__all__ = [
    "QuadraticKernel",
    "GridSolution",
    "grid_matrix",
    "solve_grid",
    "write_report",
]

_TOLERANCE = 0.001
_PRINT_LIMIT = 10


@dataclass(frozen=True)
class QuadraticKernel:
    """Payoff H(x, y) = a x^2 + b y^2 + c x y + d x + e y."""

    a: float = -15.0
    b: float = 20.0 / 3
    c: float = 40.0
    d: float = -12.0
    e: float = -24.0

    def __call__(self, x: float, y: float) -> float:
        a, b, c, d, e = self.a, self.b, self.c, self.d, self.e
        return a * x * x + b * y * y + c * x * y + d * x + e * y

    def saddle_point(self) -> tuple[float, float]:
        """Return the stationary point where both partial derivatives vanish."""
        a, b, c, d, e = self.a, self.b, self.c, self.d, self.e
        try:
            x = (c * e / (2 * b) - d) / (2 * a - c * c / (2 * b))
            y = (c * d / (2 * a) - e) / (2 * b - c * c / (2 * a))
        except ZeroDivisionError:
            raise ValueError("kernel has no unique stationary point") from None
        return x, y


@dataclass(frozen=True)
class GridSolution:
    """Solution of the game restricted to a grid of step 1/n.

    ``lower`` and ``upper`` are the pure-strategy bounds; ``saddle`` holds the
    row and column of a pure saddle point if there is one.
    """

    n: int
    matrix: tuple[tuple[float, ...], ...]
    lower: float
    upper: float
    saddle: tuple[int, int] | None
    p: tuple[float, ...]
    q: tuple[float, ...]
    x: float
    y: float
    value: float


def _grid(n: int) -> list[float]:
    if n < 1:
        raise ValueError("grid needs at least one step")
    return list(accumulate(repeat(1.0 / n, n), initial=0.0))


def grid_matrix(kernel: QuadraticKernel, n: int) -> list[list[float]]:
    """Return the (n+1) x (n+1) payoff matrix on the grid 0, 1/n, ..., 1."""
    points = _grid(n)
    return [[kernel(x, y) for y in points] for x in points]


def _unit(size: int, index: int) -> tuple[float, ...]:
    return tuple(1.0 if i == index else 0.0 for i in range(size))


def solve_grid(kernel: QuadraticKernel, n: int) -> GridSolution:
    """Solve the grid game: by its saddle point, or by fictitious play."""
    points = _grid(n)
    matrix = grid_matrix(kernel, n)
    lower = max_min(matrix)
    upper = min_max(matrix)
    frozen = tuple(tuple(row) for row in matrix)

    if lower.value == upper.value:
        row, column = lower.index, upper.index
        step = 1.0 / n
        return GridSolution(
            n,
            frozen,
            lower.value,
            upper.value,
            (row, column),
            _unit(len(points), row),
            _unit(len(points), column),
            step * row,
            step * column,
            upper.value,
        )

    result = brown_robinson(matrix, _TOLERANCE)
    x = sum(point * weight for point, weight in zip(points, result.p))
    y = sum(point * weight for point, weight in zip(points, result.q))
    return GridSolution(
        n, frozen, lower.value, upper.value, None, result.p, result.q, x, y, result.lower
    )


def _strategy_line(label: str, values: tuple[float, ...]) -> str:
    first, *rest = values
    return f"{label}: {first:.3f} " + "".join(f"{v:.5f} " for v in rest) + "\n"


def write_report(kernel: QuadraticKernel, out: TextIO, steps: int = 30) -> None:
    """Write the analytic solution and grid solutions for n = 2 .. steps + 2."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    x, y = kernel.saddle_point()
    out.write("Analitika: \n")
    out.write(f"x = {x:g} y = {y:g}\n")
    out.write(f"H({x:g}, {y:g}) = {kernel(x, y):g}\n")

    for number in range(steps + 1):
        n = number + 2
        solution = solve_grid(kernel, n)
        small = n <= _PRINT_LIMIT
        out.write(f"\n[#{number}(N={n})]\n")
        if small:
            for row in solution.matrix:
                out.write("".join(f"{value:10.3f}" for value in row) + "\n")
        out.write("\n")
        digits = 3 if small else 5
        out.write(
            f"maxMin = {solution.lower:.{digits}f} minMax ={solution.upper:.5f}\n\n"
        )
        if solution.saddle is not None:
            row, column = solution.saddle
            step = 1.0 / n
            out.write("* There is a saddle point (maxMin == minMax)\n")
            out.write(
                f"H({step * row:.5f}, {step * column:.5f}) = "
                f"{solution.matrix[row][column]:.5f}\n"
            )
        else:
            out.write(
                "* No saddle point (maxMin != minMax), "
                "solution by Brown-Robinson method:\n"
            )
            if small:
                out.write(_strategy_line("p", solution.p))
                out.write(_strategy_line("q", solution.q))
        out.write(
            f"x = {solution.x:.5f} y = {solution.y:.5f} H = {solution.value:.5f}\n"
        )