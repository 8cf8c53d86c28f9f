import io

import pytest

from matrixgames.continuous import (
    QuadraticKernel,
    grid_matrix,
    solve_grid,
    write_report,
)

PENNIES_KERNEL = QuadraticKernel(a=0.0, b=0.0, c=1.0, d=-0.5, e=-0.5)


def test_kernel_at_origin_and_corner():
    kernel = QuadraticKernel()
    assert kernel(0, 0) == 0
    total = kernel.a + kernel.b + kernel.c + kernel.d + kernel.e
    assert kernel(1, 1) == pytest.approx(total)


def test_default_saddle_point():
    kernel = QuadraticKernel()
    x, y = kernel.saddle_point()
    assert x == pytest.approx(0.4)
    assert y == pytest.approx(0.6)
    assert kernel(x, y) == pytest.approx(-9.6)


def test_saddle_point_undefined_without_quadratic_terms():
    with pytest.raises(ValueError):
        PENNIES_KERNEL.saddle_point()


def test_grid_matrix_shape_and_corners():
    kernel = QuadraticKernel()
    matrix = grid_matrix(kernel, 4)
    assert len(matrix) == 5
    assert all(len(row) == 5 for row in matrix)
    assert matrix[0][0] == kernel(0, 0)
    assert matrix[4][4] == pytest.approx(kernel(1, 1))
    assert matrix[2][1] == pytest.approx(kernel(0.5, 0.25))


def test_grid_needs_a_step():
    with pytest.raises(ValueError):
        grid_matrix(QuadraticKernel(), 0)


@pytest.mark.parametrize("n", [2, 3])
def test_small_grids_have_pure_saddle(n):
    solution = solve_grid(QuadraticKernel(), n)
    assert solution.saddle is not None
    row, column = solution.saddle
    assert solution.lower == solution.upper
    assert solution.value == solution.matrix[row][column]
    assert solution.p[row] == 1.0 and sum(solution.p) == 1.0
    assert solution.q[column] == 1.0 and sum(solution.q) == 1.0
    assert solution.x == pytest.approx(row / n)
    assert solution.y == pytest.approx(column / n)


def test_grid_without_saddle_uses_fictitious_play():
    solution = solve_grid(PENNIES_KERNEL, 1)
    assert solution.saddle is None
    assert solution.lower < solution.upper
    assert sum(solution.p) == pytest.approx(1)
    assert sum(solution.q) == pytest.approx(1)
    assert solution.value == pytest.approx(PENNIES_KERNEL(0.5, 0.5))
    assert solution.x == pytest.approx(solution.p[1])
    assert solution.y == pytest.approx(solution.q[1])


def test_report_single_grid():
    out = io.StringIO()
    write_report(QuadraticKernel(), out, steps=0)
    text = out.getvalue()
    assert text.startswith("Analitika: \n")
    assert "[#0(N=2)]" in text
    assert "* There is a saddle point (maxMin == minMax)" in text
    assert "[#1(N=3)]" not in text
    matrix_lines = [line for line in text.splitlines() if len(line) == 30]
    assert len(matrix_lines) == 3


def test_report_counts_grids():
    out = io.StringIO()
    write_report(QuadraticKernel(), out, steps=1)
    text = out.getvalue()
    assert "[#0(N=2)]" in text
    assert "[#1(N=3)]" in text
    assert text.count("maxMin = ") == 2


def test_report_rejects_negative_steps():
    with pytest.raises(ValueError):
        write_report(QuadraticKernel(), io.StringIO(), steps=-1)