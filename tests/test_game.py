import io

import pytest

from matrixgames.game import solve_game
from matrixgames.linalg import solve_by_inverse
from matrixgames.maxmin import max_min, min_max


def test_fully_mixed_game_matches_inverse_method():
    matrix = [[3, 1], [1, 3]]
    solution = solve_game(matrix)
    expected = solve_by_inverse(matrix)
    assert solution.first_value == pytest.approx(expected.value)
    assert solution.second_value == pytest.approx(expected.value)
    assert solution.p == pytest.approx(expected.p)
    assert solution.q == pytest.approx(expected.q)


def test_saddle_point_game():
    matrix = [[4, 5], [2, 1]]
    solution = solve_game(matrix)
    assert solution.first_value == pytest.approx(max_min(matrix).value)
    assert solution.second_value == pytest.approx(min_max(matrix).value)
    assert solution.p == pytest.approx((1.0, 0.0))
    assert solution.q == pytest.approx((1.0, 0.0))


def test_strategies_are_distributions_and_guarantee_value():
    matrix = [[3, 1], [1, 3]]
    solution = solve_game(matrix)
    assert sum(solution.p) == pytest.approx(1.0)
    assert sum(solution.q) == pytest.approx(1.0)
    for column in zip(*matrix):
        assert sum(a * p for a, p in zip(column, solution.p)) >= solution.first_value - 1e-9
    for row in matrix:
        assert sum(a * q for a, q in zip(row, solution.q)) <= solution.second_value + 1e-9


def test_value_lies_between_pure_bounds():
    matrix = [[3, 1], [1, 3]]
    solution = solve_game(matrix)
    assert max_min(matrix).value <= solution.first_value <= min_max(matrix).value


def test_report_contains_both_programs():
    out = io.StringIO()
    solve_game([[3, 1], [1, 3]], out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "(task) player №1:"
    assert lines[1] == "F(U)=1.00u1 + 1.00u2 --> min"
    assert "(task) player №2:" in lines
    assert "F(V)=-1.00v1 + -1.00v2 --> min" in lines


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        solve_game([[1, 2], [3]])
    with pytest.raises(ValueError):
        solve_game([])