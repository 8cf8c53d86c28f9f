import io
import random

import pytest

from matrixgames.bimatrix import (
    GIVEN_FIRST,
    GIVEN_SECOND,
    MixedEquilibrium,
    is_nash_equilibrium,
    is_pareto_optimal,
    mixed_equilibrium,
    nash_set,
    pareto_set,
    random_matrix,
    write_report,
)

DILEMMA_FIRST = [[3, 0], [5, 1]]
DILEMMA_SECOND = [[4, 6], [1, 2]]


def _dominates(a, b, cell, other):
    (i, j), (k, m) = cell, other
    return (a[k][m] >= a[i][j] and b[k][m] > b[i][j]) or (
        a[k][m] > a[i][j] and b[k][m] >= b[i][j]
    )


def test_dilemma_pareto_set():
    assert pareto_set(DILEMMA_FIRST, DILEMMA_SECOND) == [(0, 0), (0, 1), (1, 0)]


def test_dilemma_nash_set():
    assert nash_set(DILEMMA_FIRST, DILEMMA_SECOND) == [(1, 1)]


def test_dominated_cell_is_not_pareto():
    assert is_pareto_optimal(DILEMMA_FIRST, DILEMMA_SECOND, 1, 1) is False
    assert is_pareto_optimal(DILEMMA_FIRST, DILEMMA_SECOND, 0, 0) is True


def test_equal_payoffs_are_not_reported_as_nash():
    assert is_nash_equilibrium([[1]], [[1]], 0, 0) is False
    assert is_nash_equilibrium([[1]], [[2]], 0, 0) is True


def test_single_cell_is_pareto():
    assert pareto_set([[7]], [[7]]) == [(0, 0)]


def test_given_option_has_two_pure_equilibria():
    assert nash_set(GIVEN_FIRST, GIVEN_SECOND) == [(0, 0), (1, 1)]


def test_pareto_set_covers_every_dominated_cell():
    rng = random.Random(5)
    first = random_matrix(6, 20, rng)
    second = random_matrix(6, 20, rng)
    front = pareto_set(first, second)
    assert front
    for i in range(6):
        for j in range(6):
            if (i, j) not in front:
                assert any(_dominates(first, second, (i, j), p) for p in front)


def test_nash_cells_are_best_responses():
    rng = random.Random(11)
    for _ in range(20):
        first = random_matrix(4, 10, rng)
        second = random_matrix(4, 10, rng)
        for i, j in nash_set(first, second):
            assert first[i][j] == max(row[j] for row in first)
            assert second[i][j] == max(second[i])
            assert first[i][j] != second[i][j]


def test_random_matrix_shape_and_range():
    matrix = random_matrix(10, 100, random.Random(1))
    assert len(matrix) == 10
    assert all(len(row) == 10 for row in matrix)
    assert all(0 <= value < 100 for row in matrix for value in row)


def test_random_matrix_is_reproducible():
    first = random_matrix(3, 50, random.Random(7))
    second = random_matrix(3, 50, random.Random(7))
    assert first == second
    assert len(first) == 3
    assert all(len(row) == 3 for row in first)
    assert all(0 <= value < 50 for row in first for value in row)
    other = random_matrix(3, 50, random.Random(8))
    assert first != other


@pytest.mark.parametrize("size, upper", [(0, 10), (2, 0)])
def test_random_matrix_rejects_bad_arguments(size, upper):
    with pytest.raises(ValueError):
        random_matrix(size, upper, random.Random(0))


def test_mixed_equilibrium_makes_opponents_indifferent():
    solution = mixed_equilibrium(GIVEN_FIRST, GIVEN_SECOND)
    assert isinstance(solution, MixedEquilibrium)
    assert sum(solution.x) == pytest.approx(1.0)
    assert sum(solution.y) == pytest.approx(1.0)
    for row in GIVEN_FIRST:
        payoff = sum(a * q for a, q in zip(row, solution.y))
        assert payoff == pytest.approx(solution.first_value)
    for column in zip(*GIVEN_SECOND):
        payoff = sum(b * p for b, p in zip(column, solution.x))
        assert payoff == pytest.approx(solution.second_value)


def test_mixed_equilibrium_rejects_singular_matrix():
    with pytest.raises(ValueError):
        mixed_equilibrium([[1, 2], [2, 4]], GIVEN_SECOND)


def test_shape_mismatch_is_rejected():
    with pytest.raises(ValueError):
        pareto_set([[1, 2], [3, 4]], [[1, 2]])


def test_cell_outside_matrix_is_rejected():
    with pytest.raises(IndexError):
        is_nash_equilibrium(DILEMMA_FIRST, DILEMMA_SECOND, 2, 0)


def test_report_contains_given_option_and_mixed_solution():
    out = io.StringIO()
    write_report(out, random.Random(3))
    text = out.getvalue()
    assert "The 1st 2x2 matrix from the given option:\n    4    5\n    0    7\n" in text
    assert "The 2st 2x2 matrix from the given option:\n    7    2\n    2    3\n" in text
    assert text.count("[The Nash solution]") == 5
    assert "[The Pareto solution]:\n" in text
    solution = mixed_equilibrium(GIVEN_FIRST, GIVEN_SECOND)
    assert f"v1:    {solution.first_value:.3f}\n" in text
    assert f"v2:    {solution.second_value:.3f}\n" in text
    assert "\ti: 1\tj: 1\tM1: 4\tM2: 7\n" in text


def test_report_is_reproducible_for_same_seed():
    first, second = io.StringIO(), io.StringIO()
    write_report(first, random.Random(9))
    write_report(second, random.Random(9))
    assert first.getvalue() == second.getvalue()