import pytest

from matrixgames.linalg import (
    InverseSolution,
    determinant,
    dot,
    inverse,
    matrix_vector,
    solve_by_inverse,
    vector_matrix,
)

GAME = [
    [17, 4, 9],
    [0, 16, 9],
    [12, 2, 19],
]

FOUR = [
    [2, 0, 1, 3],
    [1, 4, 0, 2],
    [0, 1, 5, 1],
    [3, 2, 1, 6],
]


def _product(a, b):
    return [matrix_vector(a, column) for column in zip(*b)]


def _assert_identity(matrix):
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            assert value == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)


def test_identity_determinant_and_inverse():
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert determinant(identity) == 1
    assert inverse(identity) == [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]


def test_one_by_one():
    assert determinant([[4]]) == 4
    assert inverse([[4]]) == [[0.25]]


def test_swapping_rows_negates_determinant():
    swapped = [GAME[1], GAME[0], GAME[2]]
    assert determinant(swapped) == pytest.approx(-determinant(GAME))


def test_duplicate_row_gives_zero_determinant():
    assert determinant([[1, 2, 3], [4, 5, 6], [1, 2, 3]]) == 0


@pytest.mark.parametrize("matrix", [GAME, FOUR, [[3, 1], [2, 5]]])
def test_inverse_times_matrix_is_identity(matrix):
    inv = inverse(matrix)
    _assert_identity(_product(inv, matrix))
    _assert_identity(_product(matrix, inv))


@pytest.mark.parametrize("matrix", [GAME, FOUR])
def test_determinant_of_inverse_is_reciprocal(matrix):
    assert determinant(matrix) * determinant(inverse(matrix)) == pytest.approx(1.0)


def test_inverse_of_singular_matrix_rejected():
    with pytest.raises(ValueError):
        inverse([[1, 2], [2, 4]])


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        determinant([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(ValueError):
        inverse([[1, 2, 3], [4, 5, 6]])


def test_vector_matrix_matches_transposed_matrix_vector():
    vector = [1, -2, 3]
    transposed = [list(column) for column in zip(*GAME)]
    assert vector_matrix(vector, GAME) == matrix_vector(transposed, vector)


def test_vector_products_with_unit_vectors_select_rows_and_columns():
    assert vector_matrix([0, 1, 0], GAME) == GAME[1]
    assert matrix_vector(GAME, [0, 0, 1]) == [row[2] for row in GAME]


def test_dot_is_symmetric():
    assert dot([1, 2, 3], [4, -5, 6]) == dot([4, -5, 6], [1, 2, 3])


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        dot([1, 2], [1, 2, 3])
    with pytest.raises(ValueError):
        vector_matrix([1, 2], GAME)
    with pytest.raises(ValueError):
        matrix_vector(GAME, [1, 2])


def test_solve_by_inverse_gives_probability_vectors():
    solution = solve_by_inverse(GAME)
    assert isinstance(solution, InverseSolution)
    assert sum(solution.p) == pytest.approx(1.0)
    assert sum(solution.q) == pytest.approx(1.0)
    assert all(x >= 0 for x in solution.p + solution.q)


def test_solve_by_inverse_strategies_equalise_payoffs():
    solution = solve_by_inverse(GAME)
    for payoff in vector_matrix(solution.p, GAME):
        assert payoff == pytest.approx(solution.value)
    for payoff in matrix_vector(GAME, solution.q):
        assert payoff == pytest.approx(solution.value)


def test_solve_by_inverse_singular_rejected():
    with pytest.raises(ValueError):
        solve_by_inverse([[1, 1], [1, 1]])