import numpy as np
import pytest

from HouseholderLab.errors import NotSquare
from HouseholderLab.linear_system.hilbert import generate
from HouseholderLab.qr import check_decomposition, decompose

TOL = 1e-9


def assert_valid_qr(matrix, q, r):
    n = matrix.shape[0]
    assert np.allclose(q.T @ q, np.eye(n), rtol=0.0, atol=TOL)
    assert np.allclose(np.tril(r, -1), 0.0, rtol=0.0, atol=TOL)
    assert np.allclose(q @ r, matrix, rtol=TOL, atol=TOL)


@pytest.mark.parametrize("n", [2, 3, 5, 8, 12])
def test_random_square_matrices(n):
    rng = np.random.default_rng(seed=n)
    matrix = rng.normal(size=(n, n))
    q, r = decompose(matrix)
    assert_valid_qr(matrix, q, r)


@pytest.mark.parametrize("n", range(2, 11))
def test_hilbert_matrices(n):
    matrix = generate(n)
    q, r = decompose(matrix)
    assert_valid_qr(matrix, q, r)
    assert all(check_decomposition(matrix, q, r).values())


def test_input_is_not_modified():
    matrix = np.array([[2.0, 1.0], [1.0, 3.0]])
    original = matrix.copy()
    decompose(matrix)
    assert np.array_equal(matrix, original)


def test_one_by_one():
    q, r = decompose([[5.0]])
    assert np.array_equal(q, [[1.0]])
    assert np.array_equal(r, [[5.0]])


def test_upper_triangular_input_up_to_signs():
    # every reflector flips the sign of its pivot row, so Q is a diagonal
    # signature matrix rather than the identity
    r0 = np.array([
        [2.0, 1.0, 3.0],
        [0.0, -4.0, 5.0],
        [0.0, 0.0, 6.0],
    ])
    q, r = decompose(r0)
    assert np.allclose(q, np.diag([-1.0, -1.0, 1.0]))
    assert np.allclose(np.abs(q), np.eye(3))
    assert np.allclose(r, q @ r0)
    assert np.allclose(np.abs(np.diag(r)), np.abs(np.diag(r0)))


def test_zero_pivot_leaves_r_non_triangular():
    # sign(0) = 0: a zero pivot with a nonzero tail is negated, not zeroed
    matrix = np.array([[0.0, 1.0], [1.0, 0.0]])
    q, r = decompose(matrix)
    checks = check_decomposition(matrix, q, r)
    assert checks["orthogonal"]
    assert checks["reconstructs"]
    assert not checks["upper_triangular"]
    assert np.allclose(q, np.diag([1.0, -1.0]))
    assert np.allclose(r, [[0.0, 1.0], [-1.0, 0.0]])


def test_zero_column_uses_identity_reflector():
    matrix = np.array([
        [0.0, 1.0, 2.0],
        [0.0, 3.0, 4.0],
        [0.0, 5.0, 6.0],
    ])
    q, r = decompose(matrix)
    assert np.allclose(q.T @ q, np.eye(3))
    assert np.allclose(q @ r, matrix)
    assert np.allclose(np.tril(r, -1), 0.0, atol=TOL)


def test_not_square():
    with pytest.raises(NotSquare):
        decompose(np.ones((2, 3)))
