import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import linalg

from HouseholderLab.linear_system.hilbert import build_hilbert_system
from HouseholderLab.linear_system.residuals import (
    decomposition_residual, solution_residual,
)
from HouseholderLab.linear_system.utils import LinearSystem
from HouseholderLab.matrix_ops import (
    Matrix, Vector, from_elements, inverse, multiply, transpose,
)
from HouseholderLab.qr import decompose

logger = logging.getLogger(__name__)


def solve(
    matrix: ArrayLike,
    rhs: ArrayLike,
    transpose_q: bool = False,
) -> Vector:
    """
    x = inverse(R) @ inverse(Q) @ rhs

    `Q` is orthogonal, so `transpose_q=True` swaps its inverse for the
    cheaper and better conditioned transpose.

    :raises SingularMatrix: when `R` (or `Q`) cannot be inverted
    """
    q, r = decompose(matrix)
    return solve_factored(q, r, rhs, transpose_q=transpose_q)


def solve_factored(
    q: Matrix,
    r: Matrix,
    rhs: ArrayLike,
    transpose_q: bool = False,
) -> Vector:
    rhs = from_elements(np.ravel(rhs))
    q_inverse = transpose(q) if transpose_q else inverse(q)
    return multiply(multiply(inverse(r), q_inverse), rhs)


def solve_hilbert(
    n: int,
    transpose_q: bool = False,
) -> tuple[Vector, float, float]:
    """
    Solve `H x = ones` for the `n x n` Hilbert matrix.

    Return tuple: [x, decomposition residual, solution residual]
    """
    ls = build_hilbert_system(n)
    q, r = decompose(ls.matrix)
    x = solve_factored(q, r, ls.rhs, transpose_q=transpose_q)
    err1 = decomposition_residual(ls.matrix, q, r)
    err2 = solution_residual(ls.matrix, x, ls.rhs)
    logger.debug("n=%d err1=%.3e err2=%.3e", n, err1, err2)
    return x, err1, err2


def householder(ls: LinearSystem) -> NDArray:
    solution = solve(ls.matrix, ls.rhs)

    if ls.solution is None:
        ls.solution = solution
    else:
        assert np.allclose(ls.solution, solution), "householder must match"

    return solution


def brute_force(ls: LinearSystem) -> NDArray:
    solution = linalg.inv(ls.matrix).dot(ls.rhs)

    if ls.solution is None:
        ls.solution = solution
    else:
        assert np.allclose(ls.solution, solution), "brute force must match"

    return solution


def recommended(ls: LinearSystem) -> NDArray:
    solution = linalg.solve(ls.matrix, ls.rhs)

    if ls.solution is None:
        ls.solution = solution
    else:
        assert np.allclose(ls.solution, solution), "solve must match"

    return solution
