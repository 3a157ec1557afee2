""" Error metrics for a QR pair and for a computed solution. """
import numpy as np
from numpy.typing import ArrayLike

from HouseholderLab.matrix_ops import Matrix, Vector, as_matrix, multiply


def decomposition_residual(matrix: ArrayLike, q: Matrix, r: Matrix) -> float:
    """
    Smallest absolute row sum of `Q @ R - matrix`.

    Note this is the minimum over the rows, not the worst row, so it is a
    lower bound on the infinity norm of the residual.
    """
    difference = multiply(q, r) - as_matrix(matrix)
    row_sums = np.abs(difference).sum(axis=1)
    return float(row_sums.min())


def solution_residual(matrix: ArrayLike, x: Vector, rhs: Vector) -> float:
    """ ||matrix @ x - rhs||_2 """
    return float(np.linalg.norm(multiply(as_matrix(matrix), x) - rhs))


def forward_error(x: Vector, x_exact: Vector) -> float:
    """ ||x - x_exact||_2 """
    return float(np.linalg.norm(np.asarray(x) - np.asarray(x_exact)))
