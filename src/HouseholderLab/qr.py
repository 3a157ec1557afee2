""" QR decomposition by successive Householder reflections. """
import logging
from typing import Final

import numpy as np
from numpy.typing import ArrayLike

from HouseholderLab.householder import reflector_or_identity
from HouseholderLab.matrix_ops import (
    Matrix, as_matrix, embed, identity, multiply, require_square, sub_column,
    transpose,
)

ORTHOGONALITY_TOLERANCE: Final[float] = 1e-9

logger = logging.getLogger(__name__)


def decompose(matrix: ArrayLike) -> tuple[Matrix, Matrix]:
    """
    Factorize a square `matrix` as `Q @ R`.

    Step `k` reflects the sub-column `current[k:, k]` onto the first axis
    and lifts the reflector back to full size. The reflectors are
    multiplied into `Q` in the order they were built.

    Return tuple: [Q, R]
    """
    current = as_matrix(matrix)
    require_square(current)
    n = current.shape[0]

    reflectors = []
    for k in range(n):
        v = sub_column(current, k)
        if v.size < 2:
            break
        reflector = embed(reflector_or_identity(v), n, offset=k)
        current = multiply(reflector, current)
        reflectors.append(reflector)
        logger.debug("step %d: reflected a %d-entry sub-column", k, v.size)

    q = identity(n)
    for reflector in reflectors:
        q = multiply(q, reflector)

    return q, current


def check_decomposition(
    matrix: ArrayLike,
    q: Matrix,
    r: Matrix,
    tol: float = ORTHOGONALITY_TOLERANCE,
) -> dict[str, bool]:
    """ Entrywise postcondition checks of a QR pair against `matrix`. """
    matrix = as_matrix(matrix)
    n = q.shape[0]
    checks = {
        "orthogonal": bool(np.allclose(
            multiply(transpose(q), q), identity(n), rtol=0.0, atol=tol,
        )),
        "upper_triangular": bool(np.allclose(
            np.tril(r, -1), 0.0, rtol=0.0, atol=tol,
        )),
        "reconstructs": bool(np.allclose(
            multiply(q, r), matrix, rtol=tol, atol=tol,
        )),
    }
    return checks
