""" Dense matrix primitives on read-only float64 arrays.

Every function returns a new array with `writeable=False`; nothing is
modified in place. A `Matrix` is 2-D, a `Vector` is 1-D.
"""
import logging
import warnings
from typing import Final, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import linalg

from HouseholderLab.errors import DimensionMismatch, NotSquare, SingularMatrix

Matrix = NDArray[np.float64]
Vector = NDArray[np.float64]

# smallest LU pivot allowed, relative to the largest one
SINGULAR_TOLERANCE: Final[float] = 1e-14

logger = logging.getLogger(__name__)


def freeze(array: NDArray) -> NDArray:
    array.setflags(write=False)
    return array


def identity(n: int) -> Matrix:
    return freeze(np.eye(n, dtype=np.float64))


def zero(n: int) -> Matrix:
    return freeze(np.zeros((n, n), dtype=np.float64))


def from_rows(rows: Iterable[Sequence[float]]) -> Matrix:
    rows = [list(row) for row in rows]
    lengths = {len(row) for row in rows}
    if len(lengths) > 1:
        raise DimensionMismatch(f"rows have different lengths: {sorted(lengths)}")
    if not rows:
        return freeze(np.zeros((0, 0), dtype=np.float64))
    return freeze(np.array(rows, dtype=np.float64))


def from_elements(values: Iterable[float]) -> Vector:
    return freeze(np.array(list(values), dtype=np.float64))


def as_matrix(matrix: ArrayLike) -> Matrix:
    """ Read-only float64 copy of a 2-D array-like. """
    array = np.array(matrix, dtype=np.float64)
    if array.ndim != 2:
        raise DimensionMismatch(f"expected a 2-D matrix, got {array.ndim}-D")
    return freeze(array)


def row_count(matrix: Matrix) -> int:
    return matrix.shape[0]


def column_count(matrix: Matrix) -> int:
    return matrix.shape[1]


def is_square(matrix: Matrix) -> bool:
    return matrix.ndim == 2 and matrix.shape[0] == matrix.shape[1]


def require_square(matrix: Matrix) -> None:
    if not is_square(matrix):
        raise NotSquare(f"expected a square matrix, got shape {matrix.shape}")


def multiply(left: Matrix, right: Matrix | Vector) -> Matrix | Vector:
    """
    `left @ right`. A vector on the right is treated as a column and the
    result is a vector.
    """
    left = np.asarray(left, dtype=np.float64)
    right = np.asarray(right, dtype=np.float64)
    if left.ndim != 2 or right.ndim not in (1, 2):
        raise DimensionMismatch(
            f"cannot multiply shapes {left.shape} and {right.shape}"
        )
    if left.shape[1] != right.shape[0]:
        raise DimensionMismatch(
            f"cannot multiply {left.shape[0]}x{left.shape[1]} "
            f"by {right.shape[0]}-row operand"
        )
    return freeze(left @ right)


def transpose(matrix: Matrix) -> Matrix:
    return freeze(np.array(matrix, dtype=np.float64).T.copy())


def column(matrix: Matrix, j: int) -> Vector:
    return freeze(np.array(matrix[:, j], dtype=np.float64))


def sub_column(matrix: Matrix, j: int) -> Vector:
    """ Column `j` restricted to rows `j..end`. """
    return freeze(np.array(matrix[j:, j], dtype=np.float64))


def embed(block: Matrix, n: int, offset: int) -> Matrix:
    """
    `n x n` identity with the square `block` placed on the diagonal at
    `(offset, offset)`.
    """
    require_square(block)
    k = block.shape[0]
    if offset < 0 or offset + k > n:
        raise DimensionMismatch(
            f"a {k}x{k} block at offset {offset} does not fit in {n}x{n}"
        )
    embedded = np.eye(n, dtype=np.float64)
    embedded[offset:offset + k, offset:offset + k] = block
    return freeze(embedded)


def inverse(matrix: Matrix, tolerance: float = SINGULAR_TOLERANCE) -> Matrix:
    """
    Dense inverse with an explicit singularity check.

    The matrix is LU factorized first; if the smallest pivot magnitude is at
    most `tolerance` times the largest one, `SingularMatrix` is raised
    instead of returning an inverse full of round-off.
    """
    require_square(matrix)
    matrix = np.asarray(matrix, dtype=np.float64)
    n = matrix.shape[0]
    if n == 0:
        return freeze(matrix.copy())

    with warnings.catch_warnings():
        # an exactly zero pivot is reported below as SingularMatrix
        warnings.simplefilter("ignore", linalg.LinAlgWarning)
        lu, _ = linalg.lu_factor(matrix)
    pivots = np.abs(np.diag(lu))
    largest = pivots.max()
    ratio = pivots.min() / largest if largest > 0.0 else 0.0
    if ratio <= tolerance:
        logger.debug(
            "pivot ratio %.3e below tolerance %.1e for %dx%d matrix",
            ratio, tolerance, n, n,
        )
        raise SingularMatrix(
            f"{n}x{n} matrix is singular to working precision "
            f"(pivot ratio {ratio:.3e}, tolerance {tolerance:.1e})"
        )

    try:
        result = linalg.inv(matrix)
    except linalg.LinAlgError as err:
        raise SingularMatrix(f"{n}x{n} matrix is singular: {err}") from err
    if not np.all(np.isfinite(result)):
        raise SingularMatrix(f"inverse of the {n}x{n} matrix is not finite")
    return freeze(result)
