""" Text rendering and triangularity diagnostics for results. """
import numpy as np
from numpy.typing import ArrayLike


def format_entry(value: float) -> str:
    truncated = int(value)
    text = ' ' if truncated >= 0 else ''
    if float(f'{value:.3f}') == truncated:
        text += f'{truncated}     '
    else:
        text += f'{value:.3f} '
    return text


def format_matrix(matrix: ArrayLike) -> str:
    """ One line per row; whole numbers are printed without decimals.
    A vector is printed as a column. """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim == 1:
        matrix = matrix.reshape(-1, 1)
    lines = [''.join(format_entry(value) for value in row) for row in matrix]
    return ''.join(line + '\n' for line in lines)


def pretty_print(matrix: ArrayLike):
    print(format_matrix(matrix), end='')


def is_upper_triangular(matrix: ArrayLike, tol: float = 0.0) -> bool:
    """ Everything strictly below the diagonal is within `tol` of zero. """
    matrix = np.asarray(matrix)
    return bool(np.all(np.abs(np.tril(matrix, -1)) <= tol))


def is_lower_triangular(matrix: ArrayLike, tol: float = 0.0) -> bool:
    """ Everything strictly above the diagonal is within `tol` of zero. """
    matrix = np.asarray(matrix)
    return bool(np.all(np.abs(np.triu(matrix, 1)) <= tol))
