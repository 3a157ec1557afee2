""" Hilbert matrices, H[i, j] = 1 / (i + j + 1), the classic ill-conditioned
test family. """
import numpy as np
from scipy import linalg

from HouseholderLab.linear_system.utils import LinearSystem
from HouseholderLab.matrix_ops import Matrix, Vector, freeze


def generate(n: int) -> Matrix:
    if n < 1:
        raise ValueError(f"Hilbert matrix order must be positive, got {n}")
    return freeze(linalg.hilbert(n).astype(np.float64))


def exact_solution(n: int) -> Vector:
    """ Solution of `H x = ones` from the exact integer inverse. """
    inverse = linalg.invhilbert(n, exact=True)
    solution = np.array(inverse.sum(axis=1), dtype=np.float64)
    return freeze(solution)


def build_hilbert_system(n: int) -> LinearSystem:
    """ `H x = b` with `b` all ones, as the driver solves it. """
    return LinearSystem(
        matrix=generate(n),
        rhs=freeze(np.ones(n, dtype=np.float64)),
        solution=exact_solution(n),
    )
