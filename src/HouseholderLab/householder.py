""" Householder reflections

H = I - 2 u u^T / (u^T u),  u = v + sign(v[0]) ||v|| e_0

`H` is symmetric and orthogonal. For v[0] != 0 it maps `v` onto
-sign(v[0]) ||v|| e_0.
"""
import logging

import numpy as np
from numpy.typing import ArrayLike

from HouseholderLab.errors import DegenerateReflection, DimensionMismatch
from HouseholderLab.matrix_ops import Matrix, freeze, identity

logger = logging.getLogger(__name__)


def sign(x: float) -> float:
    """ sign(0) is 0, so a zero leading entry is not shifted. """
    if x > 0:
        return 1.0
    if x < 0:
        return -1.0
    return 0.0


def build_reflector(v: ArrayLike) -> Matrix:
    """
    :param v: the vector to reflect, its trailing entries get zeroed
    :raises DegenerateReflection: when `u` has zero norm (zero input)
    """
    v = np.array(v, dtype=np.float64)
    if v.ndim != 1 or v.size == 0:
        raise DimensionMismatch(f"expected a non-empty vector, got {v.shape}")

    alpha = sign(v[0]) * np.linalg.norm(v)
    u = v.copy()
    u[0] += alpha
    norm_sq = float(u @ u)
    if norm_sq == 0.0:
        raise DegenerateReflection(
            f"zero-norm Householder vector of size {v.size}"
        )

    reflector = np.eye(v.size) - 2.0 * np.outer(u, u) / norm_sq
    return freeze(reflector)


def reflector_or_identity(v: ArrayLike) -> Matrix:
    """ `build_reflector`, with the identity standing in for a degenerate
    reflection. """
    try:
        return build_reflector(v)
    except DegenerateReflection as err:
        logger.debug("%s; using the identity", err)
        return identity(len(v))
