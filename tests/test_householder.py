import numpy as np
import pytest

from HouseholderLab.errors import DegenerateReflection
from HouseholderLab.householder import (
    build_reflector, reflector_or_identity, sign,
)


def test_sign_of_zero_is_zero():
    assert sign(0.0) == 0.0
    assert sign(-0.0) == 0.0
    assert sign(3.5) == 1.0
    assert sign(-1e-300) == -1.0


@pytest.mark.parametrize("v", [
    [3.0, 4.0],
    [1.0, 2.0, 2.0],
    [-2.0, 1.0, 0.5, -7.0],
    [1e-8, 1.0, 1.0],
])
def test_reflector_zeroes_trailing_entries(v):
    v = np.array(v)
    h = build_reflector(v)
    alpha = np.sign(v[0]) * np.linalg.norm(v)

    assert h.shape == (v.size, v.size)
    assert np.allclose(h, h.T, atol=1e-12)
    assert np.allclose(h @ h, np.eye(v.size), atol=1e-9)
    reflected = h @ v
    assert reflected[0] == pytest.approx(-alpha)
    assert np.allclose(reflected[1:], 0.0, atol=1e-9)


def test_random_reflectors_are_orthogonal():
    rng = np.random.default_rng(seed=20250508)
    for size in range(2, 9):
        v = rng.normal(size=size)
        h = build_reflector(v)
        assert np.allclose(h.T @ h, np.eye(size), atol=1e-9)
        assert np.allclose((h @ v)[1:], 0.0, atol=1e-9)


def test_zero_leading_entry_negates_vector():
    # sign(0) = 0 leaves u = v, so the reflection maps v onto -v
    v = np.array([0.0, 3.0, 4.0])
    h = build_reflector(v)
    assert np.allclose(h @ h, np.eye(3))
    assert np.allclose(h @ v, -v)


def test_single_entry_reflector():
    assert np.allclose(build_reflector([5.0]), [[-1.0]])


def test_zero_vector_is_degenerate():
    with pytest.raises(DegenerateReflection):
        build_reflector([0.0, 0.0, 0.0])


def test_degenerate_reflection_falls_back_to_identity():
    assert np.array_equal(reflector_or_identity([0.0, 0.0]), np.eye(2))


def test_reflector_is_read_only():
    h = build_reflector([1.0, 1.0])
    with pytest.raises(ValueError):
        h[0, 0] = 0.0
