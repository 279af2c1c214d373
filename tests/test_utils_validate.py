"""Unit tests for diffkit.utils.validate."""

import numpy as np
import pytest

from diffkit.utils.validate import (
    as_point,
    check_index,
    check_scalar_valued,
    ensure_finite,
)


def test_as_point_returns_fresh_float_copy():
    """as_point returns a float64 copy that does not alias the input."""
    src = np.array([1, 2, 3])
    out = as_point(src)
    assert out.dtype == np.float64
    out[0] = 10.0
    assert src[0] == 1


def test_as_point_flattens_row_vectors():
    """A (1, n) row vector is flattened to (n,)."""
    assert as_point([[1.0, 2.0]]).shape == (2,)


@pytest.mark.parametrize("bad", [[], np.ones((2, 2)), 3.0])
def test_as_point_rejects_bad_shapes(bad):
    """Empty, matrix-shaped and scalar inputs are rejected."""
    with pytest.raises(ValueError):
        as_point(bad)


def test_check_index_bounds_and_types():
    """check_index accepts valid integers and rejects everything else."""
    assert check_index(0, 3) == 0
    assert check_index(np.int32(2), 3) == 2
    with pytest.raises(IndexError):
        check_index(3, 3)
    with pytest.raises(IndexError):
        check_index(-1, 3)
    with pytest.raises(TypeError):
        check_index(1.5, 3)
    with pytest.raises(TypeError):
        check_index(False, 3)


def test_check_scalar_valued():
    """check_scalar_valued returns the value or raises for vector output."""
    x = np.array([1.0, 2.0])
    assert check_scalar_valued(lambda v: v.sum(), x) == 3.0
    assert check_scalar_valued(lambda v: np.array([v.sum()]), x) == 3.0
    with pytest.raises(TypeError):
        check_scalar_valued(lambda v: v, x)


def test_ensure_finite():
    """ensure_finite passes finite arrays and raises on NaN or inf."""
    assert np.array_equal(ensure_finite([1.0, 2.0], where="test"), [1.0, 2.0])
    with pytest.raises(FloatingPointError, match="test"):
        ensure_finite([1.0, np.inf], where="test")
