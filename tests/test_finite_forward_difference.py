"""Unit tests for diffkit.finite.forward_difference and diffkit.finite.steps."""

import math

import numpy as np
import pytest

from diffkit.finite.forward_difference import (
    mixed_partial,
    partial_derivative,
    shifted_point,
)
from diffkit.finite.steps import (
    DEFAULT_FIRST_ORDER_STEP,
    DEFAULT_SECOND_ORDER_STEP,
    validate_stepsize,
)


def model_smooth_2d(x):
    """A smooth nonlinear function in two dimensions."""
    return np.sin(x[0]) + np.exp(x[1]) + x[0] * x[1]


def model_bilinear(x):
    """f(x, y) = x * y, whose mixed partial is exactly 1."""
    return x[0] * x[1]


def model_vector_output(x):
    """A model that returns a vector output instead of a scalar."""
    return np.array([x[0], x[1]])


def test_default_steps():
    """Tests the documented default step sizes."""
    assert DEFAULT_FIRST_ORDER_STEP == pytest.approx(1.4901161193847656e-8)
    assert DEFAULT_FIRST_ORDER_STEP == math.sqrt(np.finfo(np.float64).eps)
    assert DEFAULT_SECOND_ORDER_STEP == 1e-5


@pytest.mark.parametrize("bad", [0.0, -1e-3, float("nan"), float("inf")])
def test_validate_stepsize_rejects_bad_values(bad):
    """Tests that unusable step sizes raise ValueError."""
    with pytest.raises(ValueError):
        validate_stepsize(bad)


def test_shifted_point_copies_and_shifts():
    """Tests that shifting returns a new array and leaves the base intact."""
    base = np.array([1.0, 2.0, 3.0])
    out = shifted_point(base, 0.5, 0, 2)
    assert np.array_equal(out, [1.5, 2.0, 3.5])
    assert np.array_equal(base, [1.0, 2.0, 3.0])
    assert np.array_equal(shifted_point(base, 0.5, 1, 1), [1.0, 3.0, 3.0])


def test_partial_derivative_matches_forward_formula():
    """Tests the exact forward-difference formula."""
    h = 1e-3
    x0 = np.array([0.3, -0.5])
    expected = (model_smooth_2d(x0 + [h, 0.0]) - model_smooth_2d(x0)) / h
    assert partial_derivative(model_smooth_2d, x0, 0, h) == expected


def test_partial_derivative_converges_with_default_step():
    """Tests agreement with the analytic partial derivatives."""
    x0 = [0.3, -0.5]
    assert partial_derivative(model_smooth_2d, x0, 0) == pytest.approx(
        math.cos(0.3) - 0.5, abs=1e-6
    )
    assert partial_derivative(model_smooth_2d, x0, 1) == pytest.approx(
        math.exp(-0.5) + 0.3, abs=1e-6
    )


def test_partial_derivative_error_is_first_order_in_step():
    """Tests that halving a large step roughly halves the truncation error."""
    f = lambda x: x[0] ** 3  # noqa: E731
    truth = 3.0
    err_1 = abs(partial_derivative(f, [1.0], 0, 1e-2) - truth)
    err_2 = abs(partial_derivative(f, [1.0], 0, 5e-3) - truth)
    assert err_2 == pytest.approx(err_1 / 2.0, rel=0.05)


@pytest.mark.parametrize("index", [2, -1, 10])
def test_partial_derivative_index_out_of_range(index):
    """Tests that out-of-range indices raise IndexError."""
    with pytest.raises(IndexError):
        partial_derivative(model_smooth_2d, [0.1, 0.2], index)


def test_partial_derivative_rejects_non_integer_index():
    """Tests that non-integer indices raise TypeError."""
    with pytest.raises(TypeError):
        partial_derivative(model_smooth_2d, [0.1, 0.2], 1.0)
    with pytest.raises(TypeError):
        partial_derivative(model_smooth_2d, [0.1, 0.2], True)


def test_partial_derivative_accepts_numpy_integer_index():
    """Tests that NumPy integer indices are accepted."""
    val = partial_derivative(model_bilinear, [2.0, 3.0], np.int64(1), 1e-4)
    assert val == pytest.approx(2.0, abs=1e-8)


def test_partial_derivative_rejects_non_scalar_output():
    """Tests that vector-valued functions are rejected."""
    with pytest.raises(TypeError):
        partial_derivative(model_vector_output, [1.0, 2.0], 0)


def test_partial_derivative_rejects_bad_points():
    """Tests that empty and matrix-shaped points are rejected."""
    with pytest.raises(ValueError):
        partial_derivative(model_smooth_2d, [], 0)
    with pytest.raises(ValueError):
        partial_derivative(model_smooth_2d, np.ones((2, 2)), 0)


def test_partial_derivative_does_not_modify_input():
    """Tests that the caller's point is never perturbed in place."""
    x0 = np.array([0.1, 0.2])
    copy = x0.copy()
    _ = partial_derivative(model_smooth_2d, x0, 1)
    assert np.array_equal(x0, copy)


def test_function_cannot_corrupt_later_evaluations():
    """Tests that a function mutating its argument does not affect the stencil."""
    seen = []

    def mutating(x):
        seen.append(x.copy())
        value = float(x[0])
        x[0] = 1e6
        return value

    val = partial_derivative(mutating, [1.0], 0, 0.5)
    assert val == pytest.approx(1.0)
    assert seen[-1][0] == 1.0


def test_partial_derivative_propagates_function_errors():
    """Tests that errors raised by the function reach the caller unchanged."""
    class ModelError(RuntimeError):
        pass

    def broken(_x):
        raise ModelError("boom")

    with pytest.raises(ModelError, match="boom"):
        partial_derivative(broken, [1.0], 0)


def test_mixed_partial_matches_four_point_stencil():
    """Tests the exact four-point formula."""
    h = 1e-3
    x0 = np.array([0.3, -0.5])
    ei = np.array([h, 0.0])
    ej = np.array([0.0, h])
    f = model_smooth_2d
    expected = (f(x0 + ei + ej) - f(x0 + ei) - f(x0 + ej) + f(x0)) / h**2
    assert mixed_partial(f, x0, 0, 1, h) == pytest.approx(expected, rel=1e-12)


def test_mixed_partial_of_bilinear_is_one():
    """Tests d2(xy)/dxdy = 1."""
    assert mixed_partial(model_bilinear, [2.0, -3.0], 0, 1) == pytest.approx(1.0, abs=1e-3)
    assert mixed_partial(model_bilinear, [2.0, -3.0], 1, 0) == pytest.approx(1.0, abs=1e-3)


def test_mixed_partial_diagonal_is_second_derivative():
    """Tests that i == j gives the one-sided second difference."""
    val = mixed_partial(model_smooth_2d, [0.3, -0.5], 0, 0)
    assert val == pytest.approx(-math.sin(0.3), abs=1e-3)


def test_mixed_partial_index_errors():
    """Tests index validation for both coordinates."""
    with pytest.raises(IndexError):
        mixed_partial(model_bilinear, [1.0, 2.0], 0, 2)
    with pytest.raises(IndexError):
        mixed_partial(model_bilinear, [1.0, 2.0], 3, 0)


def test_operations_are_deterministic():
    """Tests that repeated calls are bit-identical."""
    x0 = [0.7, 0.1]
    assert partial_derivative(model_smooth_2d, x0, 0) == partial_derivative(model_smooth_2d, x0, 0)
    assert mixed_partial(model_smooth_2d, x0, 0, 1) == mixed_partial(model_smooth_2d, x0, 0, 1)
