"""Forward-difference estimates of first and second partial derivatives.

The user must specify the scalar function to differentiate, the point at
which to differentiate and the coordinate(s) of interest. Coordinates are
zero-based.

Examples:
--------
First partial derivative with the default step:

>>> import numpy as np
>>> from diffkit.finite.forward_difference import partial_derivative
>>> f = lambda x: x[0] ** 2 + 3.0 * x[1]
>>> bool(np.isclose(partial_derivative(f, [1.0, 2.0], 0), 2.0, atol=1e-6))
True

Mixed second partial derivative:

>>> from diffkit.finite.forward_difference import mixed_partial
>>> g = lambda x: x[0] * x[1]
>>> bool(np.isclose(mixed_partial(g, [1.0, 2.0], 0, 1), 1.0, atol=1e-4))
True
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from diffkit.finite.steps import (
    DEFAULT_FIRST_ORDER_STEP,
    DEFAULT_SECOND_ORDER_STEP,
    validate_stepsize,
)
from diffkit.utils.validate import as_point, check_index

__all__ = [
    "partial_derivative",
    "mixed_partial",
    "shifted_point",
    "evaluate",
    "second_difference",
]


def shifted_point(
    point: NDArray[np.float64],
    stepsize: float,
    *indices: int,
) -> NDArray[np.float64]:
    """Returns a copy of ``point`` with ``stepsize`` added once per index.

    ``shifted_point(x, h, i, j)`` is ``x + h e_i + h e_j``; for ``i == j`` the
    coordinate is shifted twice. Every stencil builds its points through this
    helper so the same point is always computed with the same rounding.

    Args:
        point: Base point. Not modified.
        stepsize: Step size ``h``.
        *indices: Zero-based coordinates to shift.

    Returns:
        A new array holding the shifted point.
    """
    x = point.copy()
    for k in indices:
        x[k] += stepsize
    return x


def evaluate(function: Callable, x: NDArray[np.float64]) -> float:
    """Evaluates a scalar-valued function and returns the result as a float.

    The function receives a copy of ``x``.

    Raises:
        TypeError: If ``function`` does not return a scalar value.
    """
    val = np.asarray(function(x.copy()), dtype=float)
    if val.size != 1:
        raise TypeError(
            f"Expected a scalar-valued function; got output with shape {val.shape}."
        )
    return float(val.item())


def partial_derivative(
    function: Callable[[NDArray[np.float64]], float],
    x0: ArrayLike,
    index: int,
    stepsize: float = DEFAULT_FIRST_ORDER_STEP,
) -> float:
    """Returns the forward-difference estimate of one partial derivative.

    Computes ``(f(x0 + h e_i) - f(x0)) / h``. The estimate is first-order
    accurate in ``h``; no accuracy is guaranteed for non-smooth functions.

    Args:
        function: Scalar-valued function of a 1D array.
        x0: The point at which the derivative is evaluated. Not modified.
        index: Zero-based index of the coordinate to differentiate against.
        stepsize: Step size ``h``. Defaults to ``sqrt(eps)`` (about 1.49e-8).

    Returns:
        The estimated partial derivative.

    Raises:
        ValueError: If ``x0`` is empty or ``stepsize`` is not positive.
        TypeError: If ``index`` is not an integer or ``function`` is not
            scalar-valued.
        IndexError: If ``index`` is out of bounds.
    """
    point = as_point(x0)
    i = check_index(index, point.size)
    h = validate_stepsize(stepsize)

    f_shift = evaluate(function, shifted_point(point, h, i))
    f0 = evaluate(function, point)
    return (f_shift - f0) / h


def mixed_partial(
    function: Callable[[NDArray[np.float64]], float],
    x0: ArrayLike,
    i: int,
    j: int,
    stepsize: float = DEFAULT_SECOND_ORDER_STEP,
) -> float:
    """Returns the forward-difference estimate of a second partial derivative.

    Uses the four-point stencil

    ``(f(x0 + h e_i + h e_j) - f(x0 + h e_i) - f(x0 + h e_j) + f(x0)) / h**2``

    which reduces to the one-sided second difference along a single axis
    when ``i == j``.

    Args:
        function: Scalar-valued function of a 1D array.
        x0: The point at which the derivative is evaluated. Not modified.
        i: Zero-based index of the first coordinate.
        j: Zero-based index of the second coordinate.
        stepsize: Step size ``h``. Defaults to ``1e-5``.

    Returns:
        The estimated second partial derivative.

    Raises:
        ValueError: If ``x0`` is empty or ``stepsize`` is not positive.
        TypeError: If an index is not an integer or ``function`` is not
            scalar-valued.
        IndexError: If ``i`` or ``j`` is out of bounds.
    """
    point = as_point(x0)
    i = check_index(i, point.size, name="i")
    j = check_index(j, point.size, name="j")
    h = validate_stepsize(stepsize)

    f_ij = evaluate(function, shifted_point(point, h, i, j))
    f_i = evaluate(function, shifted_point(point, h, i))
    f_j = evaluate(function, shifted_point(point, h, j))
    f0 = evaluate(function, point)
    return second_difference(f_ij, f_i, f_j, f0, h)


def second_difference(f_ij: float, f_i: float, f_j: float, f0: float, h: float) -> float:
    """Combines the four stencil values into a second-derivative estimate."""
    return (f_ij - f_i - f_j + f0) / (h * h)
