"""Contains the one-hot seeding helpers for dual-number differentiation.

A function of several variables is differentiated with respect to one of
them by seeding that variable's tangent with ``1.0`` and every other
tangent with ``0.0``. The tangent of the result is then the partial
derivative. Repeating this once per coordinate gives the full gradient.

Functions passed to these helpers must be written against dual arithmetic,
e.g. with the operations in :mod:`diffkit.dual.functions`:

>>> import math
>>> from diffkit.dual import functions as dfn
>>> from diffkit.dual.seeding import dual_partial
>>> def f(x):
...     return dfn.sin(x[0] + x[1] ** 3)
>>> round(dual_partial(f, [math.pi / 6, math.pi / 3], 1), 12)
-0.33231123398
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from diffkit.dual.dual_number import Dual, as_dual
from diffkit.logger import diffkit_logger
from diffkit.utils.concurrency import parallel_execute, resolve_workers
from diffkit.utils.validate import as_point, check_index, ensure_finite

__all__ = [
    "seed_variables",
    "value_and_derivative",
    "dual_partial",
    "dual_gradient",
]


def seed_variables(values: ArrayLike, index: int) -> tuple[Dual, ...]:
    """Returns the point ``values`` as dual numbers seeded on one coordinate.

    Args:
        values: 1D array-like of primal values.
        index: Zero-based index of the coordinate that receives tangent ``1.0``.
            All other coordinates receive tangent ``0.0``.

    Returns:
        A tuple of dual numbers, one per coordinate.

    Raises:
        ValueError: If ``values`` is empty or not 1D.
        TypeError: If ``index`` is not an integer.
        IndexError: If ``index`` is out of bounds.
    """
    point = as_point(values, name="values")
    index = check_index(index, point.size)
    return tuple(
        Dual(float(v), 1.0 if k == index else 0.0) for k, v in enumerate(point)
    )


def value_and_derivative(
    function: Callable[[Dual], Dual | float],
    x0: float,
) -> tuple[float, float]:
    """Returns the value and first derivative of a univariate function.

    Args:
        function: A function of one dual number.
        x0: The point at which the derivative is evaluated.

    Returns:
        ``(function(x0), function'(x0))``. A function returning a plain
        number is treated as constant and has derivative ``0.0``.
    """
    result = as_dual(function(Dual.variable(float(x0))))
    return result.as_tuple()


def dual_partial(
    function: Callable[[Sequence[Dual]], Dual | float],
    x0: ArrayLike,
    index: int,
) -> float:
    """Returns the exact partial derivative of a multivariate function.

    Args:
        function: A function of a sequence of dual numbers.
        x0: The point at which the derivative is evaluated.
        index: Zero-based index of the coordinate to differentiate against.

    Returns:
        The partial derivative with respect to coordinate ``index``.

    Raises:
        IndexError: If ``index`` is out of bounds.
    """
    seeded = seed_variables(x0, index)
    return as_dual(function(seeded)).tangent


def dual_gradient(
    function: Callable[[Sequence[Dual]], Dual | float],
    x0: ArrayLike,
    *,
    n_workers: int | None = 1,
) -> NDArray[np.float64]:
    """Returns the exact gradient of a multivariate function.

    One seeded evaluation is made per coordinate. The evaluations share no
    state, so they may run concurrently when ``n_workers > 1``.

    Args:
        function: A function of a sequence of dual numbers.
        x0: The point at which the gradient is evaluated.
        n_workers: Number of threads used across coordinates. ``None`` uses
            the configured default.

    Returns:
        A 1D array with one partial derivative per coordinate.

    Raises:
        ValueError: If ``x0`` is empty.
        FloatingPointError: If a partial derivative is not finite.
    """
    point = as_point(x0)
    workers = resolve_workers(n_workers)
    diffkit_logger.debug(
        "dual_gradient: %d coordinates, %d worker(s).", point.size, workers
    )

    worker = partial(dual_partial, function)
    tasks = [(point, i) for i in range(point.size)]
    vals = parallel_execute(worker, tasks, n_workers=workers)
    return ensure_finite(vals, where="dual_gradient")
