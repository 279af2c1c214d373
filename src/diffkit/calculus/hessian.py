"""Contains functions used in constructing the Hessian of a scalar-valued function."""

from collections.abc import Callable
from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from diffkit.finite.forward_difference import (
    evaluate,
    second_difference,
    shifted_point,
)
from diffkit.finite.steps import DEFAULT_SECOND_ORDER_STEP, validate_stepsize
from diffkit.logger import diffkit_logger
from diffkit.utils.concurrency import parallel_execute, resolve_workers
from diffkit.utils.validate import as_point, check_scalar_valued, ensure_finite

__all__ = ["build_hessian"]


def build_hessian(
    function: Callable[[NDArray[np.float64]], float],
    x0: ArrayLike,
    stepsize: float = DEFAULT_SECOND_ORDER_STEP,
    *,
    n_workers: int | None = 1,
) -> NDArray[np.float64]:
    """Returns the forward-difference Hessian of a scalar-valued function.

    Entry ``(i, j)`` equals ``mixed_partial(function, x0, i, j, stepsize)``
    bit for bit. The function value at ``x0`` and the single-shift values
    ``f(x0 + h e_i)`` are evaluated once and shared across the sweep, and
    each double-shift point ``x0 + h e_i + h e_j`` is evaluated once for the
    pair ``{i, j}``.

    The matrix is not symmetrised. For smooth functions it is symmetric up
    to finite-difference error, but ``H[i, j]`` and ``H[j, i]`` may differ
    in the last bits.

    Args:
        function: The function to be differentiated. It alone determines the
            values being differentiated.
        x0: The point at which the Hessian is evaluated. Not modified.
        stepsize: Step size ``h``. Defaults to ``1e-5``.
        n_workers: Number of threads used across function evaluations.
            ``None`` uses the configured default. Default is 1.

    Returns:
        A 2D array with shape ``(n, n)``.

    Raises:
        ValueError: If ``x0`` is empty or ``stepsize`` is not positive.
        TypeError: If ``function`` does not return a scalar value.
        FloatingPointError: If non-finite values are encountered.
    """
    point = as_point(x0)
    h = validate_stepsize(stepsize)
    workers = resolve_workers(n_workers)
    n = int(point.size)
    diffkit_logger.debug(
        "build_hessian: %dx%d entries, stepsize=%g, %d worker(s).",
        n, n, h, workers,
    )

    f0 = check_scalar_valued(function, point)

    worker = partial(_shifted_value, function, point, h)
    single_tasks = [(i,) for i in range(n)]
    # Upper triangle and diagonal only: e_i + e_j is the same point as e_j + e_i.
    pairs = [(i, j) for i in range(n) for j in range(i, n)]

    vals = parallel_execute(worker, single_tasks + pairs, n_workers=workers)
    f_single = vals[:n]
    f_pair = dict(zip(pairs, vals[n:]))

    hess = np.empty((n, n), dtype=float)
    for i in range(n):
        for j in range(n):
            f_ij = f_pair[(i, j) if i <= j else (j, i)]
            hess[i, j] = second_difference(f_ij, f_single[i], f_single[j], f0, h)

    return ensure_finite(hess, where="build_hessian")


def _shifted_value(
    function: Callable,
    point: NDArray[np.float64],
    stepsize: float,
    *indices: int,
) -> float:
    """Returns ``function`` evaluated at ``point`` shifted along ``indices``."""
    return evaluate(function, shifted_point(point, stepsize, *indices))
