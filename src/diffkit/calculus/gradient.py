"""Contains functions used to construct the gradient of scalar-valued functions."""

from collections.abc import Callable
from functools import partial

import numpy as np
from numpy.typing import ArrayLike, NDArray

from diffkit.finite.forward_difference import partial_derivative
from diffkit.finite.steps import DEFAULT_FIRST_ORDER_STEP, validate_stepsize
from diffkit.logger import diffkit_logger
from diffkit.utils.concurrency import parallel_execute, resolve_workers
from diffkit.utils.validate import as_point, ensure_finite

__all__ = ["build_gradient"]


def build_gradient(
    function: Callable[[NDArray[np.float64]], float],
    x0: ArrayLike,
    stepsize: float = DEFAULT_FIRST_ORDER_STEP,
    *,
    n_workers: int | None = 1,
) -> NDArray[np.float64]:
    """Returns the forward-difference gradient of a scalar-valued function.

    Entry ``i`` is ``partial_derivative(function, x0, i, stepsize)``. The
    entries are independent, so they may be computed concurrently.

    Args:
        function: The function to be differentiated.
        x0: The point at which the gradient is evaluated. Not modified.
        stepsize: Step size ``h``. Defaults to ``sqrt(eps)`` (about 1.49e-8).
        n_workers: Number of threads used across coordinates. ``None`` uses
            the configured default. Default is 1.

    Returns:
        A 1D array representing the gradient.

    Raises:
        ValueError: If ``x0`` is empty or ``stepsize`` is not positive.
        TypeError: If ``function`` does not return a scalar value.
        FloatingPointError: If non-finite values are encountered.
    """
    point = as_point(x0)
    h = validate_stepsize(stepsize)
    workers = resolve_workers(n_workers)
    diffkit_logger.debug(
        "build_gradient: %d coordinates, stepsize=%g, %d worker(s).",
        point.size, h, workers,
    )

    # Bind shared arguments once; tasks only carry the coordinate index
    worker = partial(_grad_component, function, point, stepsize=h)
    tasks = [(i,) for i in range(point.size)]

    vals = parallel_execute(worker, tasks, n_workers=workers)
    return ensure_finite(vals, where="build_gradient")


def _grad_component(
        function: Callable,
        point: NDArray[np.float64],
        i: int,
        *,
        stepsize: float,
) -> float:
    """Returns one entry of the gradient for a scalar-valued function."""
    return partial_derivative(function, point, i, stepsize)
