"""Default step sizes for the forward-difference stencils.

The first-order default, ``sqrt(eps)`` for double precision, balances the
truncation error of a one-sided difference (proportional to ``h``) against
rounding error (proportional to ``eps / h``). Second-order stencils divide by
``h**2`` and need a larger step to avoid cancellation, hence ``1e-5``.

Both defaults can be overridden per call through the ``stepsize`` argument.
"""

from __future__ import annotations

import numpy as np

__all__ = [
    "DEFAULT_FIRST_ORDER_STEP",
    "DEFAULT_SECOND_ORDER_STEP",
    "validate_stepsize",
]

DEFAULT_FIRST_ORDER_STEP: float = float(np.sqrt(np.finfo(np.float64).eps))
DEFAULT_SECOND_ORDER_STEP: float = 1e-5


def validate_stepsize(stepsize: float) -> float:
    """Returns ``stepsize`` as a float after checking it is usable.

    Args:
        stepsize: Step size ``h`` of a finite-difference stencil.

    Returns:
        The step size as a float.

    Raises:
        ValueError: If ``stepsize`` is not finite and strictly positive.
    """
    h = float(stepsize)
    if not np.isfinite(h) or h <= 0.0:
        raise ValueError(f"stepsize must be finite and positive; got {stepsize!r}.")
    return h
