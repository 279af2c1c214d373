"""Provides the CalculusKit class.

A light wrapper around the calculus helpers that exposes a simple API
for gradient and Hessian computations, together with the eigenvalues of
the Hessian.

Typical usage examples:

>>> import numpy as np
>>> from diffkit.calculus_kit import CalculusKit
>>>
>>> def bowl(x):
...     # scalar-valued function: f(x) = x0^2 + 3 x1^2
...     return x[0] ** 2 + 3.0 * x[1] ** 2
>>>
>>> calc = CalculusKit(bowl, x0=np.array([1.0, -1.0]))
>>> grad = calc.gradient()
>>> exact = calc.gradient(method="dual")
>>> hess = calc.hessian()
>>> evals = calc.hessian_eigenvalues()

The ``"dual"`` method evaluates ``function`` on a tuple of
:class:`~diffkit.dual.dual_number.Dual` numbers, so the function body must
be written with operations dual numbers support.
"""

from collections.abc import Callable
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .calculus import build_gradient, build_hessian
from .dual.seeding import dual_gradient
from .finite.steps import DEFAULT_FIRST_ORDER_STEP, DEFAULT_SECOND_ORDER_STEP
from .utils.linalg import hessian_eigenvalues
from .utils.validate import as_point

_GRADIENT_METHODS = ("finite", "dual")


class CalculusKit:
    """Provides access to gradient and Hessian arrays."""

    def __init__(
        self,
        function: Callable[[Sequence[float] | np.ndarray], float],
        x0: Sequence[float] | np.ndarray,
    ):
        """Initialise with function and evaluation point.

        Args:
            function: Maps a 1D array-like of length n to a scalar.
            x0: Point at which to evaluate derivatives (shape (n,)).
        """
        self.function = function
        self.x0 = as_point(x0)

    def gradient(
        self,
        *,
        method: str = "finite",
        stepsize: float | None = None,
        n_workers: int | None = 1,
    ) -> NDArray[np.floating]:
        """Returns the gradient of the scalar-valued function.

        Args:
            method: ``"finite"`` for the forward-difference estimate or
                ``"dual"`` for the exact dual-number gradient.
            stepsize: Finite-difference step. ``None`` uses the first-order
                default. Ignored by ``"dual"``.
            n_workers: Number of threads used across coordinates.

        Raises:
            ValueError: If ``method`` is unknown.
        """
        if method == "finite":
            h = DEFAULT_FIRST_ORDER_STEP if stepsize is None else stepsize
            return build_gradient(self.function, self.x0, h, n_workers=n_workers)
        if method == "dual":
            return dual_gradient(self.function, self.x0, n_workers=n_workers)
        raise ValueError(
            f"Unknown gradient method {method!r}; expected one of {_GRADIENT_METHODS}."
        )

    def hessian(
        self,
        *,
        stepsize: float | None = None,
        n_workers: int | None = 1,
    ) -> NDArray[np.floating]:
        """Returns the forward-difference Hessian of the scalar-valued function."""
        h = DEFAULT_SECOND_ORDER_STEP if stepsize is None else stepsize
        return build_hessian(self.function, self.x0, h, n_workers=n_workers)

    def hessian_eigenvalues(
        self,
        *,
        stepsize: float | None = None,
        n_workers: int | None = 1,
    ) -> NDArray[np.floating]:
        """Returns the eigenvalues of the Hessian, in no particular order."""
        return hessian_eigenvalues(self.hessian(stepsize=stepsize, n_workers=n_workers))
