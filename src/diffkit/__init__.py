"""Provides all diffkit methods."""

from importlib.metadata import PackageNotFoundError, version

from diffkit.calculus import build_gradient, build_hessian
from diffkit.calculus_kit import CalculusKit
from diffkit.dual import (
    Dual,
    DualDomainError,
    dual_gradient,
    dual_partial,
    seed_variables,
    value_and_derivative,
)
from diffkit.finite import mixed_partial, partial_derivative
from diffkit.utils.linalg import hessian_eigenvalues

try:
    __version__ = version("diffkit")
except PackageNotFoundError:
    pass

__all__ = [
    "CalculusKit",
    "Dual",
    "DualDomainError",
    "build_gradient",
    "build_hessian",
    "dual_gradient",
    "dual_partial",
    "hessian_eigenvalues",
    "mixed_partial",
    "partial_derivative",
    "seed_variables",
    "value_and_derivative",
]
