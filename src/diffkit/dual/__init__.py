"""Forward-mode automatic differentiation with dual numbers."""

from .dual_number import Dual, DualDomainError, as_dual
from .functions import (
    add,
    cos,
    divide,
    exp,
    log,
    multiply,
    negate,
    power,
    scalar_multiply,
    sin,
    subtract,
)
from .seeding import dual_gradient, dual_partial, seed_variables, value_and_derivative

__all__ = [
    "Dual",
    "DualDomainError",
    "as_dual",
    "add",
    "subtract",
    "negate",
    "multiply",
    "divide",
    "scalar_multiply",
    "power",
    "log",
    "exp",
    "sin",
    "cos",
    "seed_variables",
    "value_and_derivative",
    "dual_partial",
    "dual_gradient",
]
