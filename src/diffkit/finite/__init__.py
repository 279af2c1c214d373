"""Forward-difference derivative estimates."""

from .forward_difference import mixed_partial, partial_derivative
from .steps import DEFAULT_FIRST_ORDER_STEP, DEFAULT_SECOND_ORDER_STEP

__all__ = [
    "partial_derivative",
    "mixed_partial",
    "DEFAULT_FIRST_ORDER_STEP",
    "DEFAULT_SECOND_ORDER_STEP",
]
