"""Utility functions for DiffKit package."""

from .concurrency import (
    parallel_execute,
    set_default_workers,
    use_workers,
)
from .linalg import hessian_eigenvalues

__all__ = [
    "hessian_eigenvalues",
    "parallel_execute",
    "set_default_workers",
    "use_workers",
]
