"""Validation utilities for DiffKit."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "as_point",
    "check_index",
    "check_scalar_valued",
    "ensure_finite",
]


def as_point(x0: ArrayLike, *, name: str = "x0") -> NDArray[np.float64]:
    """Converts an evaluation point into a fresh 1D float array.

    Row vectors of shape ``(1, n)`` are flattened. The returned array never
    shares memory with ``x0``, so callers may perturb it freely.

    Args:
        x0: Array-like evaluation point.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64.

    Raises:
        ValueError: If ``x0`` is empty or cannot be read as a single vector.
    """
    arr = np.array(x0, dtype=float, copy=True)
    if arr.ndim == 2 and arr.shape[0] == 1:
        arr = arr.reshape(-1)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D; got shape {arr.shape}.")
    if arr.size == 0:
        raise ValueError(f"{name} must be a non-empty 1D array.")
    return arr


def check_index(index: int, size: int, *, name: str = "index") -> int:
    """Returns ``index`` as an int after checking it addresses a coordinate.

    Args:
        index: Zero-based coordinate index.
        size: Number of coordinates.
        name: Name used in error messages.

    Returns:
        The index as a plain ``int``.

    Raises:
        TypeError: If ``index`` is not an integer.
        IndexError: If ``index`` is outside ``[0, size)``.
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(
            f"{name} must be an integer; got {type(index).__name__}."
        )
    if index < 0 or index >= size:
        raise IndexError(f"{name} {index} out of bounds for size {size}.")
    return int(index)


def check_scalar_valued(function: Callable, x0: NDArray[np.floating]) -> float:
    """Evaluates ``function`` at ``x0`` and checks the output is a scalar.

    Args:
        function: The function to differentiate.
        x0: The point at which the function is probed.

    Returns:
        The function value at ``x0`` as a float.

    Raises:
        TypeError: If ``function`` does not return a scalar value.
    """
    probe = np.asarray(function(x0.copy()), dtype=float)
    if probe.size != 1:
        raise TypeError(
            "Expected a scalar-valued function; "
            f"got shape {probe.shape} from function(x0)."
        )
    return float(probe.item())


def ensure_finite(values: ArrayLike, *, where: str) -> NDArray[np.float64]:
    """Returns ``values`` as a float array, raising if any entry is non-finite.

    Args:
        values: Array-like result to check.
        where: Name of the caller, used in the error message.

    Returns:
        The values as a float64 array.

    Raises:
        FloatingPointError: If any value is NaN or infinite.
    """
    arr = np.asarray(values, dtype=float)
    if not np.isfinite(arr).all():
        raise FloatingPointError(f"Non-finite values encountered in {where}.")
    return arr
