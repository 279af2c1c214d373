"""Linear algebra helpers for consumers of Hessian matrices."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from diffkit.logger import diffkit_logger

__all__ = ["hessian_eigenvalues"]


def hessian_eigenvalues(
    matrix: ArrayLike,
    *,
    imag_atol: float = 1e-12,
) -> NDArray[np.floating] | NDArray[np.complexfloating]:
    """Returns the eigenvalues of a dense square matrix.

    This is a thin wrapper over :func:`numpy.linalg.eigvals`. The matrix is
    not symmetrised, so finite-difference Hessians with small asymmetries are
    accepted as-is. The order of the eigenvalues is whatever NumPy returns
    and should not be relied upon.

    Args:
        matrix: Square 2D real matrix, typically from ``build_hessian``.
        imag_atol: Imaginary parts at or below this magnitude are discarded
            and real eigenvalues are returned.

    Returns:
        A 1D array of eigenvalues. Real-valued when every imaginary part is
        within ``imag_atol``, complex otherwise.

    Raises:
        ValueError: If ``matrix`` is not a non-empty square 2D array.
    """
    a = np.asarray(matrix, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"matrix must be square and 2D; got shape {a.shape}.")
    if a.size == 0:
        raise ValueError("matrix must be non-empty.")

    evals = np.linalg.eigvals(a)
    if np.all(np.abs(evals.imag) <= imag_atol):
        return evals.real.astype(float)

    diffkit_logger.debug(
        "Matrix of shape %s has complex eigenvalues; returning them unchanged.",
        a.shape,
    )
    return evals
