"""Concurrency management for gradient and Hessian sweeps."""

from __future__ import annotations

import contextvars
import os
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Sequence, Tuple

from diffkit.logger import diffkit_logger

__all__ = [
    "set_default_workers",
    "use_workers",
    "normalize_workers",
    "resolve_workers",
    "parallel_execute",
]


# Context-var and default
_workers_var: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "diffkit_workers", default=None
)
_DEFAULT_WORKERS: int = 1


def set_default_workers(n: int | None) -> None:
    """Sets the module-wide default number of sweep workers.

    The default is used whenever a sweep is called with ``n_workers=None``
    and no :func:`use_workers` context is active.

    Args:
        n: Number of workers, or ``None`` to size the pool from the hardware.

    Returns:
        None
    """
    global _DEFAULT_WORKERS
    _DEFAULT_WORKERS = _detect_hw_threads() if n is None else normalize_workers(n)


@contextmanager
def use_workers(n: int | None) -> Iterator[int | None]:
    """Temporarily sets the number of sweep workers.

    Args:
        n: Number of workers, or ``None`` to fall back to the module default.

    Yields:
        int | None: The previous setting (restored on exit).
    """
    prev = _workers_var.get()
    token = _workers_var.set(None if n is None else normalize_workers(n))
    try:
        yield prev
    finally:
        _workers_var.reset(token)


def _int_env(name: str) -> int | None:
    """Reads a positive integer from an environment variable, or None if unset/invalid.

    Args:
        name: Environment variable name.

    Returns:
        Positive integer value, or None.
    """
    v = os.getenv(name)
    if not v:
        return None
    try:
        i = int(v)
        return i if i > 0 else None
    except ValueError:
        return None


def _detect_hw_threads() -> int:
    """Detects the number of hardware threads, capped by relevant environment variables.

    Returns:
        Number of hardware threads (at least 1).
    """
    hints = [
        _int_env("OMP_NUM_THREADS"),
        _int_env("MKL_NUM_THREADS"),
        _int_env("OPENBLAS_NUM_THREADS"),
    ]
    env_cap = min([h for h in hints if h is not None], default=None)
    hw = os.cpu_count() or 1
    return max(1, min(hw, env_cap) if env_cap else hw)


def normalize_workers(n_workers: Any) -> int:
    """Ensures n_workers is a positive integer, defaulting to 1.

    Args:
        n_workers: Input number of workers (can be None, float, negative, etc.)

    Returns:
        int: A positive integer number of workers (at least 1).
    """
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 0
    if n < 1:
        diffkit_logger.warning(
            "Invalid worker count %r; falling back to serial execution.", n_workers
        )
        return 1
    return n


def resolve_workers(n_workers: int | None) -> int:
    """Resolves the worker count used by a sweep.

    An explicit ``n_workers`` wins. Otherwise the active :func:`use_workers`
    context applies, then the module default.

    Args:
        n_workers: Requested number of workers, or ``None``.

    Returns:
        A positive integer number of workers.
    """
    if n_workers is not None:
        return normalize_workers(n_workers)
    w = _workers_var.get()
    if w is not None:
        return w
    return _DEFAULT_WORKERS


def parallel_execute(
    worker: Callable[..., Any],
    arg_tuples: Sequence[Tuple[Any, ...]],
    *,
    n_workers: int = 1,
) -> list[Any]:
    """Runs ``worker(*args)`` for each tuple in arg_tuples.

    Results are returned in the order of ``arg_tuples`` regardless of the
    number of threads. Exceptions raised by ``worker`` propagate unchanged.
    """
    if n_workers > 1 and len(arg_tuples) > 1:
        with ThreadPoolExecutor(max_workers=n_workers) as ex:
            futures = []
            for args in arg_tuples:
                # Each task gets its own copy of the current context
                ctx = contextvars.copy_context()
                futures.append(ex.submit(ctx.run, worker, *args))
            return [f.result() for f in futures]
    return [worker(*args) for args in arg_tuples]
