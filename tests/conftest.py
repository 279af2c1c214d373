"""Pytest configuration with thread-related fixtures."""

import os
from concurrent.futures import ThreadPoolExecutor, TimeoutError

import pytest

import diffkit.calculus.gradient as gradient_mod
import diffkit.calculus.hessian as hessian_mod
import diffkit.dual.seeding as seeding_mod
import diffkit.utils.concurrency as conc

__all__ = ["extra_threads_ok"]

_SWEEP_MODULES = (gradient_mod, hessian_mod, seeding_mod)


@pytest.fixture(autouse=True, scope="session")
def _limit_blas_threads():
    os.environ.setdefault("OMP_NUM_THREADS", "1")
    os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
    os.environ.setdefault("MKL_NUM_THREADS", "1")


@pytest.fixture(scope="session")
def threads_ok():
    """Return a callable that checks thread-spawning capability.

    The returned function has signature `check(n=2, timeout=1.0) -> bool` and
    returns True if at least `n` threads can be started and joined within `timeout`.
    """
    def _can_spawn(n: int = 2, timeout: float = 1.0) -> bool:
        try:
            with ThreadPoolExecutor(max_workers=n) as ex:
                futs = [ex.submit(lambda: None) for _ in range(n)]
                for f in futs:
                    f.result(timeout=timeout)
            return True
        except (RuntimeError, MemoryError, OSError, TimeoutError):
            return False
    return _can_spawn


@pytest.fixture(scope="session")
def extra_threads_ok(threads_ok):
    """Convenience: True iff we can start >= 2 threads (common case)."""
    return threads_ok(2)


# --- default to serial sweeps unless a test opts in via @pytest.mark.parallel ---
@pytest.fixture(autouse=True)
def _serial_by_default(request, monkeypatch):
    """Force n_workers=1 in diffkit sweeps unless the test is marked @pytest.mark.parallel."""
    if request.node.get_closest_marker("parallel"):
        return

    orig = conc.parallel_execute

    def _serial(worker, arg_tuples, *, n_workers=1):
        return orig(worker, arg_tuples, n_workers=1)

    for mod in _SWEEP_MODULES:
        monkeypatch.setattr(mod, "parallel_execute", _serial, raising=True)
