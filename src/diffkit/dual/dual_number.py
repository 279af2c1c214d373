"""Provides the :class:`Dual` number type for forward-mode differentiation.

A dual number ``a + b*eps`` with ``eps**2 = 0`` carries a value ``a`` and a
tangent ``b``. Evaluating an ordinary arithmetic expression on dual numbers
propagates the tangent by the chain rule, so one pass yields both the value
and the exact first derivative.

Examples:
--------
Differentiate ``f(x) = 2 x**3`` at ``x = 2``:

>>> from diffkit.dual.dual_number import Dual
>>> x = Dual.variable(2.0)
>>> y = 2 * x**3
>>> y.as_tuple()
(16.0, 24.0)

Plain numbers mixed into the expression are treated as constants:

>>> (Dual(3.0, 1.0) + 1).as_tuple()
(4.0, 1.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

import numpy as np

__all__ = [
    "Dual",
    "DualDomainError",
    "as_dual",
]


class DualDomainError(ValueError):
    """Raised when a dual operation is evaluated outside its domain."""


def _as_real(value, *, name: str) -> float:
    """Returns ``value`` as a float, rejecting anything that is not a real scalar."""
    if isinstance(value, Dual):
        raise TypeError(f"{name} must be a real number, not a Dual.")
    if not isinstance(value, (Real, np.integer, np.floating)):
        raise TypeError(
            f"{name} must be a real number; got {type(value).__name__}."
        )
    return float(value)


def as_dual(value) -> Dual:
    """Returns ``value`` as a dual number.

    Dual numbers are returned unchanged; real scalars are promoted to
    constants (tangent ``0.0``).

    Raises:
        TypeError: If ``value`` is neither a dual number nor a real scalar.
    """
    if isinstance(value, Dual):
        return value
    return Dual(_as_real(value, name="value"))


@dataclass(frozen=True, slots=True)
class Dual:
    """An immutable dual number ``primal + tangent * eps``.

    Attributes:
        primal: The value carried by the dual number.
        tangent: The derivative carried alongside the value. Seed it with
            ``1.0`` for the variable being differentiated and ``0.0`` for
            constants.
    """

    primal: float
    tangent: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "primal", _as_real(self.primal, name="primal"))
        object.__setattr__(self, "tangent", _as_real(self.tangent, name="tangent"))

    @classmethod
    def constant(cls, value: float) -> Dual:
        """Returns a dual number with zero tangent."""
        return cls(value, 0.0)

    @classmethod
    def variable(cls, value: float) -> Dual:
        """Returns a dual number seeded for differentiation (tangent ``1.0``)."""
        return cls(value, 1.0)

    def as_tuple(self) -> tuple[float, float]:
        """Returns ``(value, derivative)``."""
        return self.primal, self.tangent

    def scale(self, k: float) -> Dual:
        """Returns ``k * self`` for a real scalar ``k``."""
        k = _as_real(k, name="k")
        return Dual(k * self.primal, k * self.tangent)

    @staticmethod
    def _coerce(other) -> Dual | None:
        if isinstance(other, Dual):
            return other
        if isinstance(other, (Real, np.integer, np.floating)):
            return Dual(float(other))
        return None

    def __add__(self, other) -> Dual:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Dual(self.primal + rhs.primal, self.tangent + rhs.tangent)

    def __radd__(self, other) -> Dual:
        return self.__add__(other)

    def __sub__(self, other) -> Dual:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Dual(self.primal - rhs.primal, self.tangent - rhs.tangent)

    def __rsub__(self, other) -> Dual:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__sub__(self)

    def __mul__(self, other) -> Dual:
        if isinstance(other, (Real, np.integer, np.floating)):
            return self.scale(other)
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        # product rule
        return Dual(
            self.primal * rhs.primal,
            self.primal * rhs.tangent + self.tangent * rhs.primal,
        )

    def __rmul__(self, other) -> Dual:
        return self.__mul__(other)

    def __truediv__(self, other) -> Dual:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs.primal == 0.0:
            raise ZeroDivisionError("Dual division by a zero primal.")
        return Dual(
            self.primal / rhs.primal,
            (self.tangent * rhs.primal - self.primal * rhs.tangent) / rhs.primal**2,
        )

    def __rtruediv__(self, other) -> Dual:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__truediv__(self)

    def __neg__(self) -> Dual:
        return Dual(-self.primal, -self.tangent)

    def __pos__(self) -> Dual:
        return self

    def __pow__(self, exponent) -> Dual:
        """Raises the dual number to a real power.

        ``x**0`` is ``Dual(1.0, 0.0)`` for every ``x``, including a zero
        primal. A zero tangent stays zero, so ``Dual(0.0) ** 0.5`` is
        ``Dual(0.0, 0.0)``. The exponent cannot itself be a dual number.
        """
        if isinstance(exponent, Dual):
            raise TypeError(
                "Dual exponents are not supported; the exponent must be a real number."
            )
        if not isinstance(exponent, (Real, np.integer, np.floating)):
            return NotImplemented
        n = float(exponent)
        if n == 0.0:
            return Dual(1.0, 0.0)
        a = self.primal
        with np.errstate(divide="ignore", invalid="ignore"):
            value = float(np.power(a, n))
            # a held-constant operand contributes nothing, even where a**(n-1) blows up
            if self.tangent == 0.0:
                return Dual(value, 0.0)
            return Dual(value, float(self.tangent * n * np.power(a, n - 1.0)))

    def log(self) -> Dual:
        """Returns the natural logarithm.

        Raises:
            DualDomainError: If the primal is not strictly positive.
        """
        a = self.primal
        if not a > 0.0:
            raise DualDomainError(f"log is undefined for primal {a!r}; it must be > 0.")
        return Dual(float(np.log(a)), self.tangent / a)

    def exp(self) -> Dual:
        """Returns the exponential."""
        e = float(np.exp(self.primal))
        return Dual(e, self.tangent * e)

    def sin(self) -> Dual:
        """Returns the sine."""
        a = self.primal
        return Dual(float(np.sin(a)), self.tangent * float(np.cos(a)))

    def cos(self) -> Dual:
        """Returns the cosine."""
        a = self.primal
        return Dual(float(np.cos(a)), -self.tangent * float(np.sin(a)))
