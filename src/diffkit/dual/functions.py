"""Named dual-number operations.

Each function mirrors an operator or method of :class:`~diffkit.dual.dual_number.Dual`
and accepts real scalars wherever a dual number is expected (they are
promoted to constants). For ``x = (a, b)`` and ``y = (c, d)``:

==================  ===============  =========================
operation           primal           tangent
==================  ===============  =========================
``add(x, y)``       ``a + c``        ``b + d``
``subtract(x, y)``  ``a - c``        ``b - d``
``multiply(x, y)``  ``a * c``        ``a * d + b * c``
``divide(x, y)``    ``a / c``        ``(b * c - a * d) / c**2``
``scalar_multiply`` ``k * a``        ``k * b``
``power(x, n)``     ``a**n``         ``b * n * a**(n - 1)``
``log(x)``          ``ln a``         ``b / a``
``exp(x)``          ``e**a``         ``b * e**a``
``sin(x)``          ``sin a``        ``b * cos a``
``cos(x)``          ``cos a``        ``-b * sin a``
==================  ===============  =========================
"""

from __future__ import annotations

from diffkit.dual.dual_number import Dual, as_dual

__all__ = [
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
]


def add(x: Dual | float, y: Dual | float) -> Dual:
    """Returns ``x + y``."""
    return as_dual(x) + as_dual(y)


def subtract(x: Dual | float, y: Dual | float) -> Dual:
    """Returns ``x - y``."""
    return as_dual(x) - as_dual(y)


def negate(x: Dual | float) -> Dual:
    """Returns ``-x``."""
    return -as_dual(x)


def multiply(x: Dual | float, y: Dual | float) -> Dual:
    """Returns ``x * y`` using the product rule for the tangent."""
    return as_dual(x) * as_dual(y)


def divide(x: Dual | float, y: Dual | float) -> Dual:
    """Returns ``x / y``.

    Raises:
        ZeroDivisionError: If the primal of ``y`` is zero.
    """
    return as_dual(x) / as_dual(y)


def scalar_multiply(k: float, x: Dual | float) -> Dual:
    """Returns ``k * x`` for a real constant ``k``.

    Raises:
        TypeError: If ``k`` is a dual number; use :func:`multiply` instead.
    """
    return as_dual(x).scale(k)


def power(x: Dual | float, n: float) -> Dual:
    """Returns ``x**n`` for a real exponent ``n``.

    ``power(x, 0)`` is exactly ``Dual(1.0, 0.0)``, including ``0**0``.

    Raises:
        TypeError: If ``n`` is a dual number.
    """
    return as_dual(x) ** n


def log(x: Dual | float) -> Dual:
    """Returns the natural logarithm of ``x``.

    Raises:
        DualDomainError: If the primal of ``x`` is not strictly positive.
    """
    return as_dual(x).log()


def exp(x: Dual | float) -> Dual:
    """Returns ``e**x``."""
    return as_dual(x).exp()


def sin(x: Dual | float) -> Dual:
    """Returns ``sin(x)``."""
    return as_dual(x).sin()


def cos(x: Dual | float) -> Dual:
    """Returns ``cos(x)``."""
    return as_dual(x).cos()
