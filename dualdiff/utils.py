"""Small helpers for dual numbers.

This module provides the squared magnitude, the complex-style accessors,
branch-selecting minimum and maximum, and a textual representation of the
full value/gradient tree.
"""

from __future__ import annotations

import numbers
from typing import Any

from dualdiff.dual import Dual, higher_order_dual, order

__all__ = ["abs2", "conj", "real", "imag", "minimum", "maximum", "represent"]


def _check_operand(x: Any) -> None:
    if not isinstance(x, (Dual, numbers.Number)):
        raise TypeError(f"expected a number or a Dual, got {type(x).__name__}")


def abs2(x: Any) -> Any:
    """Return ``x * x``."""
    _check_operand(x)
    return x * x


def conj(x: Any) -> Any:
    """Return the conjugate; a dual number is its own conjugate."""
    _check_operand(x)
    if isinstance(x, Dual):
        return +x
    return x.conjugate()


def real(x: Any) -> Any:
    """Return the real part; a dual number is its own real part."""
    _check_operand(x)
    if isinstance(x, Dual):
        return +x
    return x.real


def imag(x: Any) -> Any:
    """Return the imaginary part; zero for a dual number."""
    _check_operand(x)
    if isinstance(x, Dual):
        return 0.0
    return x.imag


def _evaluate_pair(x: Any, y: Any) -> tuple[Any, Any]:
    """Bring both operands to the same kind, promoting numbers next to a dual."""
    _check_operand(x)
    _check_operand(y)
    x_dual = isinstance(x, Dual)
    y_dual = isinstance(y, Dual)
    if x_dual and y_dual:
        if order(x) != order(y):
            raise TypeError(f"cannot combine duals of order {order(x)} and {order(y)}")
        return +x, +y
    if x_dual:
        return +x, higher_order_dual(order(x), y)
    if y_dual:
        return higher_order_dual(order(y), x), +y
    return x, y


def minimum(x: Any, y: Any) -> Any:
    """Return the smaller operand, preferring ``x`` on ties, with its derivatives."""
    a, b = _evaluate_pair(x, y)
    return a if a <= b else b


def maximum(x: Any, y: Any) -> Any:
    """Return the larger operand, preferring ``x`` on ties, with its derivatives."""
    a, b = _evaluate_pair(x, y)
    return a if a >= b else b


def _format_scalar(x: Any) -> str:
    if isinstance(x, bool):
        return str(int(x))
    if isinstance(x, numbers.Integral):
        return str(int(x))
    if isinstance(x, numbers.Real):
        return format(float(x), "g")
    if isinstance(x, numbers.Complex):
        return f"({format(x.real, 'g')},{format(x.imag, 'g')})"
    raise TypeError(f"expected a number or a Dual, got {type(x).__name__}")


def _represent_node(x: Any) -> str:
    if isinstance(x, Dual):
        return f"({_represent_node(x.val)}, {_represent_node(x.grad)})"
    return _format_scalar(x)


def represent(x: Dual) -> str:
    """Return a text form showing every value and gradient node of ``x``."""
    if not isinstance(x, Dual):
        raise TypeError(f"expected a Dual, got {type(x).__name__}")
    return "dualdiff.dual" + _represent_node(x)