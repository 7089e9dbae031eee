"""Power, absolute value, error function, two-argument arc tangent and hypot.

Every function accepts :class:`~dualdiff.dual.Dual` numbers of any order
as well as plain numbers. Where several arguments are duals they must share
the same order.
"""

from __future__ import annotations

import cmath
import math
import numbers
from typing import Any

from dualdiff.dual import Dual, order
from dualdiff.elementary import exp

__all__ = ["power", "absolute", "erf", "atan2", "hypot"]

_SQRT_PI = 1.7724538509055160272981674833411451872554456638435


def _check_operand(x: Any) -> None:
    if not isinstance(x, (Dual, numbers.Number)):
        raise TypeError(f"expected a number or a Dual, got {type(x).__name__}")


def _check_real_operand(x: Any) -> None:
    if not isinstance(x, (Dual, numbers.Real)):
        raise TypeError(f"expected a real number or a Dual, got {type(x).__name__}")


def _common_order(*args: Any) -> None:
    """Raise TypeError if the dual arguments do not share one order."""
    orders = {order(a) for a in args if isinstance(a, Dual)}
    if len(orders) > 1:
        raise TypeError(f"cannot combine duals of orders {sorted(orders)}")


def power(x: Any, y: Any) -> Any:
    """Return ``x`` raised to the power ``y``."""
    _check_operand(x)
    _check_operand(y)
    if isinstance(x, Dual) or isinstance(y, Dual):
        _common_order(x, y)
        return x ** y
    if isinstance(x, numbers.Real) and isinstance(y, numbers.Real):
        return math.pow(x, y)
    return complex(x) ** complex(y)


def absolute(x: Any) -> Any:
    """Return the absolute value; the derivative at zero is taken as zero."""
    _check_operand(x)
    return abs(x)


def erf(x: Any) -> Any:
    """Return the error function of ``x``."""
    _check_real_operand(x)
    if isinstance(x, Dual):
        v = x.val
        slope = 2.0 * exp(-v * v) / _SQRT_PI
        return Dual._new(erf(v), x.grad * slope)
    return math.erf(x)


def atan2(y: Any, x: Any) -> Any:
    """Return the arc tangent of ``y / x`` using the signs of both to pick the quadrant."""
    _check_real_operand(y)
    _check_real_operand(x)
    y_dual = isinstance(y, Dual)
    x_dual = isinstance(x, Dual)
    if not (y_dual or x_dual):
        return math.atan2(y, x)
    _common_order(y, x)

    yv = y.val if y_dual else y
    xv = x.val if x_dual else x
    denom = yv * yv + xv * xv
    if y_dual and x_dual:
        grad = (xv * y.grad - yv * x.grad) / denom
    elif y_dual:
        grad = xv / denom * y.grad
    else:
        grad = -yv / denom * x.grad
    return Dual._new(atan2(yv, xv), grad)


def hypot(x: Any, y: Any, *args: Any) -> Any:
    """Return the Euclidean norm of two or more arguments."""
    values = (x, y, *args)
    for v in values:
        _check_real_operand(v)
    if not any(isinstance(v, Dual) for v in values):
        return math.hypot(*values)
    _common_order(*values)

    inner = [v.val if isinstance(v, Dual) else v for v in values]
    norm = hypot(*inner)
    total: Any = None
    for v in values:
        if isinstance(v, Dual):
            term = v.grad * v.val
            total = term if total is None else total + term
    return Dual._new(norm, total / norm)