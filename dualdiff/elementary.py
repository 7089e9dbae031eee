"""Elementary functions for dual numbers and plain numbers.

Each function accepts a :class:`~dualdiff.dual.Dual` of any order, or a plain
real or complex number. For duals the value is transformed and the gradient
is scaled by the derivative of the function at the value, recursively through
every level of a higher-order dual.
"""

from __future__ import annotations

import cmath
import math
import numbers
from typing import Any, Callable

from dualdiff.dual import Dual

__all__ = [
    "sin",
    "cos",
    "tan",
    "sinh",
    "cosh",
    "tanh",
    "asin",
    "acos",
    "atan",
    "exp",
    "log",
    "log10",
    "sqrt",
]

_LN10 = 2.3025850929940456840179914546843


def _apply(
    x: Any,
    func: Callable[[Any], Any],
    real_fn: Callable[[float], float],
    complex_fn: Callable[[complex], complex],
    slope: Callable[[Any, Any], Any],
) -> Any:
    """Evaluate ``func`` at ``x``.

    ``slope(v, fv)`` gives the derivative of ``func`` at ``v`` where
    ``fv == func(v)``; it is used to scale the gradient of a dual.
    """
    if isinstance(x, Dual):
        fv = func(x.val)
        return Dual._new(fv, x.grad * slope(x.val, fv))
    if isinstance(x, numbers.Real):
        return real_fn(x)
    if isinstance(x, numbers.Complex):
        return complex_fn(x)
    raise TypeError(f"expected a number or a Dual, got {type(x).__name__}")


def sin(x: Any) -> Any:
    """Sine."""
    return _apply(x, sin, math.sin, cmath.sin, lambda v, fv: cos(v))


def cos(x: Any) -> Any:
    """Cosine."""
    return _apply(x, cos, math.cos, cmath.cos, lambda v, fv: -sin(v))


def _sec2(v: Any) -> Any:
    aux = 1.0 / cos(v)
    return aux * aux


def tan(x: Any) -> Any:
    """Tangent."""
    return _apply(x, tan, math.tan, cmath.tan, lambda v, fv: _sec2(v))


def sinh(x: Any) -> Any:
    """Hyperbolic sine."""
    return _apply(x, sinh, math.sinh, cmath.sinh, lambda v, fv: cosh(v))


def cosh(x: Any) -> Any:
    """Hyperbolic cosine."""
    return _apply(x, cosh, math.cosh, cmath.cosh, lambda v, fv: sinh(v))


def _sech2(v: Any) -> Any:
    aux = 1.0 / cosh(v)
    return aux * aux


def tanh(x: Any) -> Any:
    """Hyperbolic tangent."""
    return _apply(x, tanh, math.tanh, cmath.tanh, lambda v, fv: _sech2(v))


def asin(x: Any) -> Any:
    """Arc sine."""
    return _apply(x, asin, math.asin, cmath.asin, lambda v, fv: 1.0 / sqrt(1.0 - v * v))


def acos(x: Any) -> Any:
    """Arc cosine."""
    return _apply(x, acos, math.acos, cmath.acos, lambda v, fv: -1.0 / sqrt(1.0 - v * v))


def atan(x: Any) -> Any:
    """Arc tangent."""
    return _apply(x, atan, math.atan, cmath.atan, lambda v, fv: 1.0 / (1.0 + v * v))


def exp(x: Any) -> Any:
    """Exponential."""
    return _apply(x, exp, math.exp, cmath.exp, lambda v, fv: fv)


def log(x: Any) -> Any:
    """Natural logarithm."""
    return _apply(x, log, math.log, cmath.log, lambda v, fv: 1.0 / v)


def log10(x: Any) -> Any:
    """Base-10 logarithm."""
    return _apply(x, log10, math.log10, cmath.log10, lambda v, fv: 1.0 / (_LN10 * v))


def sqrt(x: Any) -> Any:
    """Square root."""
    return _apply(x, sqrt, math.sqrt, cmath.sqrt, lambda v, fv: 0.5 / fv)