"""Forward-mode dual numbers of arbitrary order.

A :class:`Dual` holds a value and the coefficient of its infinitesimal part.
Both may themselves be dual numbers, which gives higher-order duals able to
carry higher-order and cross derivatives.
"""

from __future__ import annotations

import cmath
import math
import numbers
from typing import Any, Iterable

__all__ = [
    "Dual",
    "val",
    "order",
    "derivative",
    "derivatives",
    "gradnode",
    "seed",
    "higher_order_dual",
]


def _is_scalar(x: Any) -> bool:
    return isinstance(x, numbers.Number)


def _constant(n: int, value: Any) -> Any:
    """Return a dual of order ``n`` holding ``value`` with every derivative zero."""
    if n == 0:
        return value
    return Dual._new(_constant(n - 1, value), _constant(n - 1, 0.0))


def _log(x: Any) -> Any:
    if isinstance(x, Dual):
        return Dual._new(_log(x.val), x.grad / x.val)
    if isinstance(x, complex):
        return cmath.log(x)
    return math.log(x)


class Dual:
    """A dual number ``val + grad * eps`` with ``eps**2 == 0``."""

    __slots__ = ("val", "grad")

    def __init__(self, val: Any = 0.0, grad: Any = None) -> None:
        if isinstance(val, Dual):
            n = order(val)
        elif _is_scalar(val):
            n = 0
        else:
            raise TypeError(f"unsupported value type: {type(val).__name__}")

        if grad is None:
            grad = _constant(n, 0.0)
        elif isinstance(grad, Dual):
            m = order(grad)
            if n == 0:
                val = _constant(m, val)
            elif m != n:
                raise TypeError(f"value of order {n} and gradient of order {m} do not match")
        elif _is_scalar(grad):
            grad = _constant(n, grad)
        else:
            raise TypeError(f"unsupported gradient type: {type(grad).__name__}")

        self.val = val
        self.grad = grad

    @staticmethod
    def _new(val: Any, grad: Any) -> Dual:
        obj = object.__new__(Dual)
        obj.val = val
        obj.grad = grad
        return obj

    def _operand(self, other: Any) -> Any:
        """Return ``other`` if it can be combined with self, else ``None``."""
        if isinstance(other, Dual):
            mine, theirs = order(self), order(other)
            if mine != theirs:
                raise TypeError(f"cannot combine duals of order {mine} and {theirs}")
            return other
        if _is_scalar(other):
            return other
        return None

    # Unary operators

    def __pos__(self) -> Dual:
        return Dual._new(self.val, self.grad)

    def __neg__(self) -> Dual:
        return Dual._new(-self.val, -self.grad)

    def __abs__(self) -> Dual:
        if self.val < 0:
            sign = -1.0
        elif self.val > 0:
            sign = 1.0
        else:
            sign = 0.0
        return Dual._new(abs(self.val), self.grad * sign)

    # Arithmetic

    def __add__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        if isinstance(o, Dual):
            return Dual._new(self.val + o.val, self.grad + o.grad)
        return Dual._new(self.val + o, self.grad)

    def __radd__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Dual._new(o + self.val, self.grad)

    def __sub__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        if isinstance(o, Dual):
            return Dual._new(self.val - o.val, self.grad - o.grad)
        return Dual._new(self.val - o, self.grad)

    def __rsub__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Dual._new(o - self.val, -self.grad)

    def __mul__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        if isinstance(o, Dual):
            return Dual._new(self.val * o.val, self.grad * o.val + self.val * o.grad)
        return Dual._new(self.val * o, self.grad * o)

    def __rmul__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return Dual._new(o * self.val, o * self.grad)

    def __truediv__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        if isinstance(o, Dual):
            quotient = self.val / o.val
            return Dual._new(quotient, (self.grad - quotient * o.grad) / o.val)
        return Dual._new(self.val / o, self.grad / o)

    def __rtruediv__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        inverse = 1.0 / self.val
        return Dual._new(o * inverse, -o * inverse * inverse * self.grad)

    def __pow__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        if isinstance(o, Dual):
            power = self.val ** o.val
            grad = (self.grad * (o.val / self.val) + _log(self.val) * o.grad) * power
            return Dual._new(power, grad)
        aux = self.val ** (o - 1)
        return Dual._new(aux * self.val, self.grad * (o * aux))

    def __rpow__(self, other: Any) -> Dual:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        power = o ** self.val
        return Dual._new(power, _log(o) * self.grad * power)

    # Comparisons act on the innermost value only

    def _compare_value(self, other: Any) -> Any:
        if isinstance(other, Dual) or _is_scalar(other):
            return val(other)
        return None

    def __eq__(self, other: Any) -> bool:
        v = self._compare_value(other)
        if v is None:
            return NotImplemented
        return val(self) == v

    def __ne__(self, other: Any) -> bool:
        v = self._compare_value(other)
        if v is None:
            return NotImplemented
        return val(self) != v

    def __lt__(self, other: Any) -> bool:
        v = self._compare_value(other)
        if v is None:
            return NotImplemented
        return val(self) < v

    def __le__(self, other: Any) -> bool:
        v = self._compare_value(other)
        if v is None:
            return NotImplemented
        return val(self) <= v

    def __gt__(self, other: Any) -> bool:
        v = self._compare_value(other)
        if v is None:
            return NotImplemented
        return val(self) > v

    def __ge__(self, other: Any) -> bool:
        v = self._compare_value(other)
        if v is None:
            return NotImplemented
        return val(self) >= v

    __hash__ = None  # mutable, compared by value

    # Conversions

    def __float__(self) -> float:
        return float(val(self))

    def __repr__(self) -> str:
        return f"Dual({self.val!r}, {self.grad!r})"

    def __str__(self) -> str:
        return str(val(self))


def val(x: Any) -> Any:
    """Return the innermost scalar value of a dual number, or a scalar unchanged."""
    while isinstance(x, Dual):
        x = x.val
    if not _is_scalar(x):
        raise TypeError(f"expected a number or a Dual, got {type(x).__name__}")
    return x


def order(x: Any) -> int:
    """Return the order of a dual number; plain numbers have order 0."""
    n = 0
    while isinstance(x, Dual):
        x = x.val
        n += 1
    return n


def _check_order(x: Any, k: int) -> None:
    if not isinstance(x, Dual):
        raise TypeError(f"expected a Dual, got {type(x).__name__}")
    if k < 0 or k > order(x):
        raise ValueError(f"order {k} is outside 0..{order(x)}")


def derivative(x: Dual, order: int = 1) -> Any:
    """Return the derivative of the given order stored in ``x``."""
    _check_order(x, order)
    node: Any = x
    for _ in range(order):
        node = node.grad
    return val(node)


def derivatives(x: Dual | Iterable[Dual]) -> list:
    """Return all derivatives of ``x``, from order 0 up to its own order.

    For an iterable of duals, return one list per order holding the
    derivatives of every item.
    """
    if isinstance(x, Dual):
        return [derivative(x, k) for k in range(order(x) + 1)]
    items = list(x)
    if not items:
        raise ValueError("cannot take derivatives of an empty sequence")
    if not all(isinstance(item, Dual) for item in items):
        raise TypeError("every item must be a Dual")
    orders = {order(item) for item in items}
    if len(orders) != 1:
        raise TypeError("every item must have the same order")
    (n,) = orders
    return [[derivative(item, k) for item in items] for k in range(n + 1)]


def gradnode(x: Dual, order: int) -> Any:
    """Return the node reached by following ``val`` down to depth ``order``.

    Order 0 gives ``x.val``, order 1 gives ``x.grad`` and order ``k`` the
    ``grad`` part of the dual found ``k - 1`` steps down the ``val`` branch.
    """
    _check_order(x, order)
    node = x
    for _ in range(order - 1):
        node = node.val
    return node.val if order == 0 else node.grad


def seed(x: Dual, order: int, value: Any) -> None:
    """Set the node returned by :func:`gradnode` to the constant ``value``."""
    _check_order(x, order)
    if not _is_scalar(value):
        raise TypeError(f"seed value must be a number, got {type(value).__name__}")
    inner = globals_order = None  # placeholders for clarity of flow
    del inner, globals_order
    node = x
    for _ in range(order - 1):
        node.val = Dual._new(node.val.val, node.val.grad)
        node = node.val
    depth = _order_of(node) - 1
    if order == 0:
        node.val = _constant(depth, value)
    else:
        node.grad = _constant(depth, value)


def _order_of(x: Any) -> int:
    return order(x)


def higher_order_dual(order: int, value: Any = 0.0) -> Any:
    """Return a dual number of the given order holding ``value``."""
    if order < 0:
        raise ValueError("order must be non-negative")
    if not _is_scalar(value):
        raise TypeError(f"value must be a number, got {type(value).__name__}")
    return _constant(order, value)