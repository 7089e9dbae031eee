# dualdiff

Forward-mode automatic differentiation in pure Python using dual numbers.
A `Dual` carries a value and a gradient. Because a value or a gradient can
itself be a `Dual`, duals nest to any order, and higher derivatives come
from the same arithmetic.

It has no dependencies beyond the standard library.

## Installation

```
pip install dualdiff
```

## First derivatives

Create the variable with a gradient of 1, then evaluate your function:

```python
from dualdiff.dual import Dual
from dualdiff.elementary import log

def f(x):
    return 1 + x + x * x + 1 / x + log(x)

x = Dual(2.0, 1.0)      # value 2, dx/dx = 1
u = f(x)
print(u.val)            # f(2)
print(u.grad)           # f'(2)
```

`Dual(value)` without a gradient gives a gradient of zero. With several
variables, give a gradient of 1 to one of them at a time:

```python
from dualdiff.dual import Dual
from dualdiff.elementary import exp

def f(x, y, z):
    return 1 + x + y + z + x * y + y * z + x * z + x * y * z + exp(x / y + y / z)

dudx = f(Dual(1.0, 1.0), Dual(2.0), Dual(3.0)).grad
dudy = f(Dual(1.0), Dual(2.0, 1.0), Dual(3.0)).grad
```

## Higher-order derivatives

`higher_order_dual(n, value)` builds a dual nested `n` levels deep with
every derivative zero. `seed(x, k, value)` sets the node that
`gradnode(x, k)` returns: `x.val` for `k = 0`, otherwise the `grad` part
of the dual found `k - 1` steps down the `val` branch. `derivatives(u)`
returns `[u, du, d²u, …]` up to the order of `u`, and `derivative(u, k)`
returns one entry.

```python
from dualdiff.dual import higher_order_dual, seed, derivatives, derivative

x = higher_order_dual(3, 1.0)
for k in range(1, 4):
    seed(x, k, 1.0)      # differentiate with respect to x three times

u = x * x * x
print(derivatives(u))    # [1.0, 3.0, 6.0, 6.0]
print(derivative(u, 2))  # 6.0
```

Seeding different variables at different depths gives cross derivatives:
seed `x` at depths 1 and 3 and `y` at depth 2 to get `u, ux, uxy, uxyx`.

Given a list of duals of one order, `derivatives` returns one list per
order, each holding that derivative of every item.

`val(x)` returns the innermost number of a dual and `order(x)` its depth
of nesting (0 for a plain number).

## Functions

- `dualdiff.elementary`: `sin`, `cos`, `tan`, `sinh`, `cosh`, `tanh`,
  `asin`, `acos`, `atan`, `exp`, `log`, `log10`, `sqrt`. They also accept
  real and complex numbers.
- `dualdiff.special`: `power(x, y)`, `absolute(x)` (derivative 0 at 0),
  `erf(x)`, `atan2(y, x)`, and `hypot(x, y, *more)` for two or more
  arguments.
- `dualdiff.utils`: `abs2`, `conj`, `real`, `imag`, `minimum`, `maximum`
  (each returns the chosen operand with its derivatives, preferring the
  first on ties), and `represent(x)`, which shows every node, for example
  `represent(Dual(2.0, 1.0))` gives `"dualdiff.dual(2, 1)"`.

The operators `+ - * / **`, unary `+` and `-`, `abs()` and `float()` work
on `Dual`. Comparisons (`==`, `<`, …) compare innermost values only and
ignore gradients; a `Dual` is not hashable. Combining duals of different
orders raises `TypeError`, and asking for a derivative beyond a dual's
order raises `ValueError`.

## What it does not do

The package works on scalar duals only. It has no helpers that build
gradients, Jacobians, Hessians or Taylor series of a function for you, no
vector or matrix types, and no reverse mode; seed the variables yourself
and read the derivatives off the result.