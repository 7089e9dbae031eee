"""Forward-mode automatic differentiation with nested dual numbers.

Modules: dual (the Dual type and derivative helpers), elementary
(trigonometric, hyperbolic, exponential and logarithmic functions),
special (power, absolute, erf, atan2, hypot) and utils (small helpers).
"""

__version__ = "0.1.0"
__all__ = ["dual", "elementary", "special", "utils"]