"""
approxtrig.engines.poly
-----------------------
Horner evaluation of even polynomials, the kernel behind every accuracy tier.

For coefficients (c1, ..., cN) the polynomial
    c1 + c2*x**2 + c3*x**4 + ... + cN*x**(2N-2)
is evaluated in nested form
    c1 + x**2 (c2 + x**2 (c3 + ... (c(N-1) + cN*x**2)))
which needs one square plus N-1 multiply-adds.
"""

from __future__ import annotations

from typing import Protocol, Sequence


class CosineKernel(Protocol):
    """Approximates cos(x) for x in [0, pi/2]. Behaviour outside that range is unspecified."""
    def __call__(self, x: float) -> float: ...


def horner_even(x: float, coefficients: Sequence[float]) -> float:
    x_squared = x * x
    acc = coefficients[-1]
    for c in reversed(coefficients[:-1]):
        acc = c + x_squared * acc
    return acc
