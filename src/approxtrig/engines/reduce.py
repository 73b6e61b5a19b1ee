"""
approxtrig.engines.reduce
-------------------------
Range reduction shared by every tier.

Any finite x is folded into [0, pi/2] using
  - periodicity:  cos(x + 2*pi) = cos(x)
  - evenness:     cos(-x) = cos(x)
  - reflection:   cos(pi - x) = -cos(x), cos(x - pi) = -cos(x), cos(2*pi - x) = cos(x)
and the kernel is evaluated on the folded angle with the quadrant's sign.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.constants import HALF_PI, PI, TWO_OVER_PI, TWO_PI
from ..core.errors import ArithmeticDomainError
from .poly import CosineKernel


def reduce_quadrant(x: float) -> Tuple[int, float]:
    """
    Returns (quadrant, value) where value = |fmod(x, 2*pi)| lies in [0, 2*pi)
    and quadrant = floor(value * 2/pi).
    """
    if not math.isfinite(x):
        raise ArithmeticDomainError(x)
    value = math.fabs(math.fmod(x, TWO_PI))
    return int(value * TWO_OVER_PI), value


def cos_reduced(x: float, kernel: CosineKernel) -> float:
    quadrant, value = reduce_quadrant(x)
    if quadrant == 0:
        return kernel(value)
    if quadrant == 1:
        return -kernel(PI - value)
    if quadrant == 2:
        return -kernel(value - PI)
    if quadrant == 3:
        return kernel(TWO_PI - value)
    raise ArithmeticDomainError(x, quadrant)


def sin_reduced(x: float, kernel: CosineKernel) -> float:
    # sin(x) = cos(pi/2 - x)
    return cos_reduced(HALF_PI - x, kernel)
