"""
approxtrig.engines.tiers
------------------------
The shipped accuracy tiers. Coefficients are minimax fits of cos(x) on
[0, pi/2] (J. Ganssle, "A Guide to Approximations") and are kept as literals;
they are not the Taylor coefficients and cannot be re-derived exactly.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..core.types import Tier

# cos(x) = c1 + c2*x**2 + c3*x**4
TIER_32 = Tier(
    key="32",
    digits=3.2,
    coefficients=(
        0.99940307,
        -0.49558072,
        0.03679168,
    ),
)

# cos(x) = c1 + c2*x**2 + c3*x**4 + c4*x**6
TIER_52 = Tier(
    key="52",
    digits=5.2,
    coefficients=(
        0.9999932946,
        -0.4999124376,
        0.0414877472,
        -0.0012712095,
    ),
)

# cos(x) = c1 + c2*x**2 + c3*x**4 + c4*x**6 + c5*x**8
TIER_73 = Tier(
    key="73",
    digits=7.3,
    coefficients=(
        0.999999953464,
        -0.499999053455,
        0.0416635846769,
        -0.0013853704264,
        0.00002315393167,
    ),
)

# cos(x) = c1 + c2*x**2 + ... + c7*x**12
TIER_121 = Tier(
    key="121",
    digits=12.1,
    coefficients=(
        0.99999999999925182,
        -0.49999999997024012,
        0.041666666473384543,
        -0.001388888418000423,
        0.0000248010406484558,
        -0.0000002752469638432,
        0.0000000019907856854,
    ),
)

ALL_TIERS: Mapping[str, Tier] = MappingProxyType({
    t.key: t for t in (TIER_32, TIER_52, TIER_73, TIER_121)
})
