"""approxtrig public API.

Polynomial sine and cosine at four fixed accuracy tiers. The tier is chosen by
the function called: cos_32/sin_32 (~3.2 digits) up to cos_121/sin_121 (~12.1 digits).
"""

from .api import (
    cos_32,
    sin_32,
    cos_52,
    sin_52,
    cos_73,
    sin_73,
    cos_121,
    sin_121,
    get_tier,
    list_tiers,
    tier_info,
)
from .core.errors import ApproxTrigError, ArithmeticDomainError, UnknownTierError
from .core.types import Tier

__all__ = [
    "cos_32",
    "sin_32",
    "cos_52",
    "sin_52",
    "cos_73",
    "sin_73",
    "cos_121",
    "sin_121",
    "get_tier",
    "list_tiers",
    "tier_info",
    "Tier",
    "ApproxTrigError",
    "ArithmeticDomainError",
    "UnknownTierError",
]
