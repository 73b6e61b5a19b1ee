from __future__ import annotations

from typing import Any, Dict, List

from .core.errors import UnknownTierError
from .core.types import Tier
from .engines.reduce import cos_reduced, sin_reduced
from .engines.tiers import ALL_TIERS, TIER_32, TIER_52, TIER_73, TIER_121


# ============================================================
# 3.2 digits
# ============================================================

def cos_32(x: float) -> float:
    """cos(x) for any finite x, accurate to about 3.2 decimal digits."""
    return cos_reduced(x, TIER_32.evaluate)

def sin_32(x: float) -> float:
    """sin(x) for any finite x, accurate to about 3.2 decimal digits."""
    return sin_reduced(x, TIER_32.evaluate)

# ============================================================
# 5.2 digits
# ============================================================

def cos_52(x: float) -> float:
    """cos(x) for any finite x, accurate to about 5.2 decimal digits."""
    return cos_reduced(x, TIER_52.evaluate)

def sin_52(x: float) -> float:
    """sin(x) for any finite x, accurate to about 5.2 decimal digits."""
    return sin_reduced(x, TIER_52.evaluate)

# ============================================================
# 7.3 digits
# ============================================================

def cos_73(x: float) -> float:
    """cos(x) for any finite x, accurate to about 7.3 decimal digits."""
    return cos_reduced(x, TIER_73.evaluate)

def sin_73(x: float) -> float:
    """sin(x) for any finite x, accurate to about 7.3 decimal digits."""
    return sin_reduced(x, TIER_73.evaluate)

# ============================================================
# 12.1 digits
# ============================================================

def cos_121(x: float) -> float:
    """cos(x) for any finite x, accurate to about 12.1 decimal digits."""
    return cos_reduced(x, TIER_121.evaluate)

def sin_121(x: float) -> float:
    """sin(x) for any finite x, accurate to about 12.1 decimal digits."""
    return sin_reduced(x, TIER_121.evaluate)

# ============================================================
# Introspection
# ============================================================

ENTRY_POINTS = {
    "32": (cos_32, sin_32),
    "52": (cos_52, sin_52),
    "73": (cos_73, sin_73),
    "121": (cos_121, sin_121),
}

def get_tier(key: str) -> Tier:
    if key not in ALL_TIERS:
        raise UnknownTierError(f"Unknown tier '{key}'. Available: {list_tiers()}")
    return ALL_TIERS[key]

def list_tiers() -> List[str]:
    return sorted(ALL_TIERS, key=lambda k: ALL_TIERS[k].digits)

def tier_info(key: str) -> Dict[str, Any]:
    info = get_tier(key).info()
    cos_fn, sin_fn = ENTRY_POINTS[key]
    info["cos"] = cos_fn.__name__
    info["sin"] = sin_fn.__name__
    return info
