from __future__ import annotations

from typing import Optional


class ApproxTrigError(Exception):
    """Base error."""

class ArithmeticDomainError(ApproxTrigError, ArithmeticError):
    """Raised when range reduction cannot place x in a quadrant (non-finite input)."""

    def __init__(self, x: float, quadrant: Optional[int] = None):
        self.x = x
        self.quadrant = quadrant
        if quadrant is None:
            msg = f"cannot reduce non-finite argument {x!r}"
        else:
            msg = f"quadrant {quadrant} out of range for argument {x!r}"
        super().__init__(msg)

class UnknownTierError(ApproxTrigError, KeyError):
    """Raised when a tier key is not one of the shipped accuracy tiers."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
