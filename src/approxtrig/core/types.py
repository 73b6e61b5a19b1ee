from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..engines.poly import horner_even

@dataclass(frozen=True)
class Tier:
    """
    One accuracy tier: a fixed even-polynomial fit of cos(x) on [0, pi/2].

    coefficients are c1..cN of
        cos(x) ~ c1 + x^2 (c2 + x^2 (c3 + ... + cN x^2))
    """
    key: str                          # "32", "52", "73", "121"
    digits: float                     # declared decimal digits of accuracy
    coefficients: Tuple[float, ...]

    def __post_init__(self) -> None:
        if not self.coefficients:
            raise ValueError("coefficients must not be empty")
        if self.digits <= 0:
            raise ValueError("digits must be positive")

    @property
    def terms(self) -> int:
        return len(self.coefficients)

    @property
    def tolerance(self) -> float:
        """Absolute error bound 10^-d, d the whole number of declared digits."""
        return 10.0 ** (-int(self.digits))

    def evaluate(self, x: float) -> float:
        """cos(x) for x in [0, pi/2] only; the range reducer guarantees that."""
        return horner_even(x, self.coefficients)

    def info(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "digits": self.digits,
            "terms": self.terms,
            "tolerance": self.tolerance,
            "coefficients": self.coefficients,
        }
