from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP
from enum import StrEnum


class RoundingPolicy(StrEnum):
    """How a value exactly halfway between two results is resolved."""

    HALF_EVEN = "HALF_EVEN"
    HALF_AWAY_FROM_ZERO = "HALF_AWAY_FROM_ZERO"
    TRUNCATE = "TRUNCATE"

    @property
    def decimal_rounding(self) -> str:
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING: dict[RoundingPolicy, str] = {
    RoundingPolicy.HALF_EVEN: ROUND_HALF_EVEN,
    # decimal's ROUND_HALF_UP rounds ties away from zero for both signs.
    RoundingPolicy.HALF_AWAY_FROM_ZERO: ROUND_HALF_UP,
    RoundingPolicy.TRUNCATE: ROUND_DOWN,
}


__all__ = ["RoundingPolicy"]
