"""Rounding primitives and error types for the decimal display helpers.

Everything here operates on ``decimal.Decimal`` and never on binary floats,
except for the explicit ``to_float`` conversion.
"""

__all__ = [
    "policy",
    "rounding",
]
