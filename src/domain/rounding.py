from __future__ import annotations

import logging
from decimal import Context, Decimal

from config import config

from .policy import RoundingPolicy

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

MAX_ROUNDING_DIGITS = 28
CURRENCY_PLACES = 2

# Headroom for the digits a quantize may add on top of the input's own digits.
_PRECISION_PADDING = 4


class DecimalDisplayError(Exception):
    pass


class DecimalOverflowError(DecimalDisplayError, OverflowError):
    def __init__(self, *, value: Decimal, limit: int) -> None:
        self.value = value
        self.limit = limit
        super().__init__(f"Value {value} is outside the representable range (limit={limit})")


class InvalidDecimalArgumentError(DecimalDisplayError, ValueError):
    def __init__(self, *, argument: str, value: object, reason: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid {argument}={value!r}: {reason}")


def ensure_finite(value: Decimal) -> None:
    """Reject NaN and infinities, which have no fixed-point representation."""
    if value.is_nan():
        raise InvalidDecimalArgumentError(argument="value", value=value, reason="NaN is not a fixed-point value")
    if value.is_infinite():
        logger.debug("Rejecting infinite decimal %s", value)
        raise DecimalOverflowError(value=value, limit=INT64_MAX)


def quantize(value: Decimal, places: int, policy: RoundingPolicy = RoundingPolicy.HALF_EVEN) -> Decimal:
    """Round ``value`` to ``places`` fractional digits.

    Uses a private context sized to the operand, so neither the caller's
    thread-local precision nor its traps can alter the result.
    """
    ensure_finite(value)
    precision = max(value.adjusted(), 0) + places + _PRECISION_PADDING
    context = Context(prec=max(precision, MAX_ROUNDING_DIGITS), rounding=policy.decimal_rounding)
    return value.quantize(Decimal(1).scaleb(-places), context=context)


def shift_decimal_point(value: Decimal, places: int) -> Decimal:
    """Multiply by 10**places without losing any of the coefficient's digits."""
    precision = max(len(value.as_tuple().digits), MAX_ROUNDING_DIGITS)
    return value.scaleb(places, context=Context(prec=precision))


def to_currency_rounded(
    value: Decimal,
    include_places: bool = True,
    *,
    rounding: RoundingPolicy | None = None,
) -> Decimal:
    policy = currency_rounding_policy() if rounding is None else rounding
    return quantize(value, CURRENCY_PLACES if include_places else 0, policy)


def round_to(value: Decimal | None, digits: int) -> Decimal | None:
    """Round half to even to ``digits`` places; ``None`` passes through."""
    if isinstance(digits, bool) or not isinstance(digits, int) or not 0 <= digits <= MAX_ROUNDING_DIGITS:
        raise InvalidDecimalArgumentError(
            argument="digits",
            value=digits,
            reason=f"expected an integer between 0 and {MAX_ROUNDING_DIGITS}",
        )
    if value is None:
        return None
    return quantize(value, digits, RoundingPolicy.HALF_EVEN)


def to_integer(value: Decimal) -> int:
    """Round half away from zero and convert to a signed 32-bit integer."""
    rounded = int(quantize(value, 0, RoundingPolicy.HALF_AWAY_FROM_ZERO))
    if not INT32_MIN <= rounded <= INT32_MAX:
        logger.debug("Integer conversion of %s overflows 32 bits", value)
        raise DecimalOverflowError(value=value, limit=INT32_MAX if rounded > 0 else INT32_MIN)
    return rounded


def to_float(value: Decimal) -> float:
    return float(value)


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator, or 0 when the denominator is zero."""
    if denominator == 0:
        logger.debug("Division of %s by zero replaced with 0", numerator)
        return Decimal(0)
    return numerator / denominator


def currency_rounding_policy() -> RoundingPolicy:
    return config().currency_rounding


__all__ = [
    "CURRENCY_PLACES",
    "DecimalDisplayError",
    "DecimalOverflowError",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "InvalidDecimalArgumentError",
    "MAX_ROUNDING_DIGITS",
    "RoundingPolicy",
    "currency_rounding_policy",
    "ensure_finite",
    "quantize",
    "round_to",
    "safe_divide",
    "shift_decimal_point",
    "to_currency_rounded",
    "to_float",
    "to_integer",
]
