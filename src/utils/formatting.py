from __future__ import annotations

import logging
from decimal import Context, Decimal

from domain.policy import RoundingPolicy
from domain.rounding import (
    CURRENCY_PLACES,
    INT64_MAX,
    MAX_ROUNDING_DIGITS,
    DecimalOverflowError,
    currency_rounding_policy,
    ensure_finite,
    quantize,
    shift_decimal_point,
)

logger = logging.getLogger(__name__)

_CURRENCY_SYMBOL = ord("$")
_DECIMAL_SEPARATOR = ord(".")
_GROUP_SEPARATOR = ord(",")
_MINUS_SIGN = ord("-")
_ZERO = ord("0")

# Sign, symbol, 19 digits of an int64, 6 separators and ".00" fit in 30 bytes.
_BUFFER_SIZE = 32
_GROUP_SIZE = 3

# Magnitude of INT64_MIN; it has no positive int64 counterpart.
_MAGNITUDE_LIMIT = Decimal(INT64_MAX) + 1


def format_decimal(value: Decimal) -> str:
    quantized = value.normalize(Context(prec=max(len(value.as_tuple().digits), MAX_ROUNDING_DIGITS)))
    # Avoid scientific notation for integers.
    if quantized == quantized.to_integral():
        return f"{quantized:.0f}"
    return format(quantized, "f")


def format_currency(
    value: Decimal,
    exclude_places: bool = False,
    *,
    rounding: RoundingPolicy | None = None,
) -> str:
    """Render ``value`` as US dollars, e.g. ``-$1,234.56``.

    The magnitude is rounded to whole cents (or whole dollars when
    ``exclude_places`` is set) with the currency rounding policy, half to even
    unless configured otherwise. A value that rounds to zero never carries a
    minus sign.

    Raises DecimalOverflowError when the rounded dollar amount does not fit a
    signed 64-bit integer.
    """
    ensure_finite(value)
    is_negative = value < 0
    magnitude = value.copy_abs()
    if magnitude >= _MAGNITUDE_LIMIT:
        logger.debug("Currency value %s exceeds the 64-bit range", value)
        raise DecimalOverflowError(value=value, limit=INT64_MAX)

    policy = currency_rounding_policy() if rounding is None else rounding
    places = 0 if exclude_places else CURRENCY_PLACES
    units = int(shift_decimal_point(quantize(magnitude, places, policy), places))
    dollars, cents = divmod(units, 10**places)
    if dollars > INT64_MAX:
        logger.debug("Rounded currency value %s exceeds the 64-bit range", value)
        raise DecimalOverflowError(value=value, limit=INT64_MAX)

    buffer = bytearray(_BUFFER_SIZE)
    pos = _BUFFER_SIZE

    if not exclude_places:
        pos -= 1
        buffer[pos] = _ZERO + cents % 10
        pos -= 1
        buffer[pos] = _ZERO + cents // 10
        pos -= 1
        buffer[pos] = _DECIMAL_SEPARATOR

    digit_count = 0
    while True:
        dollars, digit = divmod(dollars, 10)
        pos -= 1
        buffer[pos] = _ZERO + digit
        digit_count += 1
        if dollars == 0:
            break
        if digit_count % _GROUP_SIZE == 0:
            pos -= 1
            buffer[pos] = _GROUP_SEPARATOR

    pos -= 1
    buffer[pos] = _CURRENCY_SYMBOL
    if is_negative and units:
        pos -= 1
        buffer[pos] = _MINUS_SIGN

    return buffer[pos:].decode("ascii")


def format_currency_optional(
    value: Decimal | None,
    exclude_places: bool = False,
    *,
    rounding: RoundingPolicy | None = None,
) -> str | None:
    if value is None:
        return None
    return format_currency(value, exclude_places, rounding=rounding)


def format_percent(value: Decimal, *, rounding: RoundingPolicy | None = None) -> str:
    """Render a ratio as a percentage with at most two fractional digits.

    ``Decimal("0.5")`` becomes ``"50%"`` and ``Decimal("0.3333")`` becomes
    ``"33.33%"``. Zero, and anything that rounds to zero, is ``"0%"``.
    """
    ensure_finite(value)
    if value == 0:
        return "0%"

    policy = currency_rounding_policy() if rounding is None else rounding
    scaled = quantize(shift_decimal_point(value, 2), 2, policy)
    if scaled == 0:
        return "0%"
    return f"{format_decimal(scaled)}%"


__all__ = ["format_currency", "format_currency_optional", "format_decimal", "format_percent"]
