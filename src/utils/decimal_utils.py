"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from storage, forms, or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def safe_percent(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part / whole * 100``, or zero when ``whole`` is zero."""
    if whole == 0:
        return _ZERO
    try:
        return (coerce_decimal(part) / coerce_decimal(whole)) * _HUNDRED
    except InvalidOperation:
        return _ZERO


def round_whole(value: Decimal) -> Decimal:
    """Round to the nearest whole currency unit, halves away from zero."""
    return coerce_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "safe_percent", "round_whole"]
