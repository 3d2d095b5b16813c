"""Domain normalization helpers."""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from src.utils.decimal_utils import coerce_decimal

E = TypeVar("E", bound=Enum)


def normalize_symbol(symbol: str | None) -> str:
    """Normalize investment symbols to trimmed upper-case."""
    if not symbol:
        return ""
    return symbol.strip().upper()


def normalize_name(name: str | None) -> str:
    """Trim surrounding whitespace from display names."""
    if not name:
        return ""
    return name.strip()


def normalize_amount(value) -> int:
    """Coerce an amount to whole currency units.

    Raises:
        ValueError: If the value has a fractional part.
    """
    amount = normalize_decimal(value)
    if amount != amount.to_integral_value():
        raise ValueError(f"Amount must be a whole number: {value}")
    return int(amount)


def normalize_enum(enum_type: type[E], value) -> E:
    """Return ``value`` as a member of ``enum_type``.

    Accepts members, values, or member names.
    """
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        pass
    try:
        return enum_type[str(value).strip().upper()]
    except KeyError:
        raise ValueError(
            f"Unknown {enum_type.__name__}: {value!r}"
        ) from None


def normalize_decimal(value) -> Decimal:
    """Coerce ``value`` to Decimal.

    Raises:
        ValueError: If the value is not numeric.
    """
    try:
        return coerce_decimal(value)
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}") from None


__all__ = [
    "normalize_symbol",
    "normalize_name",
    "normalize_amount",
    "normalize_enum",
    "normalize_decimal",
]
