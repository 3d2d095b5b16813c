"""Number formatting helpers using the Indonesian digit grouping."""

from decimal import Decimal, InvalidOperation

from src.utils.decimal_utils import coerce_decimal, round_whole


def format_number(value) -> str:
    """Format a number with ``.`` as thousands separator.

    Returns an empty string for blank or non-numeric input.
    """
    if value is None or value == "":
        return ""
    try:
        if isinstance(value, str):
            number = Decimal(value.replace(".", ""))
        else:
            number = coerce_decimal(value)
        whole = int(round_whole(number))
    except (InvalidOperation, ValueError):
        return ""
    return f"{whole:,}".replace(",", ".")


def parse_number(formatted: str | None) -> int:
    """Parse a dot-grouped number, returning 0 when it cannot be read."""
    if not formatted:
        return 0
    try:
        return int(formatted.replace(".", "").strip())
    except ValueError:
        return 0


def format_idr(value) -> str:
    """Format an amount as ``IDR 1.234.567`` (negative as ``IDR -1.234``)."""
    return f"IDR {format_number(value) or '0'}"


def format_percent(value, digits: int = 2) -> str:
    return f"{coerce_decimal(value):.{digits}f}%"


__all__ = ["format_number", "parse_number", "format_idr", "format_percent"]
