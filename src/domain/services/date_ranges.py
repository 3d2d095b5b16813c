"""Date-range presets and the transaction range filter."""

from calendar import monthrange
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

from src.domain.models.entities import Transaction


class DateRangePreset(str, Enum):
    """Period shortcuts offered by the range picker."""

    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"
    LAST_30_DAYS = "last30Days"
    THIS_YEAR = "thisYear"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return _PRESET_LABELS[self]


_PRESET_LABELS = {
    DateRangePreset.THIS_MONTH: "Bulan Ini",
    DateRangePreset.LAST_MONTH: "Bulan Lalu",
    DateRangePreset.LAST_30_DAYS: "30 Hari Terakhir",
    DateRangePreset.THIS_YEAR: "Tahun Ini",
    DateRangePreset.CUSTOM: "Custom",
}


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-day interval.

    ``start <= end`` is the caller's responsibility; an inverted range simply
    matches nothing.
    """

    start: date
    end: date
    preset: DateRangePreset = DateRangePreset.CUSTOM

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def to_local_day(value: date | datetime) -> date:
    """Return the calendar day of ``value`` in local time."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def month_range(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a calendar month."""
    last_day = monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def resolve_preset(
    preset: DateRangePreset | str,
    today: date,
    start: date | datetime | None = None,
    end: date | datetime | None = None,
) -> DateRange:
    """Build the date range for a preset relative to ``today``.

    Args:
        preset: Preset or its string value.
        today: Reference day.
        start: First day for the custom preset.
        end: Last day for the custom preset.

    Returns:
        DateRange: Inclusive range for the preset.

    Raises:
        ValueError: If a custom range is requested without both bounds.
    """
    preset = DateRangePreset(preset)
    if preset is DateRangePreset.THIS_MONTH:
        first, last = month_range(today.year, today.month)
    elif preset is DateRangePreset.LAST_MONTH:
        previous = today.replace(day=1) - timedelta(days=1)
        first, last = month_range(previous.year, previous.month)
    elif preset is DateRangePreset.LAST_30_DAYS:
        first, last = today - timedelta(days=30), today
    elif preset is DateRangePreset.THIS_YEAR:
        first, last = date(today.year, 1, 1), date(today.year, 12, 31)
    else:
        if start is None or end is None:
            raise ValueError("Custom date range requires start and end.")
        first, last = to_local_day(start), to_local_day(end)
    return DateRange(start=first, end=last, preset=preset)


def filter_by_range(
    transactions: Iterable[Transaction],
    start: date | datetime,
    end: date | datetime,
) -> tuple[Transaction, ...]:
    """Keep transactions dated within ``[start, end]`` by calendar day.

    Args:
        transactions: Transactions in store order.
        start: Range start; its whole day is included.
        end: Range end; its whole day is included.

    Returns:
        tuple[Transaction, ...]: Matching transactions, order preserved.
    """
    first = to_local_day(start)
    last = to_local_day(end)
    return tuple(t for t in transactions if first <= t.date <= last)


__all__ = [
    "DateRangePreset",
    "DateRange",
    "to_local_day",
    "month_range",
    "resolve_preset",
    "filter_by_range",
]
