"""CLI adapter printing dashboard totals for a period."""

from datetime import date
import os

from src.application.use_cases.get_dashboard_view import (
    GetDashboardViewUseCase,
)
from src.domain.services.date_ranges import DateRangePreset, resolve_preset
from src.infrastructure.container import build_state_store
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AppSettings
from src.utils.formatting import format_idr, format_percent


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_preset(value: str | None, logger) -> DateRangePreset:
    if not value:
        return DateRangePreset.THIS_MONTH
    try:
        return DateRangePreset(value)
    except ValueError:
        logger.warning(
            f"Unknown preset '{value}'. Using {DateRangePreset.THIS_MONTH.value}."
        )
        return DateRangePreset.THIS_MONTH


def main() -> None:
    """Print cashflow, net worth, and top expense categories."""
    logger = get_app_logger()
    preset = _parse_preset(os.getenv("SUMMARY_PRESET"), logger)
    start = _parse_date(os.getenv("SUMMARY_START_DATE"), logger)
    end = _parse_date(os.getenv("SUMMARY_END_DATE"), logger)
    if preset is DateRangePreset.CUSTOM and (start is None or end is None):
        logger.warning(
            "SUMMARY_START_DATE and SUMMARY_END_DATE are required "
            "for the custom preset."
        )
        return

    store = build_state_store(AppSettings.from_env())
    date_range = resolve_preset(preset, date.today(), start, end)
    view = GetDashboardViewUseCase(store, logger=logger).execute(date_range)

    print(f"Period {view.start_date} - {view.end_date} ({preset.label})")
    print(
        f"Income: {format_idr(view.cashflow.total_income)}, "
        f"expense: {format_idr(view.cashflow.total_expense)}, "
        f"cashflow: {format_idr(view.cashflow.cashflow)}"
    )
    print(
        f"Net worth: {format_idr(view.net_worth.net_worth)} "
        f"(portfolio {format_idr(view.portfolio.value)}, "
        f"gain {format_percent(view.portfolio.gain_percent)})"
    )
    for item in view.expense_by_category:
        print(f"  {item.name}: {format_idr(item.amount)}")


if __name__ == "__main__":  # pragma: no cover
    main()
