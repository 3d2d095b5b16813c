"""Domain services package."""

from .categories import build_color_index, default_categories, resolve_color
from .date_ranges import (
    DateRange,
    DateRangePreset,
    filter_by_range,
    resolve_preset,
)
from .export import build_transactions_csv, export_file_name
from .finance import (
    compute_cashflow_summary,
    compute_goal_progress,
    compute_investment_performance,
    compute_net_worth,
    compute_portfolio_summary,
    compute_total_assets,
)
from .grouping import (
    allocation_by_investment,
    allocation_by_type,
    bucket_by_date,
    group_by_category,
)
from .pricing import apply_price_tick
from .summary import build_advice_context

__all__ = [
    "build_color_index",
    "default_categories",
    "resolve_color",
    "DateRange",
    "DateRangePreset",
    "filter_by_range",
    "resolve_preset",
    "build_transactions_csv",
    "export_file_name",
    "compute_cashflow_summary",
    "compute_goal_progress",
    "compute_investment_performance",
    "compute_net_worth",
    "compute_portfolio_summary",
    "compute_total_assets",
    "allocation_by_investment",
    "allocation_by_type",
    "bucket_by_date",
    "group_by_category",
    "apply_price_tick",
    "build_advice_context",
]
