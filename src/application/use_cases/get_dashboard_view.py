"""Use case to build the dashboard view for a date range."""

from src.application.state_store import AppStateStore
from src.domain.models import DashboardView, TransactionType
from src.domain.services.date_ranges import DateRange, filter_by_range
from src.domain.services.finance import (
    compute_cashflow_summary,
    compute_goal_progress,
    compute_net_worth,
    compute_portfolio_summary,
)
from src.domain.services.grouping import (
    allocation_by_investment,
    bucket_by_date,
    group_by_category,
)
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardViewUseCase:
    """Derive the chart-ready dashboard summary from the latest snapshot."""

    def __init__(self, store: AppStateStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: State container providing the latest snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, date_range: DateRange) -> DashboardView:
        """Return the dashboard view for ``date_range``.

        Cashflow and category/day breakdowns use the transactions inside the
        range. Net worth uses the whole history and the portfolio and goals
        are current balances, so none of them depend on the range.

        Args:
            date_range: Inclusive period selected by the user.

        Returns:
            DashboardView: Totals, breakdowns, and trend series.
        """
        state = self._store.snapshot
        filtered = filter_by_range(
            state.transactions,
            date_range.start,
            date_range.end,
        )
        cashflow = compute_cashflow_summary(filtered)
        net_worth = compute_net_worth(
            state.transactions,
            state.investments,
            state.goals,
        )
        self._logger.info(
            f"Dashboard computed for {date_range.start}..{date_range.end}: "
            f"{len(filtered)} transactions, income={cashflow.total_income}, "
            f"expense={cashflow.total_expense}, net_worth={net_worth.net_worth}"
        )
        return DashboardView(
            start_date=date_range.start,
            end_date=date_range.end,
            cashflow=cashflow,
            net_worth=net_worth,
            portfolio=compute_portfolio_summary(state.investments),
            goals=tuple(compute_goal_progress(g) for g in state.goals),
            income_by_category=group_by_category(
                filtered,
                state.categories,
                TransactionType.INCOME,
            ),
            expense_by_category=group_by_category(
                filtered,
                state.categories,
                TransactionType.EXPENSE,
            ),
            daily_flows=bucket_by_date(filtered),
            allocation=allocation_by_investment(state.investments),
            transaction_count=len(filtered),
        )


__all__ = ["GetDashboardViewUseCase", "DashboardView"]
