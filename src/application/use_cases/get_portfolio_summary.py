"""Use case to value the investment portfolio."""

from dataclasses import dataclass

from src.application.state_store import AppStateStore
from src.domain.models import AllocationSlice, PortfolioSummary
from src.domain.services.finance import compute_portfolio_summary
from src.domain.services.grouping import (
    allocation_by_investment,
    allocation_by_type,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PortfolioView:
    """Portfolio totals with allocation breakdowns."""

    summary: PortfolioSummary
    by_symbol: tuple[AllocationSlice, ...]
    by_type: tuple[AllocationSlice, ...]


class GetPortfolioSummaryUseCase:
    """Value all holdings at their latest prices."""

    def __init__(self, store: AppStateStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> PortfolioView:
        investments = self._store.snapshot.investments
        summary = compute_portfolio_summary(investments)
        self._logger.info(
            f"Portfolio valued: value={summary.value}, cost={summary.cost}, "
            f"gain={summary.gain}"
        )
        return PortfolioView(
            summary=summary,
            by_symbol=allocation_by_investment(investments),
            by_type=allocation_by_type(investments),
        )


__all__ = ["GetPortfolioSummaryUseCase", "PortfolioView"]
