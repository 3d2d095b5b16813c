"""Use case to export the full transaction history as CSV."""

from dataclasses import dataclass
from datetime import date
from typing import Callable

from src.application.state_store import AppStateStore
from src.domain.services.export import build_transactions_csv, export_file_name
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class TransactionsExport:
    """CSV content with its suggested download name."""

    file_name: str
    content: str
    row_count: int


class ExportTransactionsUseCase:
    """Export every stored transaction, ignoring any date filter."""

    def __init__(
        self,
        store: AppStateStore,
        logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._store = store
        self._logger = logger or get_app_logger()
        self._today = today

    def execute(self) -> TransactionsExport:
        """Return the CSV export of the unfiltered transaction collection."""
        transactions = self._store.snapshot.transactions
        content = build_transactions_csv(transactions)
        self._logger.info(f"Exported {len(transactions)} transactions")
        return TransactionsExport(
            file_name=export_file_name(self._today()),
            content=content,
            row_count=len(transactions),
        )


__all__ = ["ExportTransactionsUseCase", "TransactionsExport"]
