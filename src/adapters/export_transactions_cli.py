"""CLI adapter exporting the stored transactions as CSV."""

import os
from pathlib import Path

from src.application.use_cases.export_transactions import (
    ExportTransactionsUseCase,
)
from src.infrastructure.container import build_state_store
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AppSettings


def main() -> None:
    """Write the CSV export to EXPORT_DIR, or print it when unset."""
    logger = get_app_logger()
    settings = AppSettings.from_env()
    store = build_state_store(settings)
    result = ExportTransactionsUseCase(store, logger=logger).execute()

    if result.row_count == 0:
        logger.warning("No transactions to export.")
        return

    raw_dir = os.getenv("EXPORT_DIR")
    if not raw_dir:
        print(result.content)
        return

    output = Path(raw_dir).expanduser() / result.file_name
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.content, encoding="utf-8")
    print(f"Exported {result.row_count} transactions to {output}")


if __name__ == "__main__":  # pragma: no cover
    main()
