"""Comma-separated export of the transaction history."""

from collections.abc import Iterable
from datetime import date

from src.domain.constants import CSV_HEADERS
from src.domain.models import Transaction


def quote_field(value: str) -> str:
    """Wrap a value in double quotes, doubling embedded quotes."""
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def build_transactions_csv(transactions: Iterable[Transaction]) -> str:
    """Render transactions as a CSV table in the given order.

    Only the description column is quoted, matching the spreadsheet import
    format users already rely on.

    Args:
        transactions: Transactions in store order.

    Returns:
        str: Header line followed by one line per transaction.
    """
    lines = [",".join(CSV_HEADERS)]
    for t in transactions:
        lines.append(
            ",".join(
                [
                    t.date.isoformat(),
                    quote_field(t.description),
                    t.type.value,
                    t.category,
                    str(t.amount),
                ]
            )
        )
    return "\n".join(lines)


def export_file_name(today: date) -> str:
    return f"transaksi_dompetpintar_{today.isoformat()}.csv"


__all__ = ["quote_field", "build_transactions_csv", "export_file_name"]
