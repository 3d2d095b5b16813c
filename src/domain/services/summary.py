"""Plain-text snapshot summary handed to the advice assistant."""

from src.domain.models import AppState
from src.domain.services.finance import (
    compute_cashflow_summary,
    compute_portfolio_summary,
)
from src.utils.formatting import format_number

ADVICE_INSTRUCTION = (
    "Berikan saran keuangan yang bijak, ringkas, dan dapat ditindaklanjuti "
    "dalam Bahasa Indonesia. Fokus pada alokasi aset, manajemen risiko, dan "
    "pencapaian tujuan."
)


def build_advice_context(state: AppState, query: str) -> str:
    """Summarize a snapshot and the user question as prompt text.

    The output depends only on ``state`` and ``query``: totals over the whole
    history, one line per investment, one line per goal, in store order.
    """
    cashflow = compute_cashflow_summary(state.transactions)
    portfolio = compute_portfolio_summary(state.investments)

    lines = [
        "Konteks Keuangan Pengguna:",
        f"- Total Pemasukan: IDR {format_number(cashflow.total_income)}",
        f"- Total Pengeluaran: IDR {format_number(cashflow.total_expense)}",
        f"- Sisa Saldo Kas: IDR {format_number(cashflow.cashflow)}",
        f"- Nilai Portofolio Investasi: IDR {format_number(portfolio.value)}",
        "",
        "Detail Investasi:",
    ]
    lines.extend(
        f"- {inv.name} ({inv.type.label}): {inv.quantity} unit "
        f"@ IDR {format_number(inv.current_price)}"
        for inv in state.investments
    )
    lines.extend(["", "Tujuan Tabungan:"])
    lines.extend(
        f"- {goal.name} ({goal.type.label}): "
        f"Tercapai IDR {format_number(goal.current_amount)} "
        f"/ Target IDR {format_number(goal.target_amount)}"
        for goal in state.goals
    )
    lines.extend(
        [
            "",
            f'Pertanyaan Pengguna: "{query}"',
            "",
            ADVICE_INSTRUCTION,
        ]
    )
    return "\n".join(lines)


__all__ = ["ADVICE_INSTRUCTION", "build_advice_context"]
