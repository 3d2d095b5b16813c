"""Streamlit dashboard entry point."""

import asyncio
from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

import streamlit as st

from src.adapters.interface.streamlit.charts import (
    build_donut_chart,
    build_trend_chart,
    prepare_allocation_data,
    prepare_donut_data,
    prepare_trend_data,
)
from src.adapters.interface.streamlit.sankey_cashflow import (
    build_plotly_figure,
    build_sankey_model,
)
from src.application.state_store import AppStateStore
from src.application.use_cases.export_transactions import (
    ExportTransactionsUseCase,
)
from src.application.use_cases.get_dashboard_view import (
    GetDashboardViewUseCase,
)
from src.application.use_cases.get_goal_progress import GetGoalProgressUseCase
from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from src.application.use_cases.request_advice import (
    AdviceConversation,
    RequestAdviceUseCase,
)
from src.domain.constants import CATEGORY_PALETTE, QUICK_DEPOSIT_AMOUNTS
from src.domain.models import (
    Category,
    DashboardView,
    GoalType,
    InvestmentPerformance,
    InvestmentType,
    Transaction,
    TransactionType,
)
from src.domain.models.inputs import (
    CategoryInput,
    GoalInput,
    InvestmentInput,
    TransactionInput,
)
from src.domain.services.categories import resolve_color
from src.domain.services.date_ranges import (
    DateRange,
    DateRangePreset,
    resolve_preset,
)
from src.domain.services.entities import find_entity
from src.domain.services.finance import (
    compute_investment_performance,
    compute_total_assets,
)
from src.infrastructure.container import (
    build_advice_client,
    build_price_ticker,
    build_state_store,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.utils.formatting import format_idr, format_percent, parse_number

PAGES = [
    "Dashboard",
    "Transaksi",
    "Investasi",
    "Tujuan Tabungan",
    "Kategori",
    "Asisten AI",
]
TYPE_LABELS = {
    TransactionType.INCOME: "Pemasukan",
    TransactionType.EXPENSE: "Pengeluaran",
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas expose what Altair needs.

    Returns:
        Tuple of (ok, error message).
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Altair dependencies missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (missing Timestamp)."
    return True, None


def _fetch_store() -> AppStateStore:
    """Build the persisted store and start the simulated price ticker."""
    store = build_state_store()
    ticker = build_price_ticker(store)
    ticker.start()
    return store


@st.cache_resource(show_spinner=False)
def _load_store() -> AppStateStore:
    """Process-wide store shared by every Streamlit session."""
    return _fetch_store()


def _resolve_range(
    preset: DateRangePreset,
    today: date,
    custom_start: date | None = None,
    custom_end: date | None = None,
) -> DateRange | None:
    """Return the selected range, or None for an incomplete custom range."""
    if preset is DateRangePreset.CUSTOM and (
        custom_start is None or custom_end is None
    ):
        return None
    return resolve_preset(preset, today, custom_start, custom_end)


def _format_delta(value: Decimal) -> str:
    """Format signed values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{format_idr(value)}"


def _transaction_rows(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
) -> list[dict[str, str]]:
    """Build table rows, resolving each category's display colour."""
    return [
        {
            "Tanggal": tx.date.isoformat(),
            "Deskripsi": tx.description,
            "Tipe": TYPE_LABELS[tx.type],
            "Kategori": tx.category,
            "Warna": resolve_color(categories, tx.category, tx.type),
            "Jumlah": format_idr(tx.amount * tx.type.sign),
        }
        for tx in transactions
    ]


def _transaction_label(transaction: Transaction | None) -> str:
    if transaction is None:
        return "-"
    return f"{transaction.date.isoformat()} {transaction.description}"


def _investment_rows(
    performances: Sequence[InvestmentPerformance],
) -> list[dict[str, str]]:
    """Build holding rows with unrealized gain."""
    return [
        {
            "Simbol": perf.investment.symbol,
            "Nama": perf.investment.name,
            "Jenis": perf.investment.type.label,
            "Jumlah": f"{perf.investment.quantity}",
            "Harga Rata-rata": format_idr(perf.investment.avg_buy_price),
            "Harga Saat Ini": format_idr(perf.investment.current_price),
            "Nilai": format_idr(perf.value),
            "P/L": _format_delta(perf.pl),
            "P/L %": format_percent(perf.pl_percent),
        }
        for perf in performances
    ]


def _render_period_selector(today: date) -> DateRange | None:
    """Render the sidebar period picker."""
    preset = st.sidebar.selectbox(
        "Periode",
        list(DateRangePreset),
        format_func=lambda item: item.label,
    )
    custom_start = custom_end = None
    if preset is DateRangePreset.CUSTOM:
        custom_start = st.sidebar.date_input(
            "Dari", value=today - timedelta(days=30)
        )
        custom_end = st.sidebar.date_input("Sampai", value=today)
    return _resolve_range(preset, today, custom_start, custom_end)


def _render_metrics(view: DashboardView) -> None:
    """Render the headline metric cards."""
    (
        income_col,
        expense_col,
        cashflow_col,
        portfolio_col,
        net_worth_col,
    ) = st.columns(5)
    income_col.metric("Pemasukan", format_idr(view.cashflow.total_income))
    expense_col.metric("Pengeluaran", format_idr(view.cashflow.total_expense))
    cashflow_col.metric(
        "Arus Kas",
        format_idr(view.cashflow.cashflow),
        "Defisit" if view.cashflow.is_deficit else "Surplus",
        delta_color="inverse" if view.cashflow.is_deficit else "normal",
    )
    portfolio_col.metric(
        "Portofolio",
        format_idr(view.portfolio.value),
        _format_delta(view.portfolio.gain),
    )
    net_worth_col.metric(
        "Kekayaan Bersih", format_idr(view.net_worth.net_worth)
    )


def _render_dashboard(store: AppStateStore, date_range: DateRange) -> None:
    """Render the dashboard for the selected period."""
    view = GetDashboardViewUseCase(store).execute(date_range)
    st.caption(
        f"{date_range.preset.label}: {view.start_date.isoformat()} - "
        f"{view.end_date.isoformat()} ({view.transaction_count} transaksi)"
    )
    _render_metrics(view)

    charts_ok, charts_error = _check_altair_dependencies()
    if not charts_ok:
        st.error(charts_error)
        return

    chart_left, chart_right = st.columns(2)
    with chart_left:
        st.subheader("Pengeluaran per Kategori")
        if view.expense_by_category:
            donut = build_donut_chart(
                prepare_donut_data(view.expense_by_category)
            )
            st.altair_chart(donut, width="stretch")
        else:
            st.info("Belum ada pengeluaran pada periode ini.")
    with chart_right:
        st.subheader("Alokasi Aset")
        if view.allocation:
            allocation = build_donut_chart(
                prepare_allocation_data(view.allocation)
            )
            st.altair_chart(allocation, width="stretch")
        else:
            st.info("Belum ada investasi.")

    st.subheader("Tren Harian")
    if view.daily_flows:
        st.altair_chart(
            build_trend_chart(prepare_trend_data(view.daily_flows)),
            width="stretch",
        )
    st.subheader("Aliran Kas")
    if view.income_by_category or view.expense_by_category:
        st.plotly_chart(
            build_plotly_figure(build_sankey_model(view)),
            width="stretch",
        )


def _render_transactions(store: AppStateStore) -> None:
    """Render the transaction form, table and CSV export."""
    state = store.snapshot
    with st.form("add_transaction", clear_on_submit=True):
        tx_type = st.radio(
            "Tipe",
            list(TransactionType),
            format_func=lambda item: TYPE_LABELS[item],
            horizontal=True,
        )
        names = [c.name for c in state.categories if c.type is tx_type]
        description = st.text_input("Deskripsi")
        amount = parse_number(
            st.text_input("Jumlah (IDR)", placeholder="1.000.000")
        )
        category = st.selectbox("Kategori", names or ["Lainnya"])
        day = st.date_input("Tanggal", value=date.today())
        if st.form_submit_button("Simpan"):
            store.add_transaction(
                TransactionInput(
                    description=description,
                    amount=amount,
                    type=tx_type,
                    category=category,
                    date=day,
                )
            )
            get_usage_logger().info("Transaction added from the UI")

    state = store.snapshot
    st.caption(f"{len(state.transactions)} transaksi tercatat")
    st.dataframe(
        _transaction_rows(state.transactions, state.categories),
        width="stretch",
        hide_index=True,
        height=420,
    )
    if state.transactions:
        export = ExportTransactionsUseCase(store).execute()
        st.download_button(
            "Ekspor CSV",
            data=export.content,
            file_name=export.file_name,
            mime="text/csv",
        )
        remove_id = st.selectbox(
            "Hapus transaksi",
            [tx.id for tx in state.transactions],
            format_func=lambda tx_id: _transaction_label(
                find_entity(state, "transactions", tx_id)
            ),
        )
        if st.button("Hapus"):
            store.remove_transaction(remove_id)
            st.rerun()


def _render_investments(store: AppStateStore) -> None:
    """Render the holdings table and the add-holding form."""
    portfolio = GetPortfolioSummaryUseCase(store).execute()
    value_col, cost_col, gain_col = st.columns(3)
    value_col.metric("Nilai Portofolio", format_idr(portfolio.summary.value))
    cost_col.metric("Modal", format_idr(portfolio.summary.cost))
    gain_col.metric(
        "Keuntungan",
        _format_delta(portfolio.summary.gain),
        format_percent(portfolio.summary.gain_percent),
    )
    st.dataframe(
        _investment_rows(
            [
                compute_investment_performance(inv)
                for inv in store.snapshot.investments
            ]
        ),
        width="stretch",
        hide_index=True,
    )

    with st.form("add_investment", clear_on_submit=True):
        symbol = st.text_input("Simbol")
        name = st.text_input("Nama")
        inv_type = st.selectbox(
            "Jenis",
            list(InvestmentType),
            format_func=lambda item: item.label,
        )
        quantity = st.number_input("Jumlah Unit", min_value=0.0)
        price = st.number_input("Harga Beli Rata-rata", min_value=0, step=100)
        if st.form_submit_button("Tambah"):
            try:
                store.add_investment(
                    InvestmentInput(
                        symbol=symbol,
                        name=name,
                        type=inv_type,
                        quantity=Decimal(str(quantity)),
                        avg_buy_price=Decimal(int(price)),
                    )
                )
            except ValueError as exc:
                st.warning(str(exc))


def _render_goals(store: AppStateStore) -> None:
    """Render savings goals with quick deposit and withdraw actions."""
    for progress in GetGoalProgressUseCase(store).execute():
        goal = progress.goal
        st.markdown(f"**{goal.name}** ({goal.type.label})")
        st.progress(float(progress.progress_percent) / 100)
        st.caption(
            f"{format_idr(goal.current_amount)} / "
            f"{format_idr(goal.target_amount)} - sisa "
            f"{format_idr(progress.remaining)}"
        )
        columns = st.columns(len(QUICK_DEPOSIT_AMOUNTS) + 1)
        for column, amount in zip(columns, QUICK_DEPOSIT_AMOUNTS):
            label = f"+{format_idr(amount)}"
            if column.button(label, key=f"{goal.id}-{amount}"):
                store.deposit_to_goal(goal.id, amount)
                st.rerun()
        withdraw = columns[-1].number_input(
            "Tarik", min_value=0, step=10000, key=f"{goal.id}-withdraw"
        )
        if columns[-1].button("Tarik Dana", key=f"{goal.id}-withdraw-btn"):
            store.withdraw_from_goal(goal.id, withdraw)
            st.rerun()

    with st.form("add_goal", clear_on_submit=True):
        name = st.text_input("Nama Tujuan")
        goal_type = st.selectbox(
            "Jenis",
            list(GoalType),
            format_func=lambda item: item.label,
        )
        target = st.number_input("Target (IDR)", min_value=0, step=100000)
        if st.form_submit_button("Tambah Tujuan"):
            try:
                store.add_goal(
                    GoalInput(
                        name=name,
                        type=goal_type,
                        target_amount=Decimal(int(target)),
                    )
                )
            except ValueError as exc:
                st.warning(str(exc))


def _render_categories(store: AppStateStore) -> None:
    """Render the category list and form."""
    state = store.snapshot
    st.dataframe(
        [
            {"Nama": c.name, "Tipe": TYPE_LABELS[c.type], "Warna": c.color}
            for c in state.categories
        ],
        width="stretch",
        hide_index=True,
    )
    with st.form("add_category", clear_on_submit=True):
        name = st.text_input("Nama Kategori")
        cat_type = st.radio(
            "Tipe",
            list(TransactionType),
            format_func=lambda item: TYPE_LABELS[item],
            horizontal=True,
        )
        color = st.selectbox("Warna", CATEGORY_PALETTE)
        if st.form_submit_button("Tambah Kategori"):
            try:
                store.add_category(
                    CategoryInput(name=name, type=cat_type, color=color)
                )
            except ValueError as exc:
                st.warning(str(exc))


def _render_advisor(store: AppStateStore) -> None:
    """Render the assistant chat."""
    if "conversation" not in st.session_state:
        st.session_state["conversation"] = AdviceConversation()
    conversation = st.session_state["conversation"]
    for message in conversation.messages:
        with st.chat_message("assistant" if message.role == "model"
                             else "user"):
            st.markdown(message.text)
    query = st.chat_input(
        "Tanyakan sesuatu...",
        disabled=conversation.pending,
    )
    if query:
        use_case = RequestAdviceUseCase(build_advice_client())
        with st.spinner("Menganalisis..."):
            asyncio.run(use_case.ask(conversation, query, store.snapshot))
        st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="DompetPintar", layout="wide")
    st.title("DompetPintar")

    store = _load_store()
    snapshot = store.snapshot
    st.sidebar.metric(
        "Total Aset",
        format_idr(compute_total_assets(snapshot.investments, snapshot.goals)),
    )
    page = st.sidebar.selectbox("Halaman", PAGES)

    if page == "Dashboard":
        date_range = _render_period_selector(date.today())
        if date_range is None:
            st.warning("Pilih tanggal awal dan akhir.")
            return
        _render_dashboard(store, date_range)
    elif page == "Transaksi":
        _render_transactions(store)
    elif page == "Investasi":
        _render_investments(store)
    elif page == "Tujuan Tabungan":
        _render_goals(store)
    elif page == "Kategori":
        _render_categories(store)
    else:
        _render_advisor(store)


if __name__ == "__main__":  # pragma: no cover
    main()
