"""Tests for the Streamlit app module."""

from contextlib import nullcontext
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.application.state_store import AppStateStore
from src.domain.models import (
    AppState,
    Category,
    Investment,
    InvestmentType,
    Transaction,
    TransactionType,
)
from src.domain.services.categories import default_categories
from src.domain.services.date_ranges import DateRangePreset
from src.domain.services.finance import compute_investment_performance


def test_fetch_store_starts_price_ticker(monkeypatch) -> None:
    """_fetch_store should build the store and start the ticker."""
    ticker = MagicMock()
    monkeypatch.setattr(app, "build_state_store", lambda: "store")
    monkeypatch.setattr(app, "build_price_ticker", lambda store: ticker)

    assert app._fetch_store() == "store"
    ticker.start.assert_called_once_with()


def test_resolve_range_waits_for_custom_bounds() -> None:
    today = date(2024, 3, 15)

    assert app._resolve_range(DateRangePreset.CUSTOM, today) is None
    result = app._resolve_range(DateRangePreset.THIS_MONTH, today)
    assert (result.start, result.end) == (date(2024, 3, 1), date(2024, 3, 31))


def test_transaction_rows_sign_amounts_and_resolve_colors() -> None:
    transactions = [
        Transaction(
            id="t1",
            date=date(2024, 1, 2),
            description="Makan",
            amount=50_000,
            type=TransactionType.EXPENSE,
            category="Makan",
        ),
        Transaction(
            id="t2",
            date=date(2024, 1, 1),
            description="Proyek",
            amount=1_000_000,
            type=TransactionType.INCOME,
            category="Freelance",
        ),
    ]
    categories = [
        Category(id="3", name="Makan", type=TransactionType.EXPENSE,
                 color="#ef4444"),
    ]

    rows = app._transaction_rows(transactions, categories)

    assert rows[0]["Jumlah"] == "IDR -50.000"
    assert rows[0]["Warna"] == "#ef4444"
    assert rows[0]["Tipe"] == "Pengeluaran"
    assert rows[1]["Jumlah"] == "IDR 1.000.000"
    assert rows[1]["Warna"] == "#94a3b8"


def test_investment_rows_show_gain() -> None:
    investment = Investment(
        id="i1",
        symbol="BBCA",
        name="Bank BCA",
        type=InvestmentType.STOCK,
        quantity=Decimal("10"),
        avg_buy_price=Decimal("9000"),
        current_price=Decimal("9900"),
    )

    rows = app._investment_rows([compute_investment_performance(investment)])

    assert rows[0]["Jenis"] == "Saham"
    assert rows[0]["Nilai"] == "IDR 99.000"
    assert rows[0]["P/L"] == "+IDR 9.000"
    assert rows[0]["P/L %"] == "10.00%"


class _FakeSidebar:
    def __init__(self, choices: dict) -> None:
        self.choices = choices
        self.metrics: list[tuple] = []

    def metric(self, label, value, *args, **kwargs):
        self.metrics.append((label, value))

    def selectbox(self, label, options, **kwargs):
        return self.choices.get(label, options[0])

    def date_input(self, label, **kwargs):
        return None


class _FakeStreamlit:
    def __init__(self, choices: dict) -> None:
        self.sidebar = _FakeSidebar(choices)
        self.config_kwargs = None
        self.title_text = None
        self.warnings: list[str] = []
        self.dataframe_payload = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def warning(self, text: str):
        self.warnings.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)

    def form(self, *_args, **_kwargs):
        return nullcontext()

    def text_input(self, *_args, **_kwargs):
        return ""

    def radio(self, label, options, **kwargs):
        return options[0]

    def selectbox(self, label, options, **kwargs):
        return options[0]

    def form_submit_button(self, *_args, **_kwargs):
        return False


def _store() -> AppStateStore:
    return AppStateStore(
        initial_state=AppState(categories=default_categories()),
        logger=MagicMock(),
    )


def test_main_renders_categories_page(monkeypatch) -> None:
    fake_st = _FakeStreamlit({"Halaman": "Kategori"})
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_store", _store)

    app.main()

    assert fake_st.config_kwargs["page_title"] == "DompetPintar"
    assert fake_st.sidebar.metrics == [("Total Aset", "IDR 0")]
    rows, kwargs = fake_st.dataframe_payload
    assert [row["Nama"] for row in rows][:2] == ["Gaji", "Bonus"]
    assert kwargs["hide_index"] is True
    assert fake_st.warnings == []


def test_main_warns_on_incomplete_custom_range(monkeypatch) -> None:
    fake_st = _FakeStreamlit(
        {"Halaman": "Dashboard", "Periode": DateRangePreset.CUSTOM}
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_store", _store)

    app.main()

    assert fake_st.warnings == ["Pilih tanggal awal dan akhir."]
