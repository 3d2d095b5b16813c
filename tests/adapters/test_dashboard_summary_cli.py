"""Tests for the dashboard summary CLI."""

from datetime import date
from unittest.mock import MagicMock

from src.adapters import dashboard_summary_cli as cli
from src.application.state_store import AppStateStore
from src.domain.models import AppState, Transaction, TransactionType
from src.domain.services.categories import default_categories
from src.domain.services.date_ranges import DateRangePreset


def _store() -> AppStateStore:
    return AppStateStore(
        initial_state=AppState(
            transactions=(
                Transaction(
                    id="t2",
                    date=date(2024, 1, 10),
                    description="Makan",
                    amount=250_000,
                    type=TransactionType.EXPENSE,
                    category="Makan",
                ),
                Transaction(
                    id="t1",
                    date=date(2024, 1, 1),
                    description="Gaji",
                    amount=5_000_000,
                    type=TransactionType.INCOME,
                    category="Gaji",
                ),
            ),
            categories=default_categories(),
        ),
        logger=MagicMock(),
    )


def test_parse_date_and_preset_handle_invalid_values() -> None:
    logger = MagicMock()

    assert cli._parse_date("2024-01-31", logger) == date(2024, 1, 31)
    assert cli._parse_date("31/01/2024", logger) is None
    assert cli._parse_preset(None, logger) is DateRangePreset.THIS_MONTH
    assert cli._parse_preset("thisYear", logger) is DateRangePreset.THIS_YEAR
    assert cli._parse_preset("decade", logger) is DateRangePreset.THIS_MONTH
    assert logger.warning.call_count == 2


def test_main_prints_custom_period_summary(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(cli.AppSettings, "from_env", lambda: None)
    monkeypatch.setattr(cli, "build_state_store", lambda settings: _store())
    monkeypatch.setenv("SUMMARY_PRESET", "custom")
    monkeypatch.setenv("SUMMARY_START_DATE", "2024-01-01")
    monkeypatch.setenv("SUMMARY_END_DATE", "2024-01-31")

    cli.main()

    out = capsys.readouterr().out
    assert "Period 2024-01-01 - 2024-01-31 (Custom)" in out
    assert "Income: IDR 5.000.000" in out
    assert "cashflow: IDR 4.750.000" in out
    assert "  Makan: IDR 250.000" in out


def test_main_requires_dates_for_custom_preset(monkeypatch, capsys) -> None:
    logger = MagicMock()
    build = MagicMock()
    monkeypatch.setattr(cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(cli, "build_state_store", build)
    monkeypatch.setenv("SUMMARY_PRESET", "custom")
    monkeypatch.delenv("SUMMARY_START_DATE", raising=False)
    monkeypatch.delenv("SUMMARY_END_DATE", raising=False)

    cli.main()

    logger.warning.assert_called_once()
    build.assert_not_called()
    assert capsys.readouterr().out == ""


def test_net_worth_line_uses_whole_history(monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(cli.AppSettings, "from_env", lambda: None)
    monkeypatch.setattr(cli, "build_state_store", lambda settings: _store())
    monkeypatch.setenv("SUMMARY_PRESET", "custom")
    monkeypatch.setenv("SUMMARY_START_DATE", "2020-01-01")
    monkeypatch.setenv("SUMMARY_END_DATE", "2020-01-31")

    cli.main()

    out = capsys.readouterr().out
    assert "Net worth: IDR 4.750.000" in out
