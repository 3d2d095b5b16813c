"""Tests for the finance aggregate services."""

from datetime import date
from decimal import Decimal

from src.domain.models import (
    GoalType,
    Investment,
    InvestmentType,
    SavingsGoal,
    Transaction,
    TransactionType,
)
from src.domain.services.finance import (
    compute_cash_balance,
    compute_cashflow_summary,
    compute_goal_progress,
    compute_investment_performance,
    compute_net_worth,
    compute_portfolio_summary,
    compute_total_assets,
)


def _tx(tx_id, amount, tx_type, day=date(2024, 1, 10)) -> Transaction:
    return Transaction(
        id=tx_id,
        date=day,
        description="",
        amount=amount,
        type=tx_type,
        category="Lainnya",
    )


def _investment(
    inv_id="i1",
    quantity="10",
    avg="100",
    current="120",
    inv_type=InvestmentType.STOCK,
    symbol="BBCA",
) -> Investment:
    return Investment(
        id=inv_id,
        symbol=symbol,
        name=symbol,
        type=inv_type,
        quantity=Decimal(quantity),
        avg_buy_price=Decimal(avg),
        current_price=Decimal(current),
    )


def _goal(goal_id="g1", target="1000", current="0") -> SavingsGoal:
    return SavingsGoal(
        id=goal_id,
        name="Dana Darurat",
        type=GoalType.EMERGENCY,
        target_amount=Decimal(target),
        current_amount=Decimal(current),
    )


def test_cashflow_summary_splits_income_and_expense() -> None:
    summary = compute_cashflow_summary(
        [
            _tx("a", 5_000_000, TransactionType.INCOME),
            _tx("b", 1_200_000, TransactionType.EXPENSE),
            _tx("c", 300_000, TransactionType.EXPENSE),
        ]
    )

    assert summary.total_income == Decimal("5000000")
    assert summary.total_expense == Decimal("1500000")
    assert summary.cashflow == Decimal("3500000")
    assert summary.is_deficit is False


def test_cashflow_summary_allows_negative_cashflow() -> None:
    summary = compute_cashflow_summary(
        [
            _tx("a", 100, TransactionType.INCOME),
            _tx("b", 400, TransactionType.EXPENSE),
        ]
    )

    assert summary.cashflow == Decimal("-300")
    assert summary.is_deficit is True


def test_cashflow_summary_of_nothing_is_zero() -> None:
    summary = compute_cashflow_summary([])

    assert summary.total_income == 0
    assert summary.total_expense == 0
    assert summary.cashflow == 0


def test_investment_performance_reports_unrealized_gain() -> None:
    perf = compute_investment_performance(_investment())

    assert perf.value == Decimal("1200")
    assert perf.cost == Decimal("1000")
    assert perf.pl == Decimal("200")
    assert perf.pl_percent == Decimal("20")


def test_investment_performance_with_zero_cost_has_zero_percent() -> None:
    perf = compute_investment_performance(_investment(avg="0", current="50"))

    assert perf.value == Decimal("500")
    assert perf.pl_percent == Decimal("0")


def test_portfolio_summary_totals_all_holdings() -> None:
    summary = compute_portfolio_summary(
        [
            _investment(),
            _investment("i2", quantity="2", avg="500", current="400",
                        symbol="BTC", inv_type=InvestmentType.CRYPTO),
        ]
    )

    assert summary.value == Decimal("2000")
    assert summary.cost == Decimal("2000")
    assert summary.gain == Decimal("0")
    assert summary.gain_percent == Decimal("0")
    assert [h.investment.id for h in summary.holdings] == ["i1", "i2"]


def test_empty_portfolio_is_zero() -> None:
    summary = compute_portfolio_summary([])

    assert summary.value == 0
    assert summary.gain_percent == 0
    assert summary.holdings == ()


def test_goal_progress_is_capped_without_touching_goal() -> None:
    goal = _goal(target="1000", current="1500")

    progress = compute_goal_progress(goal)

    assert progress.progress_percent == Decimal("100")
    assert progress.remaining == Decimal("0")
    assert progress.goal.current_amount == Decimal("1500")


def test_goal_progress_partial() -> None:
    progress = compute_goal_progress(_goal(target="1000", current="200"))

    assert progress.progress_percent == Decimal("20")
    assert progress.remaining == Decimal("800")


def test_goal_progress_with_zero_target_is_zero() -> None:
    progress = compute_goal_progress(_goal(target="0", current="10"))

    assert progress.progress_percent == Decimal("0")


def test_net_worth_adds_cash_portfolio_and_savings() -> None:
    transactions = [
        _tx("a", 5_000_000, TransactionType.INCOME),
        _tx("b", 1_000_000, TransactionType.EXPENSE),
    ]

    summary = compute_net_worth(
        transactions,
        [_investment()],
        [_goal(current="300")],
    )

    assert summary.cash_balance == Decimal("4000000")
    assert summary.portfolio_value == Decimal("1200")
    assert summary.savings_total == Decimal("300")
    assert summary.net_worth == Decimal("4001500")


def test_cash_balance_is_signed() -> None:
    assert compute_cash_balance(
        [
            _tx("a", 100, TransactionType.INCOME),
            _tx("b", 250, TransactionType.EXPENSE),
        ]
    ) == Decimal("-150")


def test_total_assets_sums_portfolio_and_goals() -> None:
    assert compute_total_assets(
        [_investment()],
        [_goal(current="300"), _goal("g2", current="-50")],
    ) == Decimal("1450")
