"""Domain services for finance aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    CashflowSummary,
    GoalProgress,
    Investment,
    InvestmentPerformance,
    NetWorthSummary,
    PortfolioSummary,
    SavingsGoal,
    Transaction,
    TransactionType,
)
from src.utils.decimal_utils import coerce_decimal, safe_percent

_ZERO = Decimal("0")
_FULL = Decimal("100")


def compute_cashflow_summary(
    transactions: Iterable[Transaction],
) -> CashflowSummary:
    """Compute income and expense totals.

    Args:
        transactions: Transactions of the selected period.

    Returns:
        CashflowSummary: Totals whose difference is the period cashflow.
    """
    total_income = _ZERO
    total_expense = _ZERO
    for transaction in transactions:
        amount = coerce_decimal(transaction.amount)
        if transaction.type is TransactionType.INCOME:
            total_income += amount
        else:
            total_expense += amount
    return CashflowSummary(
        total_income=total_income,
        total_expense=total_expense,
    )


def compute_investment_performance(
    investment: Investment,
) -> InvestmentPerformance:
    """Value a single holding against its cost basis."""
    quantity = coerce_decimal(investment.quantity)
    value = quantity * coerce_decimal(investment.current_price)
    cost = quantity * coerce_decimal(investment.avg_buy_price)
    pl = value - cost
    return InvestmentPerformance(
        investment=investment,
        value=value,
        cost=cost,
        pl=pl,
        pl_percent=safe_percent(pl, cost) if cost > 0 else _ZERO,
    )


def compute_portfolio_summary(
    investments: Iterable[Investment],
) -> PortfolioSummary:
    """Compute portfolio valuation, cost basis, and unrealized gain.

    Args:
        investments: All holdings; portfolio figures are never period-filtered.

    Returns:
        PortfolioSummary: Totals plus per-holding performance.
    """
    holdings = tuple(
        compute_investment_performance(investment)
        for investment in investments
    )
    value = sum((h.value for h in holdings), _ZERO)
    cost = sum((h.cost for h in holdings), _ZERO)
    gain = value - cost
    return PortfolioSummary(
        value=value,
        cost=cost,
        gain=gain,
        gain_percent=safe_percent(gain, cost) if cost > 0 else _ZERO,
        holdings=holdings,
    )


def compute_goal_progress(goal: SavingsGoal) -> GoalProgress:
    """Return the display progress of a goal, capped at 100 percent.

    The goal's own ``current_amount`` is left untouched even when it is above
    target or negative.
    """
    target = coerce_decimal(goal.target_amount)
    current = coerce_decimal(goal.current_amount)
    progress = min(safe_percent(current, target), _FULL)
    return GoalProgress(
        goal=goal,
        progress_percent=progress,
        remaining=max(target - current, _ZERO),
    )


def compute_cash_balance(all_transactions: Iterable[Transaction]) -> Decimal:
    """Return signed income minus expense over the given transactions."""
    return sum(
        (
            coerce_decimal(t.amount) * t.type.sign
            for t in all_transactions
        ),
        _ZERO,
    )


def compute_savings_total(goals: Iterable[SavingsGoal]) -> Decimal:
    """Return the sum of goal balances."""
    return sum((coerce_decimal(g.current_amount) for g in goals), _ZERO)


def compute_net_worth(
    all_transactions: Iterable[Transaction],
    investments: Iterable[Investment],
    goals: Iterable[SavingsGoal],
) -> NetWorthSummary:
    """Compute net worth over the entire history.

    Args:
        all_transactions: Every stored transaction, never a filtered period.
        investments: All holdings.
        goals: All savings goals.

    Returns:
        NetWorthSummary: Cash balance, portfolio, savings, and their sum.
    """
    cash_balance = compute_cash_balance(all_transactions)
    portfolio_value = compute_portfolio_summary(investments).value
    savings_total = compute_savings_total(goals)
    return NetWorthSummary(
        cash_balance=cash_balance,
        portfolio_value=portfolio_value,
        savings_total=savings_total,
        net_worth=cash_balance + portfolio_value + savings_total,
    )


def compute_total_assets(
    investments: Iterable[Investment],
    goals: Iterable[SavingsGoal],
) -> Decimal:
    """Return portfolio value plus goal balances."""
    return (
        compute_portfolio_summary(investments).value
        + compute_savings_total(goals)
    )


__all__ = [
    "compute_cashflow_summary",
    "compute_investment_performance",
    "compute_portfolio_summary",
    "compute_goal_progress",
    "compute_cash_balance",
    "compute_savings_total",
    "compute_net_worth",
    "compute_total_assets",
]
