"""Domain models for derived financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .entities import Investment, SavingsGoal, TransactionType


@dataclass(frozen=True)
class CashflowSummary:
    """Income and expense totals for a period."""

    total_income: Decimal
    total_expense: Decimal

    @property
    def cashflow(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense

    @property
    def is_deficit(self) -> bool:
        return self.cashflow < 0


@dataclass(frozen=True)
class InvestmentPerformance:
    """Valuation and unrealized gain of a single holding."""

    investment: Investment
    value: Decimal
    cost: Decimal
    pl: Decimal
    pl_percent: Decimal


@dataclass(frozen=True)
class PortfolioSummary:
    """Valuation of all holdings at the latest prices.

    Attributes:
        value: Sum of quantity times current price.
        cost: Sum of quantity times average buy price.
        gain: value minus cost.
        gain_percent: gain over cost in percent, zero without cost basis.
        holdings: Per-investment performance in collection order.
    """

    value: Decimal
    cost: Decimal
    gain: Decimal
    gain_percent: Decimal
    holdings: tuple[InvestmentPerformance, ...] = ()


@dataclass(frozen=True)
class GoalProgress:
    """Display progress of a savings goal."""

    goal: SavingsGoal
    progress_percent: Decimal
    remaining: Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Net worth over the entire history.

    Attributes:
        cash_balance: Income minus expense over all transactions.
        portfolio_value: Current portfolio valuation.
        savings_total: Sum of goal balances.
        net_worth: Sum of the three components.
    """

    cash_balance: Decimal
    portfolio_value: Decimal
    savings_total: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """Amount aggregated for a category name and type."""

    name: str
    type: TransactionType
    amount: Decimal
    color: str
    share_percent: Decimal = Decimal("0")


@dataclass(frozen=True)
class DailyFlow:
    """Income and expense recorded on one day."""

    date: date
    income: Decimal
    expense: Decimal
    cumulative_net: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class AllocationSlice:
    """Share of portfolio value held in one bucket."""

    label: str
    value: Decimal
    share_percent: Decimal


@dataclass(frozen=True)
class DashboardView:
    """Chart-ready summary for a selected date range."""

    start_date: date
    end_date: date
    cashflow: CashflowSummary
    net_worth: NetWorthSummary
    portfolio: PortfolioSummary
    goals: tuple[GoalProgress, ...]
    income_by_category: tuple[CategoryTotal, ...]
    expense_by_category: tuple[CategoryTotal, ...]
    daily_flows: tuple[DailyFlow, ...]
    allocation: tuple[AllocationSlice, ...]
    transaction_count: int


__all__ = [
    "CashflowSummary",
    "InvestmentPerformance",
    "PortfolioSummary",
    "GoalProgress",
    "NetWorthSummary",
    "CategoryTotal",
    "DailyFlow",
    "AllocationSlice",
    "DashboardView",
]
