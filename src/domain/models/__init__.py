"""Domain models package."""

from .entities import (
    AppState,
    Category,
    GoalType,
    Investment,
    InvestmentType,
    SavingsGoal,
    Transaction,
    TransactionType,
)
from .finance import (
    AllocationSlice,
    CashflowSummary,
    CategoryTotal,
    DailyFlow,
    DashboardView,
    GoalProgress,
    InvestmentPerformance,
    NetWorthSummary,
    PortfolioSummary,
)

__all__ = [
    "AppState",
    "Category",
    "GoalType",
    "Investment",
    "InvestmentType",
    "SavingsGoal",
    "Transaction",
    "TransactionType",
    "AllocationSlice",
    "CashflowSummary",
    "CategoryTotal",
    "DailyFlow",
    "DashboardView",
    "GoalProgress",
    "InvestmentPerformance",
    "NetWorthSummary",
    "PortfolioSummary",
]
