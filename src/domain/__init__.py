"""Domain package for business rules and core models."""

from .constants import DEFAULT_CATEGORIES, DEFAULT_CATEGORY_COLOR
from .models import (
    AppState,
    Category,
    GoalType,
    Investment,
    InvestmentType,
    SavingsGoal,
    Transaction,
    TransactionType,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_CATEGORY_COLOR",
    "AppState",
    "Category",
    "GoalType",
    "Investment",
    "InvestmentType",
    "SavingsGoal",
    "Transaction",
    "TransactionType",
]
