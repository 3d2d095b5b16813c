"""Domain validation helpers.

Validators raise ``ValueError`` before any snapshot is replaced, so a rejected
command leaves the store untouched.
"""

from collections.abc import Iterable

from src.domain.models import Category, Investment, SavingsGoal, Transaction


def validate_transaction(transaction: Transaction) -> None:
    if transaction.amount < 0:
        raise ValueError(
            f"Transaction amount must be non-negative: {transaction.amount}"
        )


def validate_investment(investment: Investment) -> None:
    if not investment.symbol:
        raise ValueError("Investment symbol is required.")
    if investment.quantity < 0:
        raise ValueError(
            f"Investment quantity must be non-negative: {investment.quantity}"
        )
    if investment.avg_buy_price < 0:
        raise ValueError(
            "Investment average buy price must be non-negative: "
            f"{investment.avg_buy_price}"
        )


def validate_goal(goal: SavingsGoal) -> None:
    if goal.target_amount <= 0:
        raise ValueError(
            f"Goal target amount must be positive: {goal.target_amount}"
        )


def validate_category(
    category: Category,
    existing: Iterable[Category],
) -> None:
    """Reject blank names and names already used within the same type.

    Args:
        category: Category being added or edited.
        existing: Categories already stored; the category itself is ignored.
    """
    if not category.name:
        raise ValueError("Category name is required.")
    for other in existing:
        if other.id == category.id:
            continue
        if other.name == category.name and other.type == category.type:
            raise ValueError(
                f"Category '{category.name}' already exists for "
                f"{category.type.value}."
            )


__all__ = [
    "validate_transaction",
    "validate_investment",
    "validate_goal",
    "validate_category",
]
