"""Domain entities recorded by the finance tracker."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a cash transaction."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    @property
    def sign(self) -> int:
        """Return +1 for income and -1 for expense."""
        return 1 if self is TransactionType.INCOME else -1


class InvestmentType(str, Enum):
    """Asset class of an investment holding."""

    STOCK = "STOCK"
    CRYPTO = "CRYPTO"
    GOLD = "GOLD"

    @property
    def label(self) -> str:
        return _INVESTMENT_LABELS[self]


class GoalType(str, Enum):
    """Purpose of a savings goal."""

    EMERGENCY = "EMERGENCY"
    RETIREMENT = "RETIREMENT"
    WEDDING = "WEDDING"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        return _GOAL_LABELS[self]


_INVESTMENT_LABELS = {
    InvestmentType.STOCK: "Saham",
    InvestmentType.CRYPTO: "Crypto",
    InvestmentType.GOLD: "Emas",
}

_GOAL_LABELS = {
    GoalType.EMERGENCY: "Dana Darurat",
    GoalType.RETIREMENT: "Pensiun",
    GoalType.WEDDING: "Menikah",
    GoalType.OTHER: "Lainnya",
}


@dataclass(frozen=True)
class Transaction:
    """Income or expense entry.

    Attributes:
        id: Unique identifier within the transaction collection.
        date: Calendar day of the transaction.
        description: Free-text description.
        amount: Non-negative amount in whole currency units.
        type: Income or expense.
        category: Category name (not id); may reference a deleted category.
    """

    id: str
    date: date
    description: str
    amount: int
    type: TransactionType
    category: str


@dataclass(frozen=True)
class Category:
    """Named and coloured transaction category."""

    id: str
    name: str
    type: TransactionType
    color: str


@dataclass(frozen=True)
class Investment:
    """Investment holding valued at the latest known price.

    Attributes:
        id: Unique identifier within the investment collection.
        symbol: Ticker or short code, upper-case.
        name: Display name.
        type: Asset class.
        quantity: Units held.
        avg_buy_price: Average purchase price per unit.
        current_price: Latest price per unit.
    """

    id: str
    symbol: str
    name: str
    type: InvestmentType
    quantity: Decimal
    avg_buy_price: Decimal
    current_price: Decimal


@dataclass(frozen=True)
class SavingsGoal:
    """Savings target with the amount set aside so far."""

    id: str
    name: str
    type: GoalType
    target_amount: Decimal
    current_amount: Decimal
    deadline: date | None = None


@dataclass(frozen=True)
class AppState:
    """Complete snapshot of the tracker data.

    Attributes:
        transactions: Transactions, newest first.
        investments: Investment holdings.
        goals: Savings goals.
        categories: Transaction categories.
    """

    transactions: tuple[Transaction, ...] = ()
    investments: tuple[Investment, ...] = ()
    goals: tuple[SavingsGoal, ...] = ()
    categories: tuple[Category, ...] = ()


__all__ = [
    "TransactionType",
    "InvestmentType",
    "GoalType",
    "Transaction",
    "Category",
    "Investment",
    "SavingsGoal",
    "AppState",
]
