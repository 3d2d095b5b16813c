"""Inputs accepted when creating entities; ids and derived fields excluded."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .entities import GoalType, InvestmentType, TransactionType


@dataclass(frozen=True)
class TransactionInput:
    """New transaction as submitted by the user.

    ``date`` defaults to the store's current day when omitted.
    """

    description: str
    amount: int
    type: TransactionType
    category: str
    date: date | None = None


@dataclass(frozen=True)
class CategoryInput:
    name: str
    type: TransactionType
    color: str


@dataclass(frozen=True)
class InvestmentInput:
    symbol: str
    name: str
    type: InvestmentType
    quantity: Decimal
    avg_buy_price: Decimal


@dataclass(frozen=True)
class GoalInput:
    name: str
    type: GoalType
    target_amount: Decimal
    deadline: date | None = None


__all__ = [
    "TransactionInput",
    "CategoryInput",
    "InvestmentInput",
    "GoalInput",
]
