"""Grouping and bucketing of transactions and holdings for charts."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import DEFAULT_CATEGORY_COLOR
from src.domain.models import (
    AllocationSlice,
    Category,
    CategoryTotal,
    DailyFlow,
    Investment,
    Transaction,
    TransactionType,
)
from src.domain.services.categories import build_color_index
from src.domain.services.finance import compute_investment_performance
from src.utils.decimal_utils import coerce_decimal, safe_percent

_ZERO = Decimal("0")


def group_by_category(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    transaction_type: TransactionType | None = None,
) -> tuple[CategoryTotal, ...]:
    """Sum transactions per category name and type.

    Args:
        transactions: Filtered transactions.
        categories: Known categories used for colour resolution.
        transaction_type: Optional type restriction.

    Returns:
        tuple[CategoryTotal, ...]: Groups sorted by amount, largest first;
        ties keep the order in which groups were first encountered.
    """
    totals: dict[tuple[str, TransactionType], Decimal] = {}
    for transaction in transactions:
        if (
            transaction_type is not None
            and transaction.type is not transaction_type
        ):
            continue
        key = (transaction.category, transaction.type)
        totals[key] = totals.get(key, _ZERO) + coerce_decimal(
            transaction.amount
        )

    colors = build_color_index(categories)
    grand_total = sum(totals.values(), _ZERO)
    groups = [
        CategoryTotal(
            name=name,
            type=group_type,
            amount=amount,
            color=colors.get((name, group_type), DEFAULT_CATEGORY_COLOR),
            share_percent=safe_percent(amount, grand_total),
        )
        for (name, group_type), amount in totals.items()
    ]
    # sorted() is stable, dict keeps insertion order
    return tuple(sorted(groups, key=lambda g: g.amount, reverse=True))


def bucket_by_date(
    transactions: Iterable[Transaction],
) -> tuple[DailyFlow, ...]:
    """Sum income and expense per day, oldest day first.

    Each bucket also carries the running net total up to and including that
    day.
    """
    income: dict[str, Decimal] = {}
    expense: dict[str, Decimal] = {}
    for transaction in transactions:
        key = transaction.date.isoformat()
        amount = coerce_decimal(transaction.amount)
        income.setdefault(key, _ZERO)
        expense.setdefault(key, _ZERO)
        if transaction.type is TransactionType.INCOME:
            income[key] += amount
        else:
            expense[key] += amount

    buckets: list[DailyFlow] = []
    running = _ZERO
    for key in sorted(income):
        running += income[key] - expense[key]
        buckets.append(
            DailyFlow(
                date=date.fromisoformat(key),
                income=income[key],
                expense=expense[key],
                cumulative_net=running,
            )
        )
    return tuple(buckets)


def allocation_by_investment(
    investments: Iterable[Investment],
) -> tuple[AllocationSlice, ...]:
    """Return portfolio value per holding symbol, largest first."""
    values: dict[str, Decimal] = {}
    for investment in investments:
        value = compute_investment_performance(investment).value
        values[investment.symbol] = values.get(investment.symbol, _ZERO) + value
    return _to_slices(values)


def allocation_by_type(
    investments: Iterable[Investment],
) -> tuple[AllocationSlice, ...]:
    """Return portfolio value per asset class, largest first."""
    values: dict[str, Decimal] = {}
    for investment in investments:
        label = investment.type.label
        value = compute_investment_performance(investment).value
        values[label] = values.get(label, _ZERO) + value
    return _to_slices(values)


def _to_slices(values: dict[str, Decimal]) -> tuple[AllocationSlice, ...]:
    total = sum(values.values(), _ZERO)
    slices = [
        AllocationSlice(
            label=label,
            value=value,
            share_percent=safe_percent(value, total),
        )
        for label, value in values.items()
    ]
    return tuple(sorted(slices, key=lambda s: s.value, reverse=True))


__all__ = [
    "group_by_category",
    "bucket_by_date",
    "allocation_by_investment",
    "allocation_by_type",
]
