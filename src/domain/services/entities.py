"""Pure reducers producing new ``AppState`` snapshots.

Every function returns a new snapshot and never mutates its input. Unknown
ids leave the snapshot unchanged (the same object is returned).
"""

from collections.abc import Mapping
from dataclasses import fields, replace
from datetime import date
from decimal import Decimal
from typing import Any

from src.domain.models import (
    AppState,
    Category,
    GoalType,
    Investment,
    InvestmentType,
    SavingsGoal,
    Transaction,
    TransactionType,
)
from src.domain.models.inputs import (
    CategoryInput,
    GoalInput,
    InvestmentInput,
    TransactionInput,
)
from src.domain.services.normalization import (
    normalize_amount,
    normalize_decimal,
    normalize_enum,
    normalize_name,
    normalize_symbol,
)
from src.domain.services.validation import (
    validate_category,
    validate_goal,
    validate_investment,
    validate_transaction,
)

COLLECTIONS = ("transactions", "investments", "goals", "categories")

_ENTITY_TYPES = {
    "transactions": Transaction,
    "investments": Investment,
    "goals": SavingsGoal,
    "categories": Category,
}

_FIELD_NORMALIZERS = {
    "transactions": {
        "description": lambda v: v or "",
        "amount": normalize_amount,
        "type": lambda v: normalize_enum(TransactionType, v),
        "category": normalize_name,
        "date": lambda v: v if isinstance(v, date) else date.fromisoformat(v),
    },
    "investments": {
        "symbol": normalize_symbol,
        "name": normalize_name,
        "type": lambda v: normalize_enum(InvestmentType, v),
        "quantity": normalize_decimal,
        "avg_buy_price": normalize_decimal,
        "current_price": normalize_decimal,
    },
    "goals": {
        "name": normalize_name,
        "type": lambda v: normalize_enum(GoalType, v),
        "target_amount": normalize_decimal,
        "current_amount": normalize_decimal,
    },
    "categories": {
        "name": normalize_name,
        "type": lambda v: normalize_enum(TransactionType, v),
    },
}


def add_transaction(
    state: AppState,
    data: TransactionInput,
    *,
    new_id: str,
    today: date,
) -> tuple[AppState, Transaction]:
    """Record a transaction as the newest entry."""
    transaction = Transaction(
        id=new_id,
        date=data.date or today,
        description=data.description or "",
        amount=normalize_amount(data.amount),
        type=normalize_enum(TransactionType, data.type),
        category=normalize_name(data.category),
    )
    validate_transaction(transaction)
    _ensure_new_id(state.transactions, new_id)
    return (
        replace(state, transactions=(transaction, *state.transactions)),
        transaction,
    )


def add_category(
    state: AppState,
    data: CategoryInput,
    *,
    new_id: str,
) -> tuple[AppState, Category]:
    category = Category(
        id=new_id,
        name=normalize_name(data.name),
        type=normalize_enum(TransactionType, data.type),
        color=data.color,
    )
    validate_category(category, state.categories)
    _ensure_new_id(state.categories, new_id)
    return replace(state, categories=(*state.categories, category)), category


def add_investment(
    state: AppState,
    data: InvestmentInput,
    *,
    new_id: str,
) -> tuple[AppState, Investment]:
    """Add a holding priced at its average buy price."""
    avg_buy_price = normalize_decimal(data.avg_buy_price)
    investment = Investment(
        id=new_id,
        symbol=normalize_symbol(data.symbol),
        name=normalize_name(data.name),
        type=normalize_enum(InvestmentType, data.type),
        quantity=normalize_decimal(data.quantity),
        avg_buy_price=avg_buy_price,
        current_price=avg_buy_price,
    )
    validate_investment(investment)
    _ensure_new_id(state.investments, new_id)
    return (
        replace(state, investments=(*state.investments, investment)),
        investment,
    )


def add_goal(
    state: AppState,
    data: GoalInput,
    *,
    new_id: str,
) -> tuple[AppState, SavingsGoal]:
    """Add a goal with nothing saved yet."""
    goal = SavingsGoal(
        id=new_id,
        name=normalize_name(data.name),
        type=normalize_enum(GoalType, data.type),
        target_amount=normalize_decimal(data.target_amount),
        current_amount=Decimal("0"),
        deadline=data.deadline,
    )
    validate_goal(goal)
    _ensure_new_id(state.goals, new_id)
    return replace(state, goals=(*state.goals, goal)), goal


def update_entity(
    state: AppState,
    collection: str,
    entity_id: str,
    changes: Mapping[str, Any],
) -> AppState:
    """Merge ``changes`` into the entity with ``entity_id``.

    Args:
        state: Current snapshot.
        collection: One of ``COLLECTIONS``.
        entity_id: Id of the entity to edit.
        changes: Field values to overwrite; omitted fields are kept.

    Returns:
        AppState: New snapshot, or ``state`` itself when the id is unknown.

    Raises:
        ValueError: On unknown fields, an attempt to change the id, or an
            edited entity that fails validation.
    """
    items = _collection(state, collection)
    normalized = _normalize_changes(collection, changes)
    updated_items = []
    found = False
    for item in items:
        if item.id == entity_id:
            item = replace(item, **normalized)
            _validate(collection, item, items)
            found = True
        updated_items.append(item)
    if not found:
        return state
    return replace(state, **{collection: tuple(updated_items)})


def remove_entity(
    state: AppState,
    collection: str,
    entity_id: str,
) -> AppState:
    """Drop the entity with ``entity_id``.

    Removing a category leaves transactions that reference its name as they
    are.
    """
    items = _collection(state, collection)
    kept = tuple(item for item in items if item.id != entity_id)
    if len(kept) == len(items):
        return state
    return replace(state, **{collection: kept})


def adjust_goal_amount(
    state: AppState,
    goal_id: str,
    delta,
) -> AppState:
    """Add a signed ``delta`` to a goal balance without any clamping."""
    amount = normalize_decimal(delta)
    found = False
    goals = []
    for goal in state.goals:
        if goal.id == goal_id:
            goal = replace(goal, current_amount=goal.current_amount + amount)
            found = True
        goals.append(goal)
    if not found:
        return state
    return replace(state, goals=tuple(goals))


def find_entity(state: AppState, collection: str, entity_id: str):
    """Return the entity with ``entity_id`` or None."""
    for item in _collection(state, collection):
        if item.id == entity_id:
            return item
    return None


def _collection(state: AppState, collection: str) -> tuple:
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {collection}")
    return getattr(state, collection)


def _normalize_changes(
    collection: str,
    changes: Mapping[str, Any],
) -> dict[str, Any]:
    entity_type = _ENTITY_TYPES[collection]
    allowed = {f.name for f in fields(entity_type)} - {"id"}
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(
            f"Cannot update {sorted(unknown)} on {entity_type.__name__}."
        )
    normalizers = _FIELD_NORMALIZERS[collection]
    normalized: dict[str, Any] = {}
    for name, value in changes.items():
        if value is None and name != "deadline":
            raise ValueError(f"Field '{name}' cannot be cleared.")
        normalizer = normalizers.get(name)
        normalized[name] = normalizer(value) if normalizer else value
    return normalized


def _validate(collection: str, item, items: tuple) -> None:
    if collection == "transactions":
        validate_transaction(item)
    elif collection == "investments":
        validate_investment(item)
    elif collection == "goals":
        validate_goal(item)
    else:
        validate_category(item, items)


def _ensure_new_id(items: tuple, new_id: str) -> None:
    if any(item.id == new_id for item in items):
        raise ValueError(f"Duplicate id: {new_id}")


__all__ = [
    "COLLECTIONS",
    "add_transaction",
    "add_category",
    "add_investment",
    "add_goal",
    "update_entity",
    "remove_entity",
    "adjust_goal_amount",
    "find_entity",
]
