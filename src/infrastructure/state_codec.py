"""Conversion between ``AppState`` and JSON-compatible documents.

Documents use the camelCase field names of the browser snapshot format, so
snapshots exported from the web app load unchanged. Enum fields accept
either the stable names (``GOLD``) or the display labels (``Emas``).
"""

from collections.abc import Callable, Mapping
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
from src.domain.services.normalization import normalize_amount
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


def state_to_dict(state: AppState) -> dict[str, list[dict[str, Any]]]:
    """Encode a snapshot as a JSON-compatible document."""
    return {
        "transactions": [
            {
                "id": t.id,
                "date": t.date.isoformat(),
                "description": t.description,
                "amount": t.amount,
                "type": t.type.value,
                "category": t.category,
            }
            for t in state.transactions
        ],
        "investments": [
            {
                "id": inv.id,
                "symbol": inv.symbol,
                "name": inv.name,
                "type": inv.type.value,
                "quantity": _encode_decimal(inv.quantity),
                "avgBuyPrice": _encode_decimal(inv.avg_buy_price),
                "currentPrice": _encode_decimal(inv.current_price),
            }
            for inv in state.investments
        ],
        "goals": [
            {
                "id": goal.id,
                "name": goal.name,
                "type": goal.type.value,
                "targetAmount": _encode_decimal(goal.target_amount),
                "currentAmount": _encode_decimal(goal.current_amount),
                "deadline": goal.deadline.isoformat() if goal.deadline else None,
            }
            for goal in state.goals
        ],
        "categories": [
            {
                "id": c.id,
                "name": c.name,
                "type": c.type.value,
                "color": c.color,
            }
            for c in state.categories
        ],
    }


def state_from_dict(document: Mapping[str, Any], logger=None) -> AppState:
    """Decode a stored document into a snapshot.

    Missing or null collections become empty. Records that cannot be decoded
    are skipped with a warning.

    Args:
        document: Parsed JSON document.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        AppState: Decoded snapshot.
    """
    logger = logger or get_app_logger()
    return AppState(
        transactions=_decode_all(
            document, "transactions", _decode_transaction, logger
        ),
        investments=_decode_all(
            document, "investments", _decode_investment, logger
        ),
        goals=_decode_all(document, "goals", _decode_goal, logger),
        categories=_decode_all(
            document, "categories", _decode_category, logger
        ),
    )


def _decode_all(
    document: Mapping[str, Any],
    key: str,
    decoder: Callable[[Mapping[str, Any]], Any],
    logger,
) -> tuple:
    records = document.get(key) or []
    decoded = []
    seen: set[str] = set()
    for record in records:
        try:
            item = decoder(record)
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            logger.warning(f"Skipping malformed {key} record {record!r}: {exc}")
            continue
        if item.id in seen:
            logger.warning(f"Skipping duplicate {key} id {item.id}")
            continue
        seen.add(item.id)
        decoded.append(item)
    return tuple(decoded)


def _decode_transaction(record: Mapping[str, Any]) -> Transaction:
    return Transaction(
        id=str(record["id"]),
        date=date.fromisoformat(str(record["date"])[:10]),
        description=record.get("description") or "",
        amount=normalize_amount(record["amount"]),
        type=_decode_enum(TransactionType, record["type"]),
        category=record.get("category") or "",
    )


def _decode_investment(record: Mapping[str, Any]) -> Investment:
    avg_buy_price = coerce_decimal(record["avgBuyPrice"])
    current_price = record.get("currentPrice")
    return Investment(
        id=str(record["id"]),
        symbol=str(record["symbol"]).upper(),
        name=record.get("name") or "",
        type=_decode_enum(InvestmentType, record["type"]),
        quantity=coerce_decimal(record["quantity"]),
        avg_buy_price=avg_buy_price,
        current_price=(
            avg_buy_price
            if current_price is None
            else coerce_decimal(current_price)
        ),
    )


def _decode_goal(record: Mapping[str, Any]) -> SavingsGoal:
    deadline = record.get("deadline")
    return SavingsGoal(
        id=str(record["id"]),
        name=record.get("name") or "",
        type=_decode_enum(GoalType, record["type"]),
        target_amount=coerce_decimal(record["targetAmount"]),
        current_amount=coerce_decimal(record.get("currentAmount")),
        deadline=date.fromisoformat(deadline[:10]) if deadline else None,
    )


def _decode_category(record: Mapping[str, Any]) -> Category:
    return Category(
        id=str(record["id"]),
        name=str(record["name"]),
        type=_decode_enum(TransactionType, record["type"]),
        color=str(record["color"]),
    )


def _decode_enum(enum_type, value):
    for member in enum_type:
        if value in (member.value, member.name):
            return member
        if getattr(member, "label", None) == value:
            return member
    raise ValueError(f"Unknown {enum_type.__name__}: {value!r}")


def _encode_decimal(value: Decimal) -> str:
    return str(value)


__all__ = ["state_to_dict", "state_from_dict"]
