"""Tests for the pure snapshot reducers."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import (
    AppState,
    GoalType,
    InvestmentType,
    TransactionType,
)
from src.domain.models.inputs import (
    CategoryInput,
    GoalInput,
    InvestmentInput,
    TransactionInput,
)
from src.domain.services import entities
from src.domain.services.categories import default_categories

TODAY = date(2024, 5, 1)


def _with_transaction(state: AppState, tx_id: str, **kwargs) -> AppState:
    data = TransactionInput(
        description=kwargs.get("description", "Makan siang"),
        amount=kwargs.get("amount", 50_000),
        type=kwargs.get("type", TransactionType.EXPENSE),
        category=kwargs.get("category", "Makan"),
        date=kwargs.get("date"),
    )
    new_state, _ = entities.add_transaction(
        state, data, new_id=tx_id, today=TODAY
    )
    return new_state


def test_add_transaction_prepends_and_defaults_date() -> None:
    state = _with_transaction(AppState(), "t1")
    state = _with_transaction(state, "t2", date=date(2024, 1, 2))

    assert [t.id for t in state.transactions] == ["t2", "t1"]
    assert state.transactions[1].date == TODAY
    assert state.transactions[0].date == date(2024, 1, 2)


def test_add_transaction_does_not_mutate_input() -> None:
    original = AppState()

    updated = _with_transaction(original, "t1")

    assert original.transactions == ()
    assert updated is not original


def test_add_transaction_rejects_fractional_and_negative_amounts() -> None:
    with pytest.raises(ValueError):
        _with_transaction(AppState(), "t1", amount=Decimal("10.5"))
    with pytest.raises(ValueError):
        _with_transaction(AppState(), "t1", amount=-1)


def test_add_rejects_duplicate_id() -> None:
    state = _with_transaction(AppState(), "t1")

    with pytest.raises(ValueError):
        _with_transaction(state, "t1")


def test_add_investment_prices_at_average_and_normalizes_symbol() -> None:
    state, investment = entities.add_investment(
        AppState(),
        InvestmentInput(
            symbol=" bbca ",
            name="Bank BCA",
            type=InvestmentType.STOCK,
            quantity=Decimal("100"),
            avg_buy_price=Decimal("9000"),
        ),
        new_id="i1",
    )

    assert investment.symbol == "BBCA"
    assert investment.current_price == Decimal("9000")
    assert state.investments == (investment,)


def test_add_investment_requires_symbol() -> None:
    with pytest.raises(ValueError):
        entities.add_investment(
            AppState(),
            InvestmentInput(
                symbol="  ",
                name="",
                type="GOLD",
                quantity=1,
                avg_buy_price=1,
            ),
            new_id="i1",
        )


def test_add_goal_starts_at_zero_and_requires_positive_target() -> None:
    state, goal = entities.add_goal(
        AppState(),
        GoalInput(
            name="Rumah",
            type=GoalType.OTHER,
            target_amount=Decimal("1000"),
        ),
        new_id="g1",
    )

    assert goal.current_amount == Decimal("0")
    assert state.goals == (goal,)
    with pytest.raises(ValueError):
        entities.add_goal(
            state,
            GoalInput(name="X", type=GoalType.OTHER, target_amount=0),
            new_id="g2",
        )


def test_add_category_rejects_same_name_within_type_only() -> None:
    state = AppState(categories=default_categories())

    with pytest.raises(ValueError):
        entities.add_category(
            state,
            CategoryInput(
                name="Makan",
                type=TransactionType.EXPENSE,
                color="#000000",
            ),
            new_id="c1",
        )

    state, category = entities.add_category(
        state,
        CategoryInput(
            name="Makan",
            type=TransactionType.INCOME,
            color="#000000",
        ),
        new_id="c1",
    )
    assert state.categories[-1] is category


def test_update_entity_merges_normalized_changes() -> None:
    state = _with_transaction(AppState(), "t1")

    updated = entities.update_entity(
        state,
        "transactions",
        "t1",
        {"amount": "75000", "type": "INCOME", "date": "2024-02-03"},
    )

    tx = updated.transactions[0]
    assert tx.amount == 75_000
    assert tx.type is TransactionType.INCOME
    assert tx.date == date(2024, 2, 3)
    assert tx.description == "Makan siang"


def test_update_entity_returns_same_state_for_unknown_id() -> None:
    state = _with_transaction(AppState(), "t1")

    assert entities.update_entity(
        state, "transactions", "missing", {"amount": 1}
    ) is state


@pytest.mark.parametrize(
    "changes",
    [
        {"id": "other"},
        {"unknown": 1},
        {"amount": None},
        {"amount": -5},
    ],
)
def test_update_entity_rejects_invalid_changes(changes) -> None:
    state = _with_transaction(AppState(), "t1")

    with pytest.raises(ValueError):
        entities.update_entity(state, "transactions", "t1", changes)


def test_update_category_may_keep_its_own_name() -> None:
    state = AppState(categories=default_categories())

    updated = entities.update_entity(
        state,
        "categories",
        "3",
        {"name": "Makan", "color": "#123456"},
    )

    assert entities.find_entity(updated, "categories", "3").color == "#123456"


def test_remove_category_leaves_transactions_untouched() -> None:
    state = _with_transaction(
        AppState(categories=default_categories()),
        "t1",
        category="Makan",
    )

    updated = entities.remove_entity(state, "categories", "3")

    assert [c.name for c in updated.categories].count("Makan") == 0
    assert updated.transactions[0].category == "Makan"


def test_remove_unknown_id_returns_same_state() -> None:
    state = AppState(categories=default_categories())

    assert entities.remove_entity(state, "categories", "99") is state


def test_unknown_collection_is_rejected() -> None:
    with pytest.raises(ValueError):
        entities.remove_entity(AppState(), "accounts", "1")


def test_adjust_goal_amount_is_unclamped() -> None:
    state, goal = entities.add_goal(
        AppState(),
        GoalInput(name="Nikah", type=GoalType.WEDDING, target_amount=1000),
        new_id="g1",
    )

    state = entities.adjust_goal_amount(state, "g1", 300)
    state = entities.adjust_goal_amount(state, "g1", -100)
    assert state.goals[0].current_amount == Decimal("200")

    state = entities.adjust_goal_amount(state, "g1", -500)
    assert state.goals[0].current_amount == Decimal("-300")

    assert entities.adjust_goal_amount(state, "missing", 5) is state
