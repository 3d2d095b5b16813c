"""In-memory container holding the current ``AppState`` snapshot.

Each command computes a complete new snapshot from the latest one and swaps
it in under a lock; subscribers are notified with the new snapshot before
the lock is released, so they observe snapshots in commit order. A failing
subscriber is logged and does not affect the others. Readers never observe
a partially applied command.
"""

from collections.abc import Callable, Mapping
from datetime import date
import threading
from typing import Any
from uuid import uuid4

from src.domain.models import (
    AppState,
    Category,
    Investment,
    SavingsGoal,
    Transaction,
)
from src.domain.models.inputs import (
    CategoryInput,
    GoalInput,
    InvestmentInput,
    TransactionInput,
)
from src.domain.services import entities
from src.infrastructure.logging.logger import get_app_logger
from src.domain.services.normalization import normalize_decimal

Listener = Callable[[AppState], None]


def _new_id() -> str:
    return uuid4().hex


class AppStateStore:
    """State container with command methods and subscribe/notify."""

    def __init__(
        self,
        initial_state: AppState | None = None,
        logger=None,
        id_factory: Callable[[], str] = _new_id,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the store.

        Args:
            initial_state: Snapshot to start from; empty when omitted.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Generator of fresh entity ids.
            today: Clock used to date new transactions.
        """
        self._state = initial_state or AppState()
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory
        self._today = today
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

    @property
    def snapshot(self) -> AppState:
        """Return the current snapshot."""
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a function that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def replace(self, state: AppState) -> None:
        """Swap in a complete snapshot, e.g. one loaded from storage."""
        self.apply(lambda _current: state)

    def apply(self, command: Callable[[AppState], AppState]) -> AppState:
        """Run ``command`` on the latest snapshot and swap in its result.

        Args:
            command: Pure function from the current snapshot to the next.

        Returns:
            AppState: The snapshot after the command.
        """
        with self._lock:
            current = self._state
            updated = command(current)
            if updated is current:
                return current
            self._state = updated
            # Notified under the lock so listeners see snapshots in order.
            for listener in list(self._listeners):
                self._notify(listener, updated)
        return updated

    def _notify(self, listener: Listener, state: AppState) -> None:
        try:
            listener(state)
        except Exception as exc:
            self._logger.error(f"State listener {listener!r} failed: {exc}")

    # Transactions

    def add_transaction(self, data: TransactionInput) -> Transaction:
        return self._add(
            lambda state, new_id: entities.add_transaction(
                state, data, new_id=new_id, today=self._today()
            )
        )

    def update_transaction(
        self,
        transaction_id: str,
        changes: Mapping[str, Any],
    ) -> None:
        self._update("transactions", transaction_id, changes)

    def remove_transaction(self, transaction_id: str) -> None:
        self._remove("transactions", transaction_id)

    # Categories

    def add_category(self, data: CategoryInput) -> Category:
        return self._add(
            lambda state, new_id: entities.add_category(
                state, data, new_id=new_id
            )
        )

    def update_category(
        self,
        category_id: str,
        changes: Mapping[str, Any],
    ) -> None:
        self._update("categories", category_id, changes)

    def remove_category(self, category_id: str) -> None:
        self._remove("categories", category_id)

    # Investments

    def add_investment(self, data: InvestmentInput) -> Investment:
        return self._add(
            lambda state, new_id: entities.add_investment(
                state, data, new_id=new_id
            )
        )

    def update_investment(
        self,
        investment_id: str,
        changes: Mapping[str, Any],
    ) -> None:
        self._update("investments", investment_id, changes)

    def remove_investment(self, investment_id: str) -> None:
        self._remove("investments", investment_id)

    # Goals

    def add_goal(self, data: GoalInput) -> SavingsGoal:
        return self._add(
            lambda state, new_id: entities.add_goal(state, data, new_id=new_id)
        )

    def update_goal(self, goal_id: str, changes: Mapping[str, Any]) -> None:
        self._update("goals", goal_id, changes)

    def remove_goal(self, goal_id: str) -> None:
        self._remove("goals", goal_id)

    def adjust_goal_amount(self, goal_id: str, delta) -> None:
        """Add a signed delta to a goal balance; no floor or ceiling."""
        self._run_by_id(
            "goals",
            goal_id,
            "adjustment",
            lambda state: entities.adjust_goal_amount(state, goal_id, delta),
        )

    def deposit_to_goal(self, goal_id: str, amount) -> None:
        self.adjust_goal_amount(goal_id, amount)

    def withdraw_from_goal(self, goal_id: str, amount) -> None:
        """Withdraw a positive amount; zero or negative amounts are ignored."""
        amount = normalize_decimal(amount)
        if amount <= 0:
            self._logger.warning(
                f"Ignoring non-positive withdrawal of {amount} from {goal_id}"
            )
            return
        self.adjust_goal_amount(goal_id, -amount)

    def _add(self, reducer):
        created = []

        def _command(state: AppState) -> AppState:
            new_state, entity = reducer(state, self._id_factory())
            created.append(entity)
            return new_state

        self.apply(_command)
        entity = created[0]
        self._logger.info(f"Added {type(entity).__name__} {entity.id}")
        return entity

    def _update(
        self,
        collection: str,
        entity_id: str,
        changes: Mapping[str, Any],
    ) -> None:
        self._run_by_id(
            collection,
            entity_id,
            "update",
            lambda state: entities.update_entity(
                state, collection, entity_id, changes
            ),
        )

    def _remove(self, collection: str, entity_id: str) -> None:
        self._run_by_id(
            collection,
            entity_id,
            "removal",
            lambda state: entities.remove_entity(state, collection, entity_id),
        )

    def _run_by_id(
        self,
        collection: str,
        entity_id: str,
        action: str,
        reducer: Callable[[AppState], AppState],
    ) -> None:
        missed = []

        def _command(state: AppState) -> AppState:
            updated = reducer(state)
            if updated is state:
                missed.append(entity_id)
            return updated

        self.apply(_command)
        if missed:
            self._logger.debug(
                f"No {collection} entry with id {entity_id}; {action} ignored"
            )


__all__ = ["AppStateStore", "Listener"]
