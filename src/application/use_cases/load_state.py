"""Use case to load the persisted snapshot."""

from dataclasses import replace

from src.application.ports.state_repository import StateRepositoryPort
from src.domain.models import AppState
from src.domain.services.categories import default_categories
from src.infrastructure.logging.logger import get_app_logger


def initial_state() -> AppState:
    """Return the snapshot used when nothing has been stored yet."""
    return AppState(categories=default_categories())


class LoadStateUseCase:
    """Load a snapshot and migrate snapshots saved without categories."""

    def __init__(
        self,
        state_repository: StateRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            state_repository: Port reading persisted snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._state_repository = state_repository
        self._logger = logger or get_app_logger()

    def execute(self, key: str) -> AppState:
        """Return the stored snapshot, or the initial one.

        Args:
            key: Storage key of the snapshot.

        Returns:
            AppState: Loaded snapshot with categories always populated.
        """
        state = self._state_repository.load(key)
        if state is None:
            self._logger.info(f"No stored state under '{key}'; starting fresh")
            return initial_state()
        if not state.categories:
            self._logger.info(
                f"Stored state '{key}' has no categories; seeding defaults"
            )
            state = replace(state, categories=default_categories())
        self._logger.info(
            f"Loaded state '{key}': {len(state.transactions)} transactions, "
            f"{len(state.investments)} investments, {len(state.goals)} goals, "
            f"{len(state.categories)} categories"
        )
        return state


__all__ = ["LoadStateUseCase", "initial_state"]
