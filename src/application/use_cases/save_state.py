"""Use case to persist the current snapshot."""

from src.application.ports.state_repository import StateRepositoryPort
from src.domain.models import AppState
from src.infrastructure.logging.logger import get_app_logger


class SaveStateUseCase:
    """Persist snapshots verbatim under a fixed key."""

    def __init__(
        self,
        state_repository: StateRepositoryPort,
        key: str,
        logger=None,
    ) -> None:
        self._state_repository = state_repository
        self._key = key
        self._logger = logger or get_app_logger()

    def execute(self, state: AppState) -> None:
        """Save ``state``; suitable as a store subscriber."""
        self._state_repository.save(self._key, state)
        self._logger.debug(f"Saved state under '{self._key}'")


__all__ = ["SaveStateUseCase"]
