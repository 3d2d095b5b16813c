"""Port for loading and saving tracker snapshots."""

from typing import Protocol

from src.domain.models import AppState


class StateRepositoryPort(Protocol):
    """Port persisting whole ``AppState`` snapshots under a key."""

    def load(self, key: str) -> AppState | None:
        """Return the stored snapshot, or None when nothing is stored.

        Collections missing from the stored document come back empty.
        """

    def save(self, key: str, state: AppState) -> None:
        """Persist the snapshot verbatim, replacing any previous one."""


__all__ = ["StateRepositoryPort"]
