"""Use case to report savings goal progress."""

from src.application.state_store import AppStateStore
from src.domain.models import GoalProgress
from src.domain.services.finance import compute_goal_progress


class GetGoalProgressUseCase:
    """Return display progress for every savings goal."""

    def __init__(self, store: AppStateStore) -> None:
        self._store = store

    def execute(self) -> list[GoalProgress]:
        return [compute_goal_progress(g) for g in self._store.snapshot.goals]


__all__ = ["GetGoalProgressUseCase"]
