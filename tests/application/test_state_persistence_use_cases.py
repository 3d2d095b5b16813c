"""Tests for the load and save snapshot use cases."""

from unittest.mock import MagicMock

from src.application.use_cases.load_state import (
    LoadStateUseCase,
    initial_state,
)
from src.application.use_cases.save_state import SaveStateUseCase
from src.domain.models import AppState


def test_load_returns_initial_state_when_nothing_is_stored() -> None:
    repository = MagicMock()
    repository.load.return_value = None

    state = LoadStateUseCase(repository, logger=MagicMock()).execute("key")

    repository.load.assert_called_once_with("key")
    assert state == initial_state()
    assert len(state.categories) == 6
    assert state.transactions == ()


def test_load_seeds_default_categories_for_legacy_snapshots() -> None:
    repository = MagicMock()
    repository.load.return_value = AppState()

    state = LoadStateUseCase(repository, logger=MagicMock()).execute("key")

    assert [c.name for c in state.categories][:2] == ["Gaji", "Bonus"]


def test_load_keeps_stored_categories() -> None:
    stored = initial_state()
    repository = MagicMock()
    repository.load.return_value = stored

    state = LoadStateUseCase(repository, logger=MagicMock()).execute("key")

    assert state is stored


def test_save_writes_under_configured_key() -> None:
    repository = MagicMock()
    state = initial_state()

    SaveStateUseCase(repository, key="tracker", logger=MagicMock()).execute(
        state
    )

    repository.save.assert_called_once_with("tracker", state)
