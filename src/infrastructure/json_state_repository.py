"""JSON file repository for tracker snapshots."""

import json
import os
from pathlib import Path
import tempfile

from src.application.ports.state_repository import StateRepositoryPort
from src.domain.models import AppState
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.state_codec import state_from_dict, state_to_dict


class JsonFileStateRepository(StateRepositoryPort):
    """Repository storing one JSON document per key in a directory."""

    def __init__(self, directory: Path, logger=None) -> None:
        """Initialize the repository.

        Args:
            directory: Directory holding ``<key>.json`` files.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._directory = Path(directory)
        self._logger = logger or get_app_logger()

    def path_for(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def load(self, key: str) -> AppState | None:
        """Return the stored snapshot, or None when absent or unreadable."""
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            self._logger.error(f"Cannot parse state file {path}: {exc}")
            return None
        if not isinstance(document, dict):
            self._logger.error(f"State file {path} is not a JSON object")
            return None
        return state_from_dict(document, logger=self._logger)

    def save(self, key: str, state: AppState) -> None:
        """Write the snapshot, replacing the previous file atomically."""
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        payload = json.dumps(state_to_dict(state), ensure_ascii=False, indent=2)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self._directory,
            prefix=f".{key}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            handle.write(payload)
        tmp_path = Path(handle.name)
        try:
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


__all__ = ["JsonFileStateRepository"]
