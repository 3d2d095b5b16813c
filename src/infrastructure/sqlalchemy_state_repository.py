"""SQLAlchemy-backed repository for tracker snapshots."""

from datetime import datetime, timezone
import json

from sqlalchemy import (
    Column,
    DateTime,
    MetaData,
    String,
    Table,
    Text,
    delete,
    insert,
    select,
)

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.state_repository import StateRepositoryPort
from src.domain.models import AppState
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.state_codec import state_from_dict, state_to_dict

metadata = MetaData()

app_state_table = Table(
    "app_state",
    metadata,
    Column("key", String(255), primary_key=True),
    Column("payload", Text, nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)


class SqlAlchemyStateRepository(StateRepositoryPort):
    """Repository storing snapshots as JSON payloads in ``app_state``."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the state engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._schema_ready = False

    def load(self, key: str) -> AppState | None:
        """Return the snapshot stored under ``key``, if any."""
        engine = self._ensure_schema()
        query = select(app_state_table.c.payload).where(
            app_state_table.c.key == key
        )
        with engine.connect() as conn:
            payload = conn.execute(query).scalar_one_or_none()
        if payload is None:
            return None
        try:
            document = json.loads(payload)
        except json.JSONDecodeError as exc:
            self._logger.error(f"Cannot parse stored state '{key}': {exc}")
            return None
        return state_from_dict(document, logger=self._logger)

    def save(self, key: str, state: AppState) -> None:
        """Replace the snapshot stored under ``key`` in one transaction."""
        engine = self._ensure_schema()
        payload = json.dumps(state_to_dict(state), ensure_ascii=False)
        with engine.begin() as conn:
            conn.execute(
                delete(app_state_table).where(app_state_table.c.key == key)
            )
            conn.execute(
                insert(app_state_table).values(
                    key=key,
                    payload=payload,
                    updated_at=datetime.now(timezone.utc),
                )
            )

    def _ensure_schema(self):
        engine = self._db_port.get_state_engine()
        if not self._schema_ready:
            metadata.create_all(engine)
            self._schema_ready = True
        return engine


__all__ = ["SqlAlchemyStateRepository", "app_state_table"]
