"""Database infrastructure for snapshot persistence.

This module exposes concrete helpers to create and reuse the SQLAlchemy engine
used by the ``sqlalchemy`` state backend.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a SQLAlchemy engine with health checks enabled.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    return create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
    )


_state_engine: Optional[Engine] = None


def get_state_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the state database.

    Returns:
        Engine: Lazily initialized engine connected to ``STATE_DB_URL``.
    """
    global _state_engine
    if _state_engine is None:
        db_url = _get_env_var("STATE_DB_URL")
        _state_engine = _create_engine(db_url)
    return _state_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine."""

    def __init__(
        self,
        engine: Engine | None = None,
        db_url: str | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine; the shared one is used when omitted.
            db_url: Optional URL for a dedicated engine created on first use.
        """
        self._engine = engine
        self._db_url = db_url

    def get_state_engine(self) -> Engine:
        """Get the engine for the state database.

        Returns:
            Engine: SQLAlchemy engine connected to the state database.
        """
        if self._engine is None and self._db_url:
            self._engine = _create_engine(self._db_url)
        return self._engine or get_state_engine()


__all__ = [
    "get_state_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
