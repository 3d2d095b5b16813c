"""Database ports for the state store.

Infrastructure implementations provide concrete adapters that satisfy these
protocols.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine used to persist snapshots."""

    def get_state_engine(self) -> Engine:
        """Get the engine for the state database.

        Returns:
            Engine: SQLAlchemy engine connected to the state database.
        """


__all__ = ["DatabaseEnginePort"]
