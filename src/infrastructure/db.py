"""Database infrastructure for the net worth tracker.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the accounts database. It belongs to the
infrastructure layer because it deals with external systems.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import AppSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a sqlite database file if needed."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite" or not url.database:
        return
    if url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


_accounts_engine: Optional[Engine] = None


def get_accounts_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the accounts database.

    Returns:
        Engine: Lazily initialized engine connected to the accounts store.
    """
    global _accounts_engine
    if _accounts_engine is None:
        db_url = AppSettings.from_env().database_url
        _ensure_sqlite_directory(db_url)
        _accounts_engine = _create_engine(db_url)
    return _accounts_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def get_accounts_engine(self) -> Engine:
        """Get the engine for the accounts database.

        Returns:
            Engine: SQLAlchemy engine connected to the accounts store.
        """
        return get_accounts_engine()


__all__ = [
    "get_accounts_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
