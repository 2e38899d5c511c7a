"""Database ports for the net worth tracker.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the accounts database.

    Repositories can depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_accounts_engine(self) -> Engine:
        """Get the engine for the accounts database.

        Returns:
            Engine: SQLAlchemy engine connected to the accounts store.
        """


__all__ = ["DatabaseEnginePort"]
