"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.preferences_store import PreferencesStorePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_repositories import (
    InMemoryAccountsRepository,
    InMemoryTransactionsRepository,
)
from src.infrastructure.preferences_store import JsonPreferencesStore
from src.infrastructure.settings import AppSettings
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)

_memory_accounts: InMemoryAccountsRepository | None = None
_memory_transactions: InMemoryTransactionsRepository | None = None


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the configured accounts repository."""
    global _memory_accounts
    settings = AppSettings.from_env()
    if settings.backend == "memory":
        if _memory_accounts is None:
            get_app_logger().info("Using the in-memory accounts repository")
            _memory_accounts = InMemoryAccountsRepository()
        return _memory_accounts
    repository = SqlAlchemyAccountsRepository(
        db_port or build_database_adapter()
    )
    repository.prepare_storage()
    return repository


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the configured transactions repository."""
    global _memory_transactions
    settings = AppSettings.from_env()
    if settings.backend == "memory":
        if _memory_transactions is None:
            _memory_transactions = InMemoryTransactionsRepository()
        return _memory_transactions
    repository = SqlAlchemyTransactionsRepository(
        db_port or build_database_adapter()
    )
    repository.prepare_storage()
    return repository


def build_preferences_store() -> PreferencesStorePort:
    """Return the user preferences store."""
    settings = AppSettings.from_env()
    if settings.preferences_file is None:
        raise RuntimeError("A PREFERENCES_FILE location is required.")
    return JsonPreferencesStore(settings.preferences_file, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_accounts_repository",
    "build_transactions_repository",
    "build_preferences_store",
]
