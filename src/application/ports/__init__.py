"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .database import DatabaseEnginePort
from .preferences_store import AppPreferences, PreferencesStorePort
from .transactions_repository import TransactionsRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "AppPreferences",
    "DatabaseEnginePort",
    "PreferencesStorePort",
    "TransactionsRepositoryPort",
]
