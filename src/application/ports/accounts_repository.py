"""Port for reading and writing user accounts."""

from typing import Protocol
from uuid import UUID

from src.domain.models.accounts import Account


class AccountsRepositoryPort(Protocol):
    """Port exposing the account collection.

    Implementations own every mutation. Use cases only receive snapshots
    from ``list_accounts``.
    """

    def list_accounts(self) -> list[Account]:
        """Return every stored account, oldest first."""

    def get_account(self, account_id: UUID) -> Account | None:
        """Return the account with the given id, if stored."""

    def add_account(self, account: Account) -> None:
        """Store a new account."""

    def update_account(self, account: Account) -> None:
        """Replace the stored account sharing the same id."""

    def delete_account(self, account_id: UUID) -> bool:
        """Delete the account and return True when it existed."""


__all__ = ["AccountsRepositoryPort"]
