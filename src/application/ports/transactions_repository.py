"""Port for reading recorded transactions."""

from typing import Protocol

from src.domain.models.transactions import Transaction


class TransactionsRepositoryPort(Protocol):
    """Port exposing the transaction collection."""

    def list_transactions(self) -> list[Transaction]:
        """Return every stored transaction, most recent first."""

    def add_transaction(self, transaction: Transaction) -> None:
        """Store a new transaction."""


__all__ = ["TransactionsRepositoryPort"]
