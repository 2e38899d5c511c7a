"""In-process repositories used for demos and tests."""

from collections.abc import Iterable
from uuid import UUID

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models.accounts import Account, sort_accounts
from src.domain.models.transactions import Transaction


class InMemoryAccountsRepository(AccountsRepositoryPort):
    """Account collection held in a dict keyed by account id."""

    def __init__(self, accounts: Iterable[Account] = ()) -> None:
        self._accounts: dict[UUID, Account] = {
            account.id: account for account in accounts
        }

    def list_accounts(self) -> list[Account]:
        return sort_accounts(self._accounts.values())

    def get_account(self, account_id: UUID) -> Account | None:
        return self._accounts.get(account_id)

    def add_account(self, account: Account) -> None:
        self._accounts[account.id] = account

    def update_account(self, account: Account) -> None:
        self._accounts[account.id] = account

    def delete_account(self, account_id: UUID) -> bool:
        return self._accounts.pop(account_id, None) is not None


class InMemoryTransactionsRepository(TransactionsRepositoryPort):
    """Transaction collection held in a list."""

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._transactions = list(transactions)

    def list_transactions(self) -> list[Transaction]:
        return sorted(self._transactions, key=lambda t: t.date, reverse=True)

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)


__all__ = ["InMemoryAccountsRepository", "InMemoryTransactionsRepository"]
