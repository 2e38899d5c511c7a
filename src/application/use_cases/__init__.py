"""Application use cases package."""

from .create_account import CreateAccountRequest, CreateAccountUseCase
from .delete_account import DeleteAccountUseCase
from .edit_account import EditAccountRequest, EditAccountUseCase
from .get_accounts_overview import AccountsOverview, GetAccountsOverviewUseCase
from .get_net_worth_summary import GetNetWorthSummaryUseCase, NetWorthSummary
from .get_transactions_summary import (
    GetTransactionsSummaryUseCase,
    TransactionsSummary,
)

__all__ = [
    "CreateAccountRequest",
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "EditAccountRequest",
    "EditAccountUseCase",
    "AccountsOverview",
    "GetAccountsOverviewUseCase",
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
    "GetTransactionsSummaryUseCase",
    "TransactionsSummary",
]
