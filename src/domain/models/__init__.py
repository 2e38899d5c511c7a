"""Domain models package."""

from .accounts import (
    BANKING_CATEGORIES,
    HOLDING_CATEGORIES,
    LIABILITY_CATEGORIES,
    LOAN_CATEGORIES,
    Account,
    AccountCategory,
    AccountType,
    sort_accounts,
)
from .finance import (
    AccountsOverview,
    CategoryAmount,
    CategoryBreakdown,
    HoldingsPartition,
    NetWorthSummary,
    TransactionsSummary,
)
from .transactions import Transaction, TransactionType

__all__ = [
    "Account",
    "AccountCategory",
    "AccountType",
    "BANKING_CATEGORIES",
    "HOLDING_CATEGORIES",
    "LIABILITY_CATEGORIES",
    "LOAN_CATEGORIES",
    "sort_accounts",
    "AccountsOverview",
    "CategoryAmount",
    "CategoryBreakdown",
    "HoldingsPartition",
    "NetWorthSummary",
    "TransactionsSummary",
    "Transaction",
    "TransactionType",
]
