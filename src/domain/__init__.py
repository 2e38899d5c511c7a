"""Domain package for business rules and core models."""

from .errors import (
    AccountNotFoundError,
    AccountValidationError,
    CashAccountExistsError,
    DuplicateAccountNameError,
    InvalidAmountError,
    MissingRequiredFieldError,
)
from .models import (
    Account,
    AccountCategory,
    AccountsOverview,
    AccountType,
    CategoryAmount,
    CategoryBreakdown,
    HoldingsPartition,
    NetWorthSummary,
    Transaction,
    TransactionsSummary,
    TransactionType,
)
from .policies import has_existing_cash_account, is_name_unique
from .services import (
    compute_net_worth_summary,
    format_compact_currency,
    format_currency,
    net_worth,
    total_assets,
    total_liabilities,
)

__all__ = [
    "AccountNotFoundError",
    "AccountValidationError",
    "CashAccountExistsError",
    "DuplicateAccountNameError",
    "InvalidAmountError",
    "MissingRequiredFieldError",
    "Account",
    "AccountCategory",
    "AccountsOverview",
    "AccountType",
    "CategoryAmount",
    "CategoryBreakdown",
    "HoldingsPartition",
    "NetWorthSummary",
    "Transaction",
    "TransactionsSummary",
    "TransactionType",
    "has_existing_cash_account",
    "is_name_unique",
    "compute_net_worth_summary",
    "format_compact_currency",
    "format_currency",
    "net_worth",
    "total_assets",
    "total_liabilities",
]
