"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from .accounts import Account, AccountCategory, AccountType


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset contributions.
        liability_total: Signed liability total. Can be negative when
            positive balances in liability categories exceed the debts.
        net_worth: Assets minus liabilities.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a given category and its member accounts."""

    category: AccountCategory
    amount: Decimal
    accounts: list[Account] = field(default_factory=list)


@dataclass(frozen=True)
class CategoryBreakdown:
    """Breakdown of amounts by category for one account type."""

    account_type: AccountType
    categories: list[CategoryAmount]


@dataclass(frozen=True)
class HoldingsPartition:
    """Asset and liability holdings of one account type.

    Attributes:
        assets: Holding accounts with a positive balance.
        liabilities: Holding accounts with a negative balance.
        assets_total: Sum of the asset balances.
        liabilities_total: Sum of the absolute liability balances.
    """

    account_type: AccountType
    assets: list[Account]
    liabilities: list[Account]
    assets_total: Decimal
    liabilities_total: Decimal


@dataclass(frozen=True)
class AccountsOverview:
    """Everything the accounts screen renders for a snapshot."""

    summary: NetWorthSummary
    personal_total: Decimal
    business_total: Decimal
    cash_total: Decimal
    banking: dict[AccountType, CategoryBreakdown]
    holdings: dict[AccountType, HoldingsPartition]
    cash_accounts: list[Account]
    asset_allocation: list[CategoryAmount] = field(default_factory=list)


@dataclass(frozen=True)
class TransactionsSummary:
    """Summary of transaction totals."""

    income_total: Decimal
    expense_total: Decimal

    @property
    def net(self) -> Decimal:
        """Return income_total minus expense_total."""
        return self.income_total - self.expense_total


__all__ = [
    "NetWorthSummary",
    "CategoryAmount",
    "CategoryBreakdown",
    "HoldingsPartition",
    "AccountsOverview",
    "TransactionsSummary",
]
