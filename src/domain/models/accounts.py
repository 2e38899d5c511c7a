"""Domain models for user-tracked accounts."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccountType(str, Enum):
    """Whose finances an account belongs to."""

    PERSONAL = "Personal"
    BUSINESS = "Business"
    CASH = "Cash"

    @property
    def icon(self) -> str:
        """Return the icon token for the account type."""
        return _TYPE_ICONS[self]

    @property
    def color(self) -> str:
        """Return the design color token for the account type."""
        return _TYPE_COLORS[self]


class AccountCategory(str, Enum):
    """Economic category of an account.

    The liability flag of each category is fixed. It decides how the
    aggregation engine reads the sign of the balance.
    """

    CHECKING = "Checking"
    SAVINGS = "Savings"
    CREDIT_CARD = "Credit Card"
    CASH_IN_HAND = "Cash in Hand"
    REAL_ESTATE = "Real Estate"
    VEHICLE = "Vehicle"
    OTHER_ASSETS = "Other Assets"
    MORTGAGE = "Mortgage"
    AUTO_LOAN = "Auto Loan"
    LENDING_LOAN = "Lending Loan"
    OTHER_LOANS = "Other Loans"

    @property
    def is_liability(self) -> bool:
        """Return True for debt categories."""
        return self in LIABILITY_CATEGORIES

    @property
    def display_name(self) -> str:
        """Return the section title used by presentation layers."""
        return _CATEGORY_DISPLAY_NAMES[self]

    @property
    def default_icon(self) -> str:
        """Return the icon token used when an account has no icon."""
        return _CATEGORY_ICONS[self]

    @property
    def color(self) -> str:
        """Return the design color token for the category."""
        return _CATEGORY_COLORS[self]


LIABILITY_CATEGORIES = frozenset(
    {
        AccountCategory.CREDIT_CARD,
        AccountCategory.MORTGAGE,
        AccountCategory.AUTO_LOAN,
        AccountCategory.LENDING_LOAN,
        AccountCategory.OTHER_LOANS,
    }
)

BANKING_CATEGORIES = (
    AccountCategory.CHECKING,
    AccountCategory.SAVINGS,
    AccountCategory.CREDIT_CARD,
)

LOAN_CATEGORIES = (
    AccountCategory.MORTGAGE,
    AccountCategory.AUTO_LOAN,
    AccountCategory.LENDING_LOAN,
    AccountCategory.OTHER_LOANS,
)

HOLDING_CATEGORIES = (
    AccountCategory.CASH_IN_HAND,
    AccountCategory.REAL_ESTATE,
    AccountCategory.VEHICLE,
    AccountCategory.OTHER_ASSETS,
    *LOAN_CATEGORIES,
)

_TYPE_ICONS = {
    AccountType.PERSONAL: "person.circle.fill",
    AccountType.BUSINESS: "building.2.fill",
    AccountType.CASH: "banknote.fill",
}

_TYPE_COLORS = {
    AccountType.PERSONAL: "success",
    AccountType.BUSINESS: "info",
    AccountType.CASH: "primary",
}

_CATEGORY_DISPLAY_NAMES = {
    AccountCategory.CHECKING: "Checking Accounts",
    AccountCategory.SAVINGS: "Savings Accounts",
    AccountCategory.CREDIT_CARD: "Credit Cards",
    AccountCategory.CASH_IN_HAND: "Cash Accounts",
    AccountCategory.REAL_ESTATE: "Real Estate",
    AccountCategory.VEHICLE: "Vehicles",
    AccountCategory.OTHER_ASSETS: "Other Assets",
    AccountCategory.MORTGAGE: "Mortgages",
    AccountCategory.AUTO_LOAN: "Auto Loans",
    AccountCategory.LENDING_LOAN: "Lending Loans",
    AccountCategory.OTHER_LOANS: "Other Loans",
}

_CATEGORY_ICONS = {
    AccountCategory.CHECKING: "creditcard",
    AccountCategory.SAVINGS: "building.columns",
    AccountCategory.CREDIT_CARD: "creditcard.and.123",
    AccountCategory.CASH_IN_HAND: "banknote",
    AccountCategory.REAL_ESTATE: "building.2",
    AccountCategory.VEHICLE: "car",
    AccountCategory.OTHER_ASSETS: "archivebox",
    AccountCategory.MORTGAGE: "house",
    AccountCategory.AUTO_LOAN: "car",
    AccountCategory.LENDING_LOAN: "hand.wave",
    AccountCategory.OTHER_LOANS: "doc.text",
}

_CATEGORY_COLORS = {
    AccountCategory.CHECKING: "success",
    AccountCategory.SAVINGS: "info",
    AccountCategory.CREDIT_CARD: "error",
    AccountCategory.CASH_IN_HAND: "success",
    AccountCategory.REAL_ESTATE: "primary",
    AccountCategory.VEHICLE: "info",
    AccountCategory.OTHER_ASSETS: "secondary",
    AccountCategory.MORTGAGE: "error",
    AccountCategory.AUTO_LOAN: "warning",
    AccountCategory.LENDING_LOAN: "info",
    AccountCategory.OTHER_LOANS: "secondary",
}


@dataclass(frozen=True)
class Account:
    """Snapshot of one ledger the user tracks.

    Attributes:
        name: Display name, unique per account type (case-insensitive).
        balance: Signed balance. Its meaning depends on the category.
        account_type: Owner of the account (personal, business or cash).
        category: Economic category. None reads as Checking.
        icon: Optional icon token overriding the category default.
        credit_limit: Credit limit, meaningful for credit cards only.
        id: Opaque unique identifier.
        created_at: Creation timestamp, used for default ordering.
        updated_at: Last edit timestamp.
    """

    name: str
    balance: Decimal
    account_type: AccountType
    category: AccountCategory | None = AccountCategory.CHECKING
    icon: str | None = None
    credit_limit: Decimal = Decimal("0")
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def effective_category(self) -> AccountCategory:
        """Return the category, defaulting to Checking when unset."""
        return self.category or AccountCategory.CHECKING

    @property
    def display_icon(self) -> str:
        """Return the icon token to render for the account."""
        return self.icon or self.effective_category.default_icon

    @property
    def available_credit(self) -> Decimal:
        """Return the remaining credit for credit cards, zero otherwise."""
        if self.effective_category is not AccountCategory.CREDIT_CARD:
            return Decimal("0")
        return self.credit_limit - abs(self.balance)


def sort_accounts(accounts) -> list[Account]:
    """Return accounts in default list order (oldest first)."""
    return sorted(accounts, key=lambda account: account.created_at)


__all__ = [
    "Account",
    "AccountCategory",
    "AccountType",
    "BANKING_CATEGORIES",
    "HOLDING_CATEGORIES",
    "LIABILITY_CATEGORIES",
    "LOAN_CATEGORIES",
    "sort_accounts",
]
