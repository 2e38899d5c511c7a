"""Domain services for finance aggregates.

Every function here is a pure reduction over an account snapshot. Inputs
are never mutated and empty snapshots produce zero totals.
"""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models import (
    BANKING_CATEGORIES,
    HOLDING_CATEGORIES,
    Account,
    AccountCategory,
    AccountType,
    CategoryAmount,
    CategoryBreakdown,
    HoldingsPartition,
    NetWorthSummary,
)
from src.domain.services.classification import is_asset_contribution
from src.domain.services.validation import validate_balance_sign


def _sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, Decimal("0"))


def _of_type(
    account_type: AccountType,
    accounts: Iterable[Account],
) -> list[Account]:
    return [account for account in accounts if account.account_type is account_type]


def total_assets(accounts: Iterable[Account]) -> Decimal:
    """Return the sum of positive balances in non-liability categories."""
    return _sum(
        account.balance for account in accounts if is_asset_contribution(account)
    )


def total_liabilities(accounts: Iterable[Account]) -> Decimal:
    """Return the signed liability total.

    Negative balances add their magnitude whatever the category (debts and
    overdrafts). Positive balances in liability categories are subtracted.
    The result is not floored and can be negative.

    Args:
        accounts: Account snapshot.

    Returns:
        Decimal: Liability total.
    """
    accounts = list(accounts)
    negative_liabilities = _sum(
        abs(account.balance)
        for account in accounts
        if account.balance < 0 and account.effective_category.is_liability
    )
    negative_assets = _sum(
        abs(account.balance)
        for account in accounts
        if account.balance < 0 and not account.effective_category.is_liability
    )
    positive_liabilities = _sum(
        account.balance
        for account in accounts
        if account.balance > 0 and account.effective_category.is_liability
    )
    return negative_liabilities + negative_assets - positive_liabilities


def net_worth(accounts: Iterable[Account]) -> Decimal:
    """Return total assets minus total liabilities."""
    accounts = list(accounts)
    return total_assets(accounts) - total_liabilities(accounts)


def net_worth_by_sign(accounts: Iterable[Account]) -> Decimal:
    """Return positive balances minus negative magnitudes, ignoring category.

    Legacy formula kept for displays that predate category-aware totals.
    It always equals ``net_worth`` because the liability total is left
    signed. Subtracting ``abs(total_liabilities)`` instead would diverge as
    soon as positive liability balances exceed the debts.
    """
    accounts = list(accounts)
    positive = _sum(a.balance for a in accounts if a.balance > 0)
    negative = _sum(abs(a.balance) for a in accounts if a.balance < 0)
    return positive - negative


def type_total(account_type: AccountType, accounts: Iterable[Account]) -> Decimal:
    """Return the banking total of one account type.

    Checking and savings balances are summed as they are. Credit card
    balances are netted first and the magnitude of that net is subtracted.

    Args:
        account_type: Personal or Business.
        accounts: Account snapshot.

    Returns:
        Decimal: Banking total for the type.
    """
    members = _of_type(account_type, accounts)
    checking_savings = _sum(
        account.balance
        for account in members
        if account.effective_category
        in (AccountCategory.CHECKING, AccountCategory.SAVINGS)
    )
    credit_cards = _sum(
        account.balance
        for account in members
        if account.effective_category is AccountCategory.CREDIT_CARD
    )
    return checking_savings - abs(credit_cards)


def personal_total(accounts: Iterable[Account]) -> Decimal:
    """Return the banking total of personal accounts."""
    return type_total(AccountType.PERSONAL, accounts)


def business_total(accounts: Iterable[Account]) -> Decimal:
    """Return the banking total of business accounts."""
    return type_total(AccountType.BUSINESS, accounts)


def cash_total(accounts: Iterable[Account]) -> Decimal:
    """Return the summed balance of Cash-type accounts."""
    return _sum(a.balance for a in _of_type(AccountType.CASH, accounts))


def accounts_for_category(
    category: AccountCategory,
    account_type: AccountType,
    accounts: Iterable[Account],
) -> list[Account]:
    """Return the accounts listed under a category section.

    Credit cards list every member. Other liability categories list only
    members that owe money. Asset categories list every member.
    """
    members = [
        account
        for account in _of_type(account_type, accounts)
        if account.effective_category is category
    ]
    if category is AccountCategory.CREDIT_CARD:
        return members
    if category.is_liability:
        return [account for account in members if account.balance < 0]
    return members


def category_total(
    category: AccountCategory,
    account_type: AccountType,
    accounts: Iterable[Account],
) -> Decimal:
    """Return the amount shown in a category section header.

    Args:
        category: Category of the section.
        account_type: Account type of the section.
        accounts: Account snapshot.

    Returns:
        Decimal: Net balance for credit cards, owed magnitude for other
        liability categories, positive balances for asset categories.
    """
    members = accounts_for_category(category, account_type, accounts)
    positive = _sum(a.balance for a in members if a.balance > 0)
    negative = _sum(abs(a.balance) for a in members if a.balance < 0)
    if category is AccountCategory.CREDIT_CARD:
        return positive - negative
    if category.is_liability:
        return negative
    return positive


def available_credit(account: Account) -> Decimal:
    """Return credit limit minus the used amount for credit cards."""
    return account.available_credit


def holding_asset_accounts(
    account_type: AccountType,
    accounts: Iterable[Account],
) -> list[Account]:
    """Return non-banking accounts of the type with a positive balance."""
    return [
        account
        for account in _of_type(account_type, accounts)
        if account.balance > 0 and account.effective_category in HOLDING_CATEGORIES
    ]


def holding_liability_accounts(
    account_type: AccountType,
    accounts: Iterable[Account],
) -> list[Account]:
    """Return non-banking accounts of the type with a negative balance."""
    return [
        account
        for account in _of_type(account_type, accounts)
        if account.balance < 0 and account.effective_category in HOLDING_CATEGORIES
    ]


def compute_holdings_partition(
    account_type: AccountType,
    accounts: Iterable[Account],
) -> HoldingsPartition:
    """Split non-banking accounts of a type into assets and liabilities."""
    accounts = list(accounts)
    assets = holding_asset_accounts(account_type, accounts)
    liabilities = holding_liability_accounts(account_type, accounts)
    return HoldingsPartition(
        account_type=account_type,
        assets=assets,
        liabilities=liabilities,
        assets_total=_sum(a.balance for a in assets),
        liabilities_total=_sum(abs(a.balance) for a in liabilities),
    )


def compute_category_breakdown(
    account_type: AccountType,
    accounts: Iterable[Account],
    categories: Iterable[AccountCategory] = BANKING_CATEGORIES,
) -> CategoryBreakdown:
    """Compute section totals for the non-empty categories of a type.

    Args:
        account_type: Account type to break down.
        accounts: Account snapshot.
        categories: Categories to include, in display order.

    Returns:
        CategoryBreakdown: Sections with their totals and member accounts.
    """
    accounts = list(accounts)
    sections = []
    for category in categories:
        members = accounts_for_category(category, account_type, accounts)
        if not members:
            continue
        sections.append(
            CategoryAmount(
                category=category,
                amount=category_total(category, account_type, accounts),
                accounts=members,
            )
        )
    return CategoryBreakdown(account_type=account_type, categories=sections)


def compute_asset_allocation(accounts: Iterable[Account]) -> list[CategoryAmount]:
    """Return asset totals per non-liability category, largest first.

    Only asset contributions count, so the amounts add up to
    ``total_assets``. Categories without assets are left out. Equal amounts
    keep the taxonomy order.
    """
    totals: dict[AccountCategory, Decimal] = {}
    members: dict[AccountCategory, list[Account]] = {}
    for account in accounts:
        if not is_asset_contribution(account):
            continue
        category = account.effective_category
        totals[category] = totals.get(category, Decimal("0")) + account.balance
        members.setdefault(category, []).append(account)
    allocation = [
        CategoryAmount(category=category, amount=amount, accounts=members[category])
        for category, amount in totals.items()
    ]
    taxonomy = list(AccountCategory)
    return sorted(
        allocation,
        key=lambda item: (-item.amount, taxonomy.index(item.category)),
    )


def compute_net_worth_summary(
    accounts: Iterable[Account],
    *,
    logger: Logger,
) -> NetWorthSummary:
    """Compute net worth totals from an account snapshot.

    Args:
        accounts: Account snapshot.
        logger: Logger used for sign warnings.

    Returns:
        NetWorthSummary: Computed asset, liability, and net worth totals.
    """
    accounts = list(accounts)
    for account in accounts:
        validate_balance_sign(account, logger)
    asset_total = total_assets(accounts)
    liability_total = total_liabilities(accounts)
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
    )


__all__ = [
    "total_assets",
    "total_liabilities",
    "net_worth",
    "net_worth_by_sign",
    "type_total",
    "personal_total",
    "business_total",
    "cash_total",
    "accounts_for_category",
    "category_total",
    "available_credit",
    "holding_asset_accounts",
    "holding_liability_accounts",
    "compute_holdings_partition",
    "compute_category_breakdown",
    "compute_asset_allocation",
    "compute_net_worth_summary",
]
