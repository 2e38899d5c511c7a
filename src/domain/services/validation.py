"""Domain validation helpers."""

from collections.abc import Iterable
from logging import Logger
from uuid import UUID

from src.domain.errors import CashAccountExistsError, DuplicateAccountNameError
from src.domain.models.accounts import Account, AccountType
from src.domain.policies.account_rules import (
    has_existing_cash_account,
    is_name_unique,
)


def validate_balance_sign(account: Account, logger: Logger) -> None:
    """Warn when balances violate expected sign conventions.

    Neither case is rejected: overdrafts count as liabilities and positive
    liability balances reduce the liability total.

    Args:
        account: Account snapshot to inspect.
        logger: Logger used for warnings.
    """
    category = account.effective_category
    if not category.is_liability and account.balance < 0:
        logger.warning(
            f"Asset balance is negative for account={account.name!r} "
            f"category={category.value}: {account.balance}"
        )
    if category.is_liability and account.balance > 0:
        logger.warning(
            f"Liability balance is positive for account={account.name!r} "
            f"category={category.value}: {account.balance}"
        )


def validate_unique_name(
    name: str,
    account_type: AccountType,
    accounts: Iterable[Account],
    excluding_id: UUID | None = None,
) -> None:
    """Raise DuplicateAccountNameError when the name is taken in the type."""
    if not is_name_unique(name, account_type, accounts, excluding_id):
        raise DuplicateAccountNameError(name, account_type.value)


def validate_cash_singleton(
    account_type: AccountType,
    accounts: Iterable[Account],
    excluding_id: UUID | None = None,
) -> None:
    """Raise CashAccountExistsError when a second Cash account is requested."""
    if account_type is not AccountType.CASH:
        return
    if has_existing_cash_account(accounts, excluding_id):
        raise CashAccountExistsError()


__all__ = [
    "validate_balance_sign",
    "validate_unique_name",
    "validate_cash_singleton",
]
