"""Account collection rules checked before a record is stored."""

from collections.abc import Iterable
from uuid import UUID

from src.domain.models.accounts import Account, AccountType


def is_name_unique(
    name: str,
    account_type: AccountType,
    accounts: Iterable[Account],
    excluding_id: UUID | None = None,
) -> bool:
    """Return True when no other account of the type uses the name.

    The comparison is case-insensitive and scoped to ``account_type``.

    Args:
        name: Candidate account name.
        account_type: Type the account will belong to.
        accounts: Current account snapshot.
        excluding_id: Account being edited, ignored in the comparison.

    Returns:
        bool: True when the name can be used.
    """
    candidate = name.lower()
    return all(
        account.name.lower() != candidate
        for account in accounts
        if account.account_type is account_type and account.id != excluding_id
    )


def has_existing_cash_account(
    accounts: Iterable[Account],
    excluding_id: UUID | None = None,
) -> bool:
    """Return True when a Cash-type account is already stored."""
    return any(
        account.account_type is AccountType.CASH
        and account.id != excluding_id
        for account in accounts
    )


__all__ = ["is_name_unique", "has_existing_cash_account"]
