"""Rules deciding how an account balance feeds assets or liabilities."""

from decimal import Decimal

from src.domain.models.accounts import Account


def is_asset_contribution(account: Account) -> bool:
    """Return True when the balance counts toward total assets.

    Only strictly positive balances in non-liability categories count.
    """
    return account.balance > 0 and not account.effective_category.is_liability


def liability_contribution(account: Account) -> Decimal:
    """Return the signed amount the account adds to total liabilities.

    Any negative balance adds its magnitude, including overdrafts in asset
    categories. A positive balance in a liability category subtracts.

    Args:
        account: Account snapshot.

    Returns:
        Decimal: Contribution to total liabilities, possibly negative.
    """
    if account.balance < 0:
        return abs(account.balance)
    if account.balance > 0 and account.effective_category.is_liability:
        return -account.balance
    return Decimal("0")


def is_liability_contribution(account: Account) -> bool:
    """Return True when the account moves total liabilities either way."""
    return liability_contribution(account) != 0


__all__ = [
    "is_asset_contribution",
    "is_liability_contribution",
    "liability_contribution",
]
