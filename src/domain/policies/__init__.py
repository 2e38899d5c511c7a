"""Domain policies package."""

from .account_rules import has_existing_cash_account, is_name_unique

__all__ = ["is_name_unique", "has_existing_cash_account"]
