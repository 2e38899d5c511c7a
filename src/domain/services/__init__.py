"""Domain services package."""

from .classification import (
    is_asset_contribution,
    is_liability_contribution,
    liability_contribution,
)
from .finance import (
    accounts_for_category,
    available_credit,
    business_total,
    cash_total,
    category_total,
    compute_asset_allocation,
    compute_category_breakdown,
    compute_holdings_partition,
    compute_net_worth_summary,
    holding_asset_accounts,
    holding_liability_accounts,
    net_worth,
    net_worth_by_sign,
    personal_total,
    total_assets,
    total_liabilities,
    type_total,
)
from .formatting import (
    format_compact_currency,
    format_compact_trend,
    format_currency,
)
from .normalization import (
    default_account_name,
    normalize_account_name,
    parse_amount,
)
from .transactions import (
    compute_transactions_summary,
    transactions_expense_total,
    transactions_income_total,
    transactions_net,
)
from .validation import (
    validate_balance_sign,
    validate_cash_singleton,
    validate_unique_name,
)

__all__ = [
    "is_asset_contribution",
    "is_liability_contribution",
    "liability_contribution",
    "accounts_for_category",
    "available_credit",
    "business_total",
    "cash_total",
    "category_total",
    "compute_asset_allocation",
    "compute_category_breakdown",
    "compute_holdings_partition",
    "compute_net_worth_summary",
    "holding_asset_accounts",
    "holding_liability_accounts",
    "net_worth",
    "net_worth_by_sign",
    "personal_total",
    "total_assets",
    "total_liabilities",
    "type_total",
    "format_currency",
    "format_compact_currency",
    "format_compact_trend",
    "default_account_name",
    "normalize_account_name",
    "parse_amount",
    "compute_transactions_summary",
    "transactions_expense_total",
    "transactions_income_total",
    "transactions_net",
    "validate_balance_sign",
    "validate_cash_singleton",
    "validate_unique_name",
]
