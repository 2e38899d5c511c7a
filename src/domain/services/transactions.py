"""Reducers over recorded transactions."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import Transaction, TransactionsSummary, TransactionType


def transactions_income_total(transactions: Iterable[Transaction]) -> Decimal:
    """Return the summed amount of income transactions."""
    return sum(
        (
            t.amount
            for t in transactions
            if t.transaction_type is TransactionType.INCOME
        ),
        Decimal("0"),
    )


def transactions_expense_total(transactions: Iterable[Transaction]) -> Decimal:
    """Return the summed amount of expense transactions."""
    return sum(
        (t.amount for t in transactions if t.is_expense),
        Decimal("0"),
    )


def transactions_net(transactions: Iterable[Transaction]) -> Decimal:
    """Return income minus expenses. Transfers do not move the total."""
    transactions = list(transactions)
    return transactions_income_total(transactions) - transactions_expense_total(
        transactions
    )


def compute_transactions_summary(
    transactions: Iterable[Transaction],
) -> TransactionsSummary:
    """Compute income and expense totals for a transaction snapshot."""
    transactions = list(transactions)
    return TransactionsSummary(
        income_total=transactions_income_total(transactions),
        expense_total=transactions_expense_total(transactions),
    )


__all__ = [
    "transactions_income_total",
    "transactions_expense_total",
    "transactions_net",
    "compute_transactions_summary",
]
