"""Domain models for recorded transactions.

Transactions are tracked next to accounts but carry no account reference.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class Transaction:
    """A single recorded money movement."""

    title: str
    amount: Decimal
    transaction_type: TransactionType
    subtitle: str = ""
    icon: str = ""
    date: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    id: UUID = field(default_factory=uuid4)

    @property
    def is_expense(self) -> bool:
        """Return True for expense transactions."""
        return self.transaction_type is TransactionType.EXPENSE


__all__ = ["Transaction", "TransactionType"]
