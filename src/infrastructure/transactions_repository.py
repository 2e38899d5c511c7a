"""SQLAlchemy-backed repository for recorded transactions."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models.transactions import Transaction, TransactionType
from src.utils.decimal_utils import coerce_decimal

_CREATE_TRANSACTIONS_TABLE = """
CREATE TABLE IF NOT EXISTS transactions (
    id VARCHAR(36) PRIMARY KEY,
    title VARCHAR(120) NOT NULL,
    subtitle VARCHAR(120) NOT NULL,
    amount VARCHAR(64) NOT NULL,
    transaction_type VARCHAR(16) NOT NULL,
    icon VARCHAR(64) NOT NULL,
    posted_at VARCHAR(40) NOT NULL
)
"""


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository backed by SQLAlchemy for transactions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Create the transactions table when missing."""
        engine = self._db_port.get_accounts_engine()
        with engine.begin() as conn:
            conn.execute(text(_CREATE_TRANSACTIONS_TABLE))

    def list_transactions(self) -> list[Transaction]:
        query = text(
            """
            SELECT id, title, subtitle, amount, transaction_type, icon,
                   posted_at
            FROM transactions
            ORDER BY posted_at DESC
            """
        )
        engine = self._db_port.get_accounts_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            Transaction(
                id=UUID(row.id),
                title=row.title,
                subtitle=row.subtitle,
                amount=coerce_decimal(row.amount),
                transaction_type=TransactionType(row.transaction_type),
                icon=row.icon,
                date=datetime.fromisoformat(row.posted_at),
            )
            for row in rows
        ]

    def add_transaction(self, transaction: Transaction) -> None:
        query = text(
            """
            INSERT INTO transactions (
                id, title, subtitle, amount, transaction_type, icon, posted_at
            ) VALUES (
                :id, :title, :subtitle, :amount, :transaction_type, :icon,
                :posted_at
            )
            """
        )
        engine = self._db_port.get_accounts_engine()
        with engine.begin() as conn:
            conn.execute(
                query,
                {
                    "id": str(transaction.id),
                    "title": transaction.title,
                    "subtitle": transaction.subtitle,
                    "amount": str(transaction.amount),
                    "transaction_type": transaction.transaction_type.value,
                    "icon": transaction.icon,
                    "posted_at": transaction.date.isoformat(),
                },
            )


__all__ = ["SqlAlchemyTransactionsRepository"]
