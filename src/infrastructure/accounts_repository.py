"""SQLAlchemy-backed repository for user accounts."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import text

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.accounts import Account, AccountCategory, AccountType
from src.utils.decimal_utils import coerce_decimal

_CREATE_ACCOUNTS_TABLE = """
CREATE TABLE IF NOT EXISTS accounts (
    id VARCHAR(36) PRIMARY KEY,
    name VARCHAR(50) NOT NULL,
    balance VARCHAR(64) NOT NULL,
    account_type VARCHAR(16) NOT NULL,
    category VARCHAR(32),
    icon VARCHAR(64),
    credit_limit VARCHAR(64) NOT NULL,
    created_at VARCHAR(40) NOT NULL,
    updated_at VARCHAR(40) NOT NULL
)
"""

_SELECT_COLUMNS = """
SELECT id, name, balance, account_type, category, icon, credit_limit,
       created_at, updated_at
FROM accounts
"""


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for user accounts.

    Amounts are stored as text so Decimal values round-trip exactly on
    every backend.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the accounts engine.
        """
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Create the accounts table when missing."""
        engine = self._db_port.get_accounts_engine()
        with engine.begin() as conn:
            conn.execute(text(_CREATE_ACCOUNTS_TABLE))

    def list_accounts(self) -> list[Account]:
        """Return stored accounts, oldest first."""
        query = text(_SELECT_COLUMNS + " ORDER BY created_at, name")
        engine = self._db_port.get_accounts_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_account(row) for row in rows]

    def get_account(self, account_id: UUID) -> Account | None:
        """Return the account with the given id, if stored."""
        query = text(_SELECT_COLUMNS + " WHERE id = :id")
        engine = self._db_port.get_accounts_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"id": str(account_id)}).first()
        return self._to_account(row) if row is not None else None

    def add_account(self, account: Account) -> None:
        """Insert a new account row."""
        query = text(
            """
            INSERT INTO accounts (
                id, name, balance, account_type, category, icon,
                credit_limit, created_at, updated_at
            ) VALUES (
                :id, :name, :balance, :account_type, :category, :icon,
                :credit_limit, :created_at, :updated_at
            )
            """
        )
        engine = self._db_port.get_accounts_engine()
        with engine.begin() as conn:
            conn.execute(query, self._to_params(account))

    def update_account(self, account: Account) -> None:
        """Overwrite the stored row sharing the account id."""
        query = text(
            """
            UPDATE accounts
            SET name = :name,
                balance = :balance,
                account_type = :account_type,
                category = :category,
                icon = :icon,
                credit_limit = :credit_limit,
                updated_at = :updated_at
            WHERE id = :id
            """
        )
        engine = self._db_port.get_accounts_engine()
        with engine.begin() as conn:
            conn.execute(query, self._to_params(account))

    def delete_account(self, account_id: UUID) -> bool:
        """Delete the account row and report whether it existed."""
        query = text("DELETE FROM accounts WHERE id = :id")
        engine = self._db_port.get_accounts_engine()
        with engine.begin() as conn:
            result = conn.execute(query, {"id": str(account_id)})
        return result.rowcount > 0

    @staticmethod
    def _to_params(account: Account) -> dict[str, str | None]:
        return {
            "id": str(account.id),
            "name": account.name,
            "balance": str(account.balance),
            "account_type": account.account_type.value,
            "category": account.category.value if account.category else None,
            "icon": account.icon,
            "credit_limit": str(account.credit_limit),
            "created_at": account.created_at.isoformat(),
            "updated_at": account.updated_at.isoformat(),
        }

    @staticmethod
    def _to_account(row) -> Account:
        return Account(
            id=UUID(row.id),
            name=row.name,
            balance=coerce_decimal(row.balance),
            account_type=AccountType(row.account_type),
            category=AccountCategory(row.category) if row.category else None,
            icon=row.icon,
            credit_limit=coerce_decimal(row.credit_limit),
            created_at=datetime.fromisoformat(row.created_at),
            updated_at=datetime.fromisoformat(row.updated_at),
        )


__all__ = ["SqlAlchemyAccountsRepository"]
