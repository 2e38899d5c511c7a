"""Use case to edit a stored account."""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.use_cases.create_account import is_blank
from src.domain.errors import AccountNotFoundError, MissingRequiredFieldError
from src.domain.models.accounts import Account, AccountCategory, AccountType
from src.domain.services.normalization import (
    normalize_account_name,
    parse_amount,
)
from src.domain.services.validation import (
    validate_cash_singleton,
    validate_unique_name,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class EditAccountRequest:
    """Raw form input for an account edit.

    ``icon`` and ``credit_limit`` keep their stored values when None.
    """

    account_id: UUID
    name: str
    account_type: AccountType
    category: AccountCategory
    balance: str | Decimal
    icon: str | None = None
    credit_limit: str | Decimal | None = None


class EditAccountUseCase:
    """Validate an edit and update the stored account in place."""

    def __init__(
        self,
        repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, request: EditAccountRequest) -> Account:
        """Apply the edit.

        Args:
            request: Raw form input.

        Returns:
            Account: The stored account after the edit. When nothing
            changed, the stored account is returned untouched.

        Raises:
            AccountNotFoundError: If the account does not exist.
            MissingRequiredFieldError: If the name or balance is empty.
            InvalidAmountError: If an amount cannot be parsed.
            CashAccountExistsError: If the edit creates a second Cash account.
            DuplicateAccountNameError: If the name is taken in the type.
        """
        name = normalize_account_name(request.name)
        if not name:
            raise MissingRequiredFieldError("Account Name")
        if is_blank(request.balance):
            raise MissingRequiredFieldError("Balance")
        balance = parse_amount(request.balance)

        current = self._repository.get_account(request.account_id)
        if current is None:
            raise AccountNotFoundError(request.account_id)
        credit_limit = (
            current.credit_limit
            if request.credit_limit is None
            else parse_amount(request.credit_limit)
        )
        icon = current.icon if request.icon is None else request.icon

        if self._is_unchanged(current, name, request, balance, credit_limit, icon):
            self._logger.info(f"Account edit without changes: id={current.id}")
            return current

        accounts = self._repository.list_accounts()
        validate_cash_singleton(request.account_type, accounts, current.id)
        validate_unique_name(name, request.account_type, accounts, current.id)

        updated = replace(
            current,
            name=name,
            account_type=request.account_type,
            category=request.category,
            balance=balance,
            credit_limit=credit_limit,
            icon=icon,
            updated_at=datetime.now(timezone.utc),
        )
        self._repository.update_account(updated)
        self._logger.info(f"Account updated: id={updated.id}")
        return updated

    @staticmethod
    def _is_unchanged(
        current: Account,
        name: str,
        request: EditAccountRequest,
        balance: Decimal,
        credit_limit: Decimal,
        icon: str | None,
    ) -> bool:
        return (
            current.name == name
            and current.account_type is request.account_type
            and current.effective_category is request.category
            and current.balance == balance
            and current.credit_limit == credit_limit
            and current.icon == icon
        )


__all__ = ["EditAccountRequest", "EditAccountUseCase"]
