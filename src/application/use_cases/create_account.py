"""Use case to create a user account."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.domain.errors import MissingRequiredFieldError
from src.domain.models.accounts import (
    LOAN_CATEGORIES,
    Account,
    AccountCategory,
    AccountType,
)
from src.domain.services.normalization import (
    default_account_name,
    normalize_account_name,
    parse_amount,
)
from src.domain.services.validation import (
    validate_cash_singleton,
    validate_unique_name,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class CreateAccountRequest:
    """Raw form input for a new account.

    Attributes:
        name: Account name as typed.
        account_type: Owner of the account.
        category: Economic category.
        initial_balance: Balance as typed (``"$1,200.00"``) or a Decimal.
        credit_limit: Credit limit for credit cards.
        icon: Optional icon token overriding the category default.
    """

    name: str
    account_type: AccountType
    category: AccountCategory = AccountCategory.CHECKING
    initial_balance: str | Decimal = ""
    credit_limit: str | Decimal = "0"
    icon: str | None = None


def is_blank(value) -> bool:
    """Return True for missing or whitespace-only form values."""
    return value is None or (isinstance(value, str) and not value.strip())


class CreateAccountUseCase:
    """Validate form input and store a new account."""

    def __init__(
        self,
        repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port owning the account collection.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, request: CreateAccountRequest) -> Account:
        """Create the account.

        Banking and asset categories need a name and an initial balance.
        Loan categories may omit both: the name defaults to
        ``"<Category> Account"`` and the balance to zero.

        Args:
            request: Raw form input.

        Returns:
            Account: The stored account.

        Raises:
            MissingRequiredFieldError: If a required field is empty.
            InvalidAmountError: If an amount cannot be parsed.
            CashAccountExistsError: If a Cash account already exists.
            DuplicateAccountNameError: If the name is taken in the type.
        """
        name = normalize_account_name(request.name)
        requires_details = request.category not in LOAN_CATEGORIES
        if requires_details and not name:
            raise MissingRequiredFieldError("Account Name")
        if requires_details and is_blank(request.initial_balance):
            raise MissingRequiredFieldError("Initial Balance")

        balance = (
            Decimal("0")
            if is_blank(request.initial_balance)
            else parse_amount(request.initial_balance)
        )
        credit_limit = (
            Decimal("0")
            if is_blank(request.credit_limit)
            else parse_amount(request.credit_limit)
        )
        name = name or default_account_name(request.category)

        accounts = self._repository.list_accounts()
        validate_cash_singleton(request.account_type, accounts)
        validate_unique_name(name, request.account_type, accounts)

        account = Account(
            name=name,
            balance=balance,
            account_type=request.account_type,
            category=request.category,
            icon=request.icon,
            credit_limit=credit_limit,
        )
        self._repository.add_account(account)
        self._logger.info(
            f"Account created: id={account.id} type={account.account_type.value} "
            f"category={account.effective_category.value}"
        )
        return account


__all__ = ["CreateAccountRequest", "CreateAccountUseCase", "is_blank"]
