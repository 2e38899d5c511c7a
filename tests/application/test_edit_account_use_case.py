"""Tests for the EditAccountUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from src.application.use_cases.edit_account import (
    EditAccountRequest,
    EditAccountUseCase,
)
from src.domain.errors import (
    AccountNotFoundError,
    CashAccountExistsError,
    DuplicateAccountNameError,
    MissingRequiredFieldError,
)
from src.domain.models import AccountCategory, AccountType
from src.infrastructure.memory_repositories import InMemoryAccountsRepository


def _request(account, **overrides) -> EditAccountRequest:
    values = {
        "account_id": account.id,
        "name": account.name,
        "account_type": account.account_type,
        "category": account.effective_category,
        "balance": str(account.balance),
    }
    values.update(overrides)
    return EditAccountRequest(**values)


def test_execute_updates_fields_and_timestamp(make_account) -> None:
    account = make_account("Savings", "100", AccountCategory.SAVINGS)
    repository = InMemoryAccountsRepository([account])
    use_case = EditAccountUseCase(repository=repository, logger=MagicMock())

    updated = use_case.execute(
        _request(account, name=" Rainy Day ", balance="$2,000")
    )

    assert updated.id == account.id
    assert updated.name == "Rainy Day"
    assert updated.balance == Decimal("2000")
    assert updated.created_at == account.created_at
    assert updated.updated_at > account.updated_at
    assert repository.get_account(account.id) == updated


def test_execute_without_changes_skips_write(make_account) -> None:
    """Submitting the stored values returns the account untouched."""
    account = make_account("Savings", "100.00", AccountCategory.SAVINGS)
    repository = MagicMock()
    repository.get_account.return_value = account
    use_case = EditAccountUseCase(repository=repository, logger=MagicMock())

    result = use_case.execute(_request(account, balance="100"))

    assert result is account
    repository.update_account.assert_not_called()


def test_execute_keeps_stored_credit_limit_and_icon(make_account) -> None:
    card = make_account(
        "Card",
        "-100",
        AccountCategory.CREDIT_CARD,
        credit_limit=Decimal("5000"),
        icon="creditcard.fill",
    )
    repository = InMemoryAccountsRepository([card])
    use_case = EditAccountUseCase(repository=repository, logger=MagicMock())

    updated = use_case.execute(_request(card, balance="-250"))

    assert updated.credit_limit == Decimal("5000")
    assert updated.icon == "creditcard.fill"


def test_execute_allows_case_change_of_own_name(make_account) -> None:
    account = make_account("Savings", "100", AccountCategory.SAVINGS)
    repository = InMemoryAccountsRepository([account])
    use_case = EditAccountUseCase(repository=repository, logger=MagicMock())

    updated = use_case.execute(_request(account, name="SAVINGS"))

    assert updated.name == "SAVINGS"


def test_execute_rejects_name_of_another_account(make_account) -> None:
    first = make_account("Checking", "10")
    second = make_account("Savings", "10", AccountCategory.SAVINGS)
    repository = InMemoryAccountsRepository([first, second])
    use_case = EditAccountUseCase(repository=repository, logger=MagicMock())

    with pytest.raises(DuplicateAccountNameError):
        use_case.execute(_request(second, name="checking"))

    assert repository.get_account(second.id) == second


def test_execute_rejects_moving_to_taken_cash_type(make_account) -> None:
    wallet = make_account(
        "Wallet", "20", AccountCategory.CASH_IN_HAND, AccountType.CASH
    )
    checking = make_account("Checking", "10")
    repository = InMemoryAccountsRepository([wallet, checking])
    use_case = EditAccountUseCase(repository=repository, logger=MagicMock())

    with pytest.raises(CashAccountExistsError):
        use_case.execute(_request(checking, account_type=AccountType.CASH))

    updated = use_case.execute(_request(wallet, balance="25"))
    assert updated.balance == Decimal("25")


def test_execute_raises_for_unknown_account(make_account) -> None:
    account = make_account("Ghost", "1")
    use_case = EditAccountUseCase(
        repository=InMemoryAccountsRepository(), logger=MagicMock()
    )

    with pytest.raises(AccountNotFoundError):
        use_case.execute(_request(account, account_id=uuid4()))


@pytest.mark.parametrize(
    ("overrides", "field"),
    [({"name": ""}, "Account Name"), ({"balance": ""}, "Balance")],
)
def test_execute_requires_name_and_balance(make_account, overrides, field) -> None:
    account = make_account("Checking", "1")
    use_case = EditAccountUseCase(
        repository=InMemoryAccountsRepository([account]), logger=MagicMock()
    )

    with pytest.raises(MissingRequiredFieldError) as excinfo:
        use_case.execute(_request(account, **overrides))

    assert excinfo.value.field == field
