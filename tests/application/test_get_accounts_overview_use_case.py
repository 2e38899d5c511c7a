"""Tests for the GetAccountsOverviewUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_accounts_overview import (
    GetAccountsOverviewUseCase,
)
from src.domain.models import AccountCategory, AccountType
from src.infrastructure.memory_repositories import InMemoryAccountsRepository


def test_execute_builds_every_section(sample_accounts, make_account) -> None:
    wallet = make_account(
        "Wallet", "80", AccountCategory.CASH_IN_HAND, AccountType.CASH
    )
    repository = InMemoryAccountsRepository([*sample_accounts, wallet])
    use_case = GetAccountsOverviewUseCase(repository=repository, logger=MagicMock())

    overview = use_case.execute()

    assert overview.summary.net_worth == Decimal("74021.26")
    assert overview.personal_total == Decimal("1441.26")
    assert overview.business_total == Decimal("12500.00")
    assert overview.cash_total == Decimal("80")
    assert overview.cash_accounts == [wallet]
    assert set(overview.banking) == {AccountType.PERSONAL, AccountType.BUSINESS}
    business_sections = overview.banking[AccountType.BUSINESS].categories
    assert [s.amount for s in business_sections] == [
        Decimal("5000.00"),
        Decimal("10000.00"),
        Decimal("-2500.00"),
    ]
    assert overview.holdings[AccountType.PERSONAL].liabilities_total == Decimal(
        "225000.00"
    )
    assert overview.asset_allocation[0].category is AccountCategory.REAL_ESTATE


def test_execute_on_empty_store() -> None:
    logger = MagicMock()
    use_case = GetAccountsOverviewUseCase(
        repository=InMemoryAccountsRepository(), logger=logger
    )

    overview = use_case.execute()

    assert overview.summary.net_worth == Decimal("0")
    assert overview.banking[AccountType.PERSONAL].categories == []
    assert overview.cash_accounts == []
    assert overview.asset_allocation == []
    logger.info.assert_called_once_with("Accounts overview built for 0 accounts")
