"""Shared fixtures for the test suite."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from src.domain.models import Account, AccountCategory, AccountType
from src.infrastructure.logging import logger as logger_module

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _logs_in_tmp_path(tmp_path, monkeypatch):
    """Keep log files written by real loggers out of the project tree."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)


@pytest.fixture
def make_account():
    """Return a factory building accounts with increasing created_at."""
    counter = {"value": 0}

    def _make(
        name: str,
        balance,
        category: AccountCategory | None = AccountCategory.CHECKING,
        account_type: AccountType = AccountType.PERSONAL,
        **kwargs,
    ) -> Account:
        counter["value"] += 1
        stamp = _EPOCH + timedelta(minutes=counter["value"])
        kwargs.setdefault("created_at", stamp)
        kwargs.setdefault("updated_at", stamp)
        return Account(
            name=name,
            balance=Decimal(str(balance)),
            account_type=account_type,
            category=category,
            **kwargs,
        )

    return _make


@pytest.fixture
def sample_accounts(make_account) -> list[Account]:
    """Ten accounts covering banking, holdings and loans."""
    personal = AccountType.PERSONAL
    business = AccountType.BUSINESS
    return [
        make_account("Bank of America", "1500.00", AccountCategory.CHECKING),
        make_account("BOFA Savings", "3200.00", AccountCategory.SAVINGS),
        make_account(
            "CapitalOne Savor",
            "-3258.74",
            AccountCategory.CREDIT_CARD,
            credit_limit=Decimal("5000"),
        ),
        make_account(
            "Business Checking", "5000.00", AccountCategory.CHECKING, business
        ),
        make_account(
            "Business Savings", "10000.00", AccountCategory.SAVINGS, business
        ),
        make_account(
            "Business Credit Card",
            "-2500.00",
            AccountCategory.CREDIT_CARD,
            business,
        ),
        make_account(
            "Investment Property", "250000.00", AccountCategory.REAL_ESTATE, personal
        ),
        make_account("Vehicle", "35000.00", AccountCategory.VEHICLE, personal),
        make_account("Mortgage", "-200000.00", AccountCategory.MORTGAGE, personal),
        make_account("Car Loan", "-25000.00", AccountCategory.AUTO_LOAN, personal),
    ]
