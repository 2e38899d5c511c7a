"""Sample accounts used to seed an empty store for demos."""

from decimal import Decimal

from src.application.use_cases.create_account import CreateAccountRequest
from src.domain.models.accounts import AccountCategory, AccountType

SAMPLE_ACCOUNT_REQUESTS = (
    CreateAccountRequest(
        "Bank of America",
        AccountType.PERSONAL,
        AccountCategory.CHECKING,
        Decimal("1500.00"),
    ),
    CreateAccountRequest(
        "BOFA Savings",
        AccountType.PERSONAL,
        AccountCategory.SAVINGS,
        Decimal("3200.00"),
    ),
    CreateAccountRequest(
        "CapitalOne Savor",
        AccountType.PERSONAL,
        AccountCategory.CREDIT_CARD,
        Decimal("-3258.74"),
        credit_limit=Decimal("5000.00"),
    ),
    CreateAccountRequest(
        "Business Checking",
        AccountType.BUSINESS,
        AccountCategory.CHECKING,
        Decimal("5000.00"),
    ),
    CreateAccountRequest(
        "Business Savings",
        AccountType.BUSINESS,
        AccountCategory.SAVINGS,
        Decimal("10000.00"),
    ),
    CreateAccountRequest(
        "Business Credit Card",
        AccountType.BUSINESS,
        AccountCategory.CREDIT_CARD,
        Decimal("-2500.00"),
        credit_limit=Decimal("10000.00"),
    ),
    CreateAccountRequest(
        "Investment Property",
        AccountType.PERSONAL,
        AccountCategory.REAL_ESTATE,
        Decimal("250000.00"),
    ),
    CreateAccountRequest(
        "Vehicle",
        AccountType.PERSONAL,
        AccountCategory.VEHICLE,
        Decimal("35000.00"),
    ),
    CreateAccountRequest(
        "Mortgage",
        AccountType.PERSONAL,
        AccountCategory.MORTGAGE,
        Decimal("-200000.00"),
    ),
    CreateAccountRequest(
        "Car Loan",
        AccountType.PERSONAL,
        AccountCategory.AUTO_LOAN,
        Decimal("-25000.00"),
    ),
)


__all__ = ["SAMPLE_ACCOUNT_REQUESTS"]
