"""Tests for form input normalization."""

from decimal import Decimal

import pytest

from src.domain.errors import InvalidAmountError
from src.domain.models import AccountCategory
from src.domain.services.normalization import (
    MAX_ACCOUNT_NAME_LENGTH,
    default_account_name,
    normalize_account_name,
    parse_amount,
)


def test_normalize_account_name_trims_and_drops_nul():
    assert normalize_account_name("  Main\0 Checking \n") == "Main Checking"


def test_normalize_account_name_caps_length():
    name = normalize_account_name("x" * 80)

    assert len(name) == MAX_ACCOUNT_NAME_LENGTH


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_normalize_account_name_blank(raw):
    assert normalize_account_name(raw) == ""


def test_default_account_name_uses_category():
    assert default_account_name(AccountCategory.AUTO_LOAN) == "Auto Loan Account"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("$1,250.50", Decimal("1250.50")),
        ("-3258.74", Decimal("-3258.74")),
        (" 42 ", Decimal("42")),
        (Decimal("7.5"), Decimal("7.5")),
        (3, Decimal("3")),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["12abc", "", "NaN", "Infinity", True])
def test_parse_amount_rejects_invalid_values(raw):
    with pytest.raises(InvalidAmountError) as excinfo:
        parse_amount(raw)

    assert excinfo.value.recovery_suggestion == "Please enter a valid amount"
