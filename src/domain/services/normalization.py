"""Domain normalization helpers."""

import re
from decimal import Decimal, InvalidOperation

from src.domain.errors import InvalidAmountError

MAX_ACCOUNT_NAME_LENGTH = 50

_AMOUNT_NOISE = re.compile(r"[$,\s]")


def normalize_account_name(name: str | None) -> str:
    """Normalize an account name typed by the user.

    Surrounding whitespace is trimmed, NUL characters are dropped and the
    result is capped at ``MAX_ACCOUNT_NAME_LENGTH`` characters. Inner
    spaces are preserved.

    Args:
        name: Raw name value from a form.

    Returns:
        str: Normalized name, possibly empty.
    """
    if not name:
        return ""
    cleaned = name.replace("\0", "").strip()
    return cleaned[:MAX_ACCOUNT_NAME_LENGTH]


def default_account_name(category) -> str:
    """Return the placeholder name used when a loan is saved unnamed."""
    return f"{category.value} Account"


def parse_amount(raw) -> Decimal:
    """Parse user-entered amounts such as ``"$1,250.50"``.

    Args:
        raw: Text typed by the user, or an already numeric value.

    Returns:
        Decimal: Parsed finite amount.

    Raises:
        InvalidAmountError: If the value is not a finite decimal.
    """
    if isinstance(raw, (Decimal, int)) and not isinstance(raw, bool):
        amount = Decimal(raw)
    else:
        cleaned = _AMOUNT_NOISE.sub("", str(raw))
        try:
            amount = Decimal(cleaned)
        except InvalidOperation as exc:
            raise InvalidAmountError(raw) from exc
    if not amount.is_finite():
        raise InvalidAmountError(raw)
    return amount


__all__ = [
    "MAX_ACCOUNT_NAME_LENGTH",
    "normalize_account_name",
    "default_account_name",
    "parse_amount",
]
