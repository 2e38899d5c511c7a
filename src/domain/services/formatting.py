"""Currency display helpers.

Rounding is ROUND_HALF_EVEN everywhere, e.g. ``2.345`` renders as
``$2.34`` and ``2.355`` as ``$2.36``. Rendering never raises: values that
cannot be shown fall back to a zero display string.
"""

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext

from src.utils.decimal_utils import coerce_decimal

ZERO_CURRENCY = "$0.00"
ZERO_TREND = "+0.0%"

_CENT = Decimal("0.01")
_TENTH = Decimal("0.1")
_UNIT = Decimal("1")

_COMPACT_BUCKETS = (
    (Decimal("1000000000"), "B"),
    (Decimal("1000000"), "M"),
    (Decimal("1000"), "k"),
)

_FORMAT_ERRORS = (InvalidOperation, ValueError, TypeError, OverflowError)


def _quantize(value: Decimal, exponent: Decimal) -> Decimal:
    if not value.is_finite():
        raise InvalidOperation(f"Cannot render non-finite amount {value}")
    with localcontext() as ctx:
        # Room for every integer digit plus the requested fraction digits.
        digits = value.adjusted() - exponent.as_tuple().exponent + 2
        ctx.prec = max(ctx.prec, digits)
        return value.quantize(exponent, rounding=ROUND_HALF_EVEN)


def format_currency(amount) -> str:
    """Render an amount as ``$1,234.56`` with two fraction digits.

    Args:
        amount: Decimal-compatible amount.

    Returns:
        str: Currency string, ``-$`` prefixed for negatives.
    """
    try:
        value = _quantize(coerce_decimal(amount), _CENT)
    except _FORMAT_ERRORS:
        return ZERO_CURRENCY
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _format_compact_value(value: Decimal) -> str:
    if value < 10:
        return f"{_quantize(value, _TENTH):.1f}"
    return f"{_quantize(value, _UNIT):.0f}"


def format_compact_currency(amount) -> str:
    """Render an amount with a k/M/B suffix above one thousand.

    Magnitudes below 1,000 use the full currency format. Larger ones are
    divided by the bucket size and shown with one decimal when the divided
    value is below 10, none otherwise. Bucket lower bounds are inclusive.

    Args:
        amount: Decimal-compatible amount.

    Returns:
        str: Compact currency string such as ``-$5.0k`` or ``$1.5M``.
    """
    try:
        value = coerce_decimal(amount)
        magnitude = abs(value)
        sign = "-" if value < 0 else ""
        for divisor, suffix in _COMPACT_BUCKETS:
            if magnitude >= divisor:
                return (
                    f"{sign}${_format_compact_value(magnitude / divisor)}{suffix}"
                )
    except _FORMAT_ERRORS:
        return ZERO_CURRENCY
    return format_currency(value)


def format_compact_trend(value) -> str:
    """Render a percentage change as ``+5.0%`` or ``-3.2%``."""
    try:
        value = coerce_decimal(value)
        rounded = _quantize(value, _TENTH)
    except _FORMAT_ERRORS:
        return ZERO_TREND
    if value >= 0:
        return f"+{abs(rounded):,.1f}%"
    return f"{rounded:,.1f}%"


__all__ = [
    "ZERO_CURRENCY",
    "ZERO_TREND",
    "format_currency",
    "format_compact_currency",
    "format_compact_trend",
]
