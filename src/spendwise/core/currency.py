#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All amounts are held as integer minor units (paise/cents, 100 per major unit).
Parsing goes through Decimal so repeated summation never drifts.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Reject negative or non-numeric input instead of coercing it to zero
- Round half-up to two decimal places on the way in
- Formatting is presentation only; it never feeds back into arithmetic
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from .errors import InvalidInput

DEFAULT_CURRENCY_SYMBOL = "₹"

_TWO_PLACES = Decimal("0.01")
_STRIP_CHARS = ("₹", "$", ",", " ")


def to_decimal(value: Any, field: str = "amount") -> Decimal:
    """
    Convert raw input to a Decimal rounded to two places.

    Accepts Decimal, int, float (via its shortest repr), and strings such as
    "299", "1,234.50" or "₹99.9".

    Raises:
        InvalidInput: If the value is missing, boolean, non-numeric, not finite,
            or too large to round to two places
    """
    if value is None or isinstance(value, bool):
        raise InvalidInput(f"{field} is required and must be numeric, got {value!r}", field=field)

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    else:
        clean = str(value)
        for char in _STRIP_CHARS:
            clean = clean.replace(char, "")
        if not clean:
            raise InvalidInput(f"{field} is empty", field=field)
        try:
            amount = Decimal(clean)
        except InvalidOperation as e:
            raise InvalidInput(f"{field} is not a number: {value!r}", field=field) from e

    if not amount.is_finite():
        raise InvalidInput(f"{field} must be finite, got {value!r}", field=field)

    try:
        return amount.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise InvalidInput(f"{field} is out of range: {value!r}", field=field) from e


def parse_amount_to_cents(value: Any, field: str = "amount", allow_zero: bool = True) -> int:
    """
    Parse a non-negative amount to integer cents.

    Args:
        value: Raw amount (string, int, float, or Decimal)
        field: Field name used in error messages
        allow_zero: If False, zero is rejected as well as negatives

    Returns:
        Amount in cents

    Raises:
        InvalidInput: If the amount is non-numeric, negative, or zero when not allowed

    Examples:
        parse_amount_to_cents("299") -> 29900
        parse_amount_to_cents("₹1,234.5") -> 123450
        parse_amount_to_cents("-5") -> InvalidInput
    """
    amount = to_decimal(value, field=field)
    if amount < 0:
        raise InvalidInput(f"{field} must not be negative, got {amount}", field=field)
    if not allow_zero and amount == 0:
        raise InvalidInput(f"{field} must be greater than zero", field=field)
    return int(amount * 100)


def cents_to_decimal(cents: int) -> Decimal:
    """Convert cents to a two-place Decimal."""
    return (Decimal(cents) / 100).quantize(_TWO_PLACES)


def cents_to_str(cents: int) -> str:
    """
    Convert cents to a grouped decimal string using integer arithmetic.

    Example:
        cents_to_str(123456) -> "1,234.56"
        cents_to_str(-4599) -> "-45.99"
    """
    sign = "-" if cents < 0 else ""
    major, minor = divmod(abs(int(cents)), 100)
    return f"{sign}{major:,}.{minor:02d}"


def format_cents(cents: int, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format cents for display, e.g. "₹1,234.56" or "-₹45.99"."""
    text = cents_to_str(cents)
    if text.startswith("-"):
        return f"-{symbol}{text[1:]}"
    return f"{symbol}{text}"


def percent_of(part_cents: int, whole_cents: int) -> float:
    """Return part as a percentage of whole, rounded to one place (0.0 when whole is 0)."""
    if whole_cents == 0:
        return 0.0
    return round(part_cents * 100 / whole_cents, 1)
