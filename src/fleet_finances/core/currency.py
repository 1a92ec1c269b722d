#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All fleet money handling goes through integer cents to avoid floating-point drift.

Currency Systems:
- Backend and form input: loose strings or numbers ("100.00", 50.5, "AED 12")
- Internal calculations use cents: 100 cents = 1.00
- Display uses labelled strings: "AED 12.34"

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Reject negative and unparsable amounts instead of coercing them to zero
- Keep at most two fractional digits (extra digits are truncated)
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

MAX_INTEGER_DIGITS = 5

AmountInput = Union[str, int, float, Decimal]


class AmountParseError(ValueError):
    """Raised when an amount cannot be parsed into a non-negative value."""

    def __init__(self, raw: object, reason: str):
        super().__init__(f"Invalid amount {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


def _amount_text(raw: AmountInput) -> str:
    if isinstance(raw, bool):
        raise AmountParseError(raw, "boolean is not an amount")
    if isinstance(raw, float):
        if raw != raw or raw in (float("inf"), float("-inf")):
            raise AmountParseError(raw, "not a finite number")
        return format(Decimal(repr(raw)), "f")
    if isinstance(raw, Decimal):
        if not raw.is_finite():
            raise AmountParseError(raw, "not a finite number")
        return format(raw, "f")
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, str):
        return raw
    raise AmountParseError(raw, f"unsupported type {type(raw).__name__}")


def parse_amount_to_cents(raw: AmountInput, max_integer_digits: int | None = MAX_INTEGER_DIGITS) -> int:
    """
    Parse a loose amount into non-negative integer cents.

    Mirrors the amount field sanitising of the driver forms: characters
    outside [0-9.] are dropped, only the first decimal point is honoured,
    the integer part is cut to max_integer_digits digits and fractional
    digits beyond two are truncated.

    Args:
        raw: Amount string or number
        max_integer_digits: Integer digit cap of the entry forms; None keeps
            every digit (amounts already stored by the backend)

    Returns:
        Amount in cents

    Raises:
        AmountParseError: If the input is negative, empty or has no digits

    Examples:
        parse_amount_to_cents("100.00") -> 10000
        parse_amount_to_cents("AED 50.5") -> 5050
        parse_amount_to_cents("1234567") -> 1234500
        parse_amount_to_cents("1234567", max_integer_digits=None) -> 123456700
        parse_amount_to_cents("1.2.3") -> 120
    """
    text = _amount_text(raw).strip()

    if "-" in text or text.startswith("("):
        raise AmountParseError(raw, "negative amounts are not allowed")

    numeric = "".join(ch for ch in text if ch.isdigit() or ch == ".")
    if not numeric:
        raise AmountParseError(raw, "no digits found")

    parts = numeric.split(".")
    integer_part = parts[0] if max_integer_digits is None else parts[0][:max_integer_digits]
    fraction_part = parts[1] if len(parts) > 1 else ""

    if not integer_part and not fraction_part:
        raise AmountParseError(raw, "no digits found")

    dollars = int(integer_part) if integer_part else 0
    cents = int(fraction_part.ljust(2, "0")[:2])
    return dollars * 100 + cents


def parse_amount(raw: AmountInput, max_integer_digits: int | None = MAX_INTEGER_DIGITS) -> Decimal:
    """
    Parse a loose amount into a Decimal with two fractional digits.

    Raises:
        AmountParseError: If the amount is invalid
    """
    return cents_to_decimal(parse_amount_to_cents(raw, max_integer_digits=max_integer_digits))


def try_parse_cents(
    raw: AmountInput | None, max_integer_digits: int | None = MAX_INTEGER_DIGITS
) -> int | None:
    """Parse to cents, returning None for missing or invalid input."""
    if raw is None:
        return None
    try:
        return parse_amount_to_cents(raw, max_integer_digits=max_integer_digits)
    except AmountParseError:
        return None


def is_valid_amount(raw: AmountInput | None, max_integer_digits: int | None = MAX_INTEGER_DIGITS) -> bool:
    """Check that an amount parses and is strictly positive."""
    cents = try_parse_cents(raw, max_integer_digits=max_integer_digits)
    return cents is not None and cents > 0


def cents_to_decimal(cents: int) -> Decimal:
    """Convert integer cents to a two-place Decimal."""
    return (Decimal(cents) / 100).quantize(Decimal("0.01"))


def cents_to_amount_str(cents: int) -> str:
    """
    Convert cents to an amount string using pure integer arithmetic.

    Example:
        cents_to_amount_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    units = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{units}.{remainder:02d}"
    return f"{units}.{remainder:02d}"


def format_cents(cents: int, currency: str = "AED") -> str:
    """Format cents with a currency label, e.g. "AED 45.99"."""
    return f"{currency} {cents_to_amount_str(cents)}"


def apply_rate(cents: int, rate: Decimal) -> int:
    """
    Multiply cents by a decimal rate, rounding half up to the nearest cent.

    Example:
        apply_rate(10050, Decimal("0.3")) -> 3015
    """
    product = Decimal(cents) * rate
    return int(product.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
