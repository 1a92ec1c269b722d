#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors when summing many small driver records.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import (
    AmountInput,
    cents_to_amount_str,
    cents_to_decimal,
    parse_amount_to_cents,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Examples:
        >>> fare = Money.from_amount("100.00")
        >>> fare.to_cents()
        10000
        >>> str(fare + Money.from_cents(5050))
        '150.50'
        >>> (fare + Money.from_cents(5050)).to_decimal()
        Decimal('150.50')
    """

    cents: int

    @classmethod
    def zero(cls) -> "Money":
        return cls(cents=0)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_amount(cls, amount: AmountInput) -> "Money":
        """
        Parse from a loose amount string or number.

        Raises:
            AmountParseError: If the amount is negative or unparsable
        """
        return cls(cents=parse_amount_to_cents(amount))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get value as a two-place Decimal."""
        return cents_to_decimal(self.cents)

    def abs(self) -> "Money":
        return Money(cents=abs(self.cents))

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __bool__(self) -> bool:
        return self.cents != 0

    def __lt__(self, other: "Money") -> bool:
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as plain amount string (no currency label)."""
        return cents_to_amount_str(self.cents)

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
