#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point drift when thousands of small amounts are summed.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .currency import cents_to_decimal, format_cents, parse_amount_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Entity amounts (transactions, subscriptions, budgets) are never negative;
    derived values such as a bucket's net or a budget's remaining amount may be.

    Examples:
        >>> income = Money.parse("1000")
        >>> expense = Money.parse("400")
        >>> str(income - expense)
        '₹600.00'
        >>> Money.total([income, expense]).to_cents()
        140000
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def zero(cls) -> "Money":
        """The additive identity."""
        return cls(cents=0)

    @classmethod
    def parse(cls, value: Any, field: str = "amount", allow_zero: bool = True) -> "Money":
        """
        Parse a non-negative amount from user or store input.

        Raises:
            InvalidInput: If the value is non-numeric or negative
        """
        if isinstance(value, Money):
            value = value.to_decimal()
        return cls(cents=parse_amount_to_cents(value, field=field, allow_zero=allow_zero))

    @classmethod
    def total(cls, amounts: Iterable["Money"]) -> "Money":
        """Sum an iterable of Money values (zero when empty)."""
        return cls(cents=sum(m.cents for m in amounts))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get value as a two-place Decimal."""
        return cents_to_decimal(self.cents)

    def is_zero(self) -> bool:
        return self.cents == 0

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def format(self, symbol: str | None = None) -> str:
        """Format for display with an explicit currency symbol."""
        if symbol is None:
            return format_cents(self.cents)
        return format_cents(self.cents, symbol)

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        return Money(cents=self.cents * scalar)

    def __lt__(self, other: "Money") -> bool:
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as currency string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
