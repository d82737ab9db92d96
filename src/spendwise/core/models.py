#!/usr/bin/env python3
"""
Core Data Models for Spendwise

Entities owned by a user account (transactions, subscriptions, budgets) and
the parsing that turns raw store rows into them. Malformed rows raise
InvalidInput from from_dict(); the parse_* batch helpers skip them instead so a
single bad record never blanks an aggregate.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from .dates import FinancialDate
from .errors import InvalidInput
from .money import Money

logger = logging.getLogger(__name__)


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class BillingCycle(str, Enum):
    """Billing cycle of a subscription (informational only)."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


def _parse_enum(enum_cls: type[Enum], value: Any, field: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidInput(f"{field} must be one of {allowed}, got {value!r}", field=field) from e


def _require_text(data: dict[str, Any], field: str) -> str:
    value = data.get(field)
    if value is None or not str(value).strip():
        raise InvalidInput(f"{field} is required", field=field)
    return str(value)


@dataclass(frozen=True)
class Transaction:
    """
    A single income or expense event.

    Immutable once created; the only lifecycle operation is deletion.
    subscription_ref is a non-owning back-reference to the subscription that
    produced it, if any.
    """

    id: str
    date: FinancialDate
    category: str
    amount: Money
    type: TransactionType
    subcategory: str = ""
    description: str | None = None
    subscription_ref: str | None = None

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @classmethod
    def create(
        cls,
        date: Any,
        category: str,
        amount: Any,
        type: TransactionType | str,
        subcategory: str = "",
        description: str | None = None,
        subscription_ref: str | None = None,
        id: str = "",
    ) -> "Transaction":
        """
        Validate user-supplied values and build a transaction.

        The id may be left empty; the store assigns one on insertion.

        Raises:
            InvalidInput: On a malformed date, negative/non-numeric amount,
                unknown type, or blank category
        """
        if not category or not str(category).strip():
            raise InvalidInput("category is required", field="category")
        return cls(
            id=id,
            date=FinancialDate.coerce(date),
            category=category,
            subcategory=subcategory or "",
            amount=Money.parse(amount),
            type=_parse_enum(TransactionType, type, "type"),
            description=description or None,
            subscription_ref=subscription_ref or None,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        """Build a transaction from a store row."""
        return cls.create(
            id=_require_text(data, "id"),
            date=data.get("date"),
            category=data.get("category", ""),
            subcategory=data.get("subcategory") or "",
            amount=data.get("amount"),
            type=data.get("type", ""),
            description=data.get("description"),
            subscription_ref=data.get("subscription_id"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a store row (amount as a decimal string)."""
        return {
            "id": self.id,
            "date": self.date.to_iso_string(),
            "category": self.category,
            "subcategory": self.subcategory,
            "amount": str(self.amount.to_decimal()),
            "type": self.type.value,
            "description": self.description,
            "subscription_id": self.subscription_ref,
        }

    def with_id(self, new_id: str) -> "Transaction":
        return replace(self, id=new_id)


@dataclass
class Subscription:
    """
    A recurring subscription tracked against a start and end date.

    is_active is the only mutable field in normal operation: it flips to False
    when the subscription is evaluated after its end date, or on a manual toggle.
    """

    id: str
    category: str
    external_subscription_id: str
    amount: Money
    billing_cycle: BillingCycle
    start_date: FinancialDate
    end_date: FinancialDate
    is_active: bool = True

    @classmethod
    def create(
        cls,
        category: str,
        external_subscription_id: str,
        amount: Any,
        billing_cycle: BillingCycle | str,
        start_date: Any,
        end_date: Any,
        is_active: bool = True,
        id: str = "",
    ) -> "Subscription":
        """
        Validate user-supplied values and build a subscription.

        Raises:
            InvalidInput: On malformed dates, end date before start date,
                negative/non-numeric amount, or unknown billing cycle
        """
        if not category or not str(category).strip():
            raise InvalidInput("category is required", field="category")
        start = FinancialDate.coerce(start_date, field="start_date")
        end = FinancialDate.coerce(end_date, field="end_date")
        if end < start:
            raise InvalidInput(f"end_date {end} is before start_date {start}", field="end_date")
        return cls(
            id=id,
            category=category,
            external_subscription_id=external_subscription_id or "",
            amount=Money.parse(amount),
            billing_cycle=_parse_enum(BillingCycle, billing_cycle, "billing_cycle"),
            start_date=start,
            end_date=end,
            is_active=bool(is_active),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subscription":
        """
        Build a subscription from a store row.

        Rows are not re-checked for end_date >= start_date: data written before
        that rule existed must still load and expire normally.
        """
        return cls(
            id=_require_text(data, "id"),
            category=data.get("category") or "",
            external_subscription_id=data.get("subscription_id") or "",
            amount=Money.parse(data.get("amount")),
            billing_cycle=_parse_enum(BillingCycle, data.get("billing_cycle", ""), "billing_cycle"),
            start_date=FinancialDate.coerce(data.get("start_date"), field="start_date"),
            end_date=FinancialDate.coerce(data.get("end_date"), field="end_date"),
            is_active=bool(data.get("is_active", True)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category,
            "subscription_id": self.external_subscription_id,
            "amount": str(self.amount.to_decimal()),
            "billing_cycle": self.billing_cycle.value,
            "start_date": self.start_date.to_iso_string(),
            "end_date": self.end_date.to_iso_string(),
            "is_active": self.is_active,
        }

    @property
    def display_name(self) -> str:
        """Label used in alert messages, e.g. "NET-123 (Hostinger)"."""
        if self.external_subscription_id:
            return f"{self.external_subscription_id} ({self.category})"
        return self.category


@dataclass(frozen=True)
class Budget:
    """Monthly spend ceiling for one user; zero means no budget is set."""

    user_id: str
    year_month: str
    amount: Money

    @property
    def is_set(self) -> bool:
        return self.amount.cents > 0


def parse_transactions(rows: Iterable[dict[str, Any]]) -> list[Transaction]:
    """Parse store rows, skipping (and logging) any row that fails validation."""
    transactions = []
    for row in rows:
        try:
            transactions.append(Transaction.from_dict(row))
        except InvalidInput as e:
            logger.warning("Skipping transaction %s: %s", row.get("id", "unknown"), e)
    return transactions


def parse_subscriptions(rows: Iterable[dict[str, Any]]) -> list[Subscription]:
    """Parse store rows, skipping (and logging) any row that fails validation."""
    subscriptions = []
    for row in rows:
        try:
            subscriptions.append(Subscription.from_dict(row))
        except InvalidInput as e:
            logger.warning("Skipping subscription %s: %s", row.get("id", "unknown"), e)
    return subscriptions
