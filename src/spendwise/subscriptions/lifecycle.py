#!/usr/bin/env python3
"""
Subscription Lifecycle

Tracks each subscription's Active/Inactive state against "now" and turns new
subscriptions into linked expense transactions.

Evaluation is split in two phases:
- evaluate_subscriptions() is pure. It returns the updated subscriptions, the
  state changes to persist, and the alerts to raise, in input order.
- apply_changes() persists the state changes through the store.

State rules per evaluation pass:
- Active and end date strictly before today -> Inactive, one "expired" alert.
- Active and end date within today..today+warning_days -> "expiring_soon"
  alert with days_left, state unchanged.
- Inactive -> nothing, so re-running a pass over settled data raises no alerts.

Manual toggles are always permitted and never raise alerts.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from ..core.dates import FinancialDate
from ..core.datastore import FinanceStore
from ..core.errors import InvalidInput
from ..core.models import Subscription, Transaction, TransactionType

logger = logging.getLogger(__name__)

DEFAULT_EXPIRY_WARNING_DAYS = 3
LINKED_TRANSACTION_SUBCATEGORY = "Subscription"


class AlertKind(str, Enum):
    """Kinds of lifecycle alert."""

    EXPIRED = "expired"
    EXPIRING_SOON = "expiring_soon"


@dataclass(frozen=True)
class LifecycleAlert:
    """Signal raised when a subscription expires or enters its warning window."""

    subscription_id: str
    kind: AlertKind
    days_left: int | None = None
    message: str = ""


@dataclass(frozen=True)
class ActiveStateChange:
    """A pending write of a subscription's is_active flag."""

    subscription_id: str
    is_active: bool


@dataclass
class LifecycleEvaluation:
    """Result of one evaluation pass over a set of subscriptions."""

    subscriptions: list[Subscription] = field(default_factory=list)
    changes: list[ActiveStateChange] = field(default_factory=list)
    alerts: list[LifecycleAlert] = field(default_factory=list)

    @property
    def expired(self) -> list[LifecycleAlert]:
        return [a for a in self.alerts if a.kind == AlertKind.EXPIRED]

    @property
    def expiring_soon(self) -> list[LifecycleAlert]:
        return [a for a in self.alerts if a.kind == AlertKind.EXPIRING_SOON]


@dataclass(frozen=True)
class SubscriptionCreated:
    """A newly stored subscription and the expense transaction linked to it."""

    subscription: Subscription
    linked_transaction: Transaction


def _expired_message(subscription: Subscription) -> str:
    return f"Your subscription {subscription.display_name} has expired!"


def _expiring_message(subscription: Subscription, days_left: int) -> str:
    if days_left == 0:
        return f"Your subscription {subscription.display_name} expires today"
    unit = "day" if days_left == 1 else "days"
    return f"Your subscription {subscription.display_name} expires in {days_left} {unit}"


def evaluate_subscription(
    subscription: Subscription,
    today: FinancialDate,
    warning_days: int = DEFAULT_EXPIRY_WARNING_DAYS,
) -> tuple[Subscription, ActiveStateChange | None, LifecycleAlert | None]:
    """
    Evaluate one subscription against today.

    Returns:
        (possibly updated copy, state change or None, alert or None);
        the input subscription is never mutated
    """
    if not subscription.is_active:
        return subscription, None, None

    days_left = today.days_until(subscription.end_date)

    if days_left < 0:
        updated = replace(subscription, is_active=False)
        change = ActiveStateChange(subscription_id=subscription.id, is_active=False)
        alert = LifecycleAlert(
            subscription_id=subscription.id,
            kind=AlertKind.EXPIRED,
            message=_expired_message(subscription),
        )
        return updated, change, alert

    if days_left <= warning_days:
        alert = LifecycleAlert(
            subscription_id=subscription.id,
            kind=AlertKind.EXPIRING_SOON,
            days_left=days_left,
            message=_expiring_message(subscription, days_left),
        )
        return subscription, None, alert

    return subscription, None, None


def evaluate_subscriptions(
    subscriptions: Iterable[Subscription],
    now: Any,
    warning_days: int = DEFAULT_EXPIRY_WARNING_DAYS,
) -> LifecycleEvaluation:
    """
    Evaluate every subscription against now without touching the store.

    Args:
        subscriptions: A user's subscriptions
        now: Evaluation time (date, datetime, or ISO string); only the calendar
            date is used
        warning_days: Size of the expiring-soon window in days

    Returns:
        LifecycleEvaluation with updated subscriptions, changes, and alerts,
        each in input order
    """
    today = FinancialDate.coerce(now, field="now")
    evaluation = LifecycleEvaluation()

    for subscription in subscriptions:
        updated, change, alert = evaluate_subscription(subscription, today, warning_days)
        evaluation.subscriptions.append(updated)
        if change is not None:
            evaluation.changes.append(change)
        if alert is not None:
            evaluation.alerts.append(alert)

    logger.debug(
        "Evaluated %d subscriptions on %s: %d expired, %d expiring soon",
        len(evaluation.subscriptions),
        today,
        len(evaluation.expired),
        len(evaluation.expiring_soon),
    )
    return evaluation


def apply_changes(store: FinanceStore, changes: Sequence[ActiveStateChange]) -> int:
    """
    Persist state changes produced by evaluate_subscriptions().

    Returns:
        Number of changes written
    """
    for change in changes:
        store.set_subscription_active(change.subscription_id, change.is_active)
        logger.info(
            "Marked subscription %s %s", change.subscription_id, "active" if change.is_active else "inactive"
        )
    return len(changes)


def linked_transaction_for(subscription: Subscription, now: Any) -> Transaction:
    """Build the expense transaction that accompanies a newly created subscription."""
    label = subscription.external_subscription_id or subscription.category
    return Transaction(
        id="",
        date=FinancialDate.coerce(now, field="now"),
        category=subscription.category,
        subcategory=LINKED_TRANSACTION_SUBCATEGORY,
        amount=subscription.amount,
        type=TransactionType.EXPENSE,
        description=f"Subscription: {label} ({subscription.billing_cycle.value})",
        subscription_ref=subscription.id,
    )


def validate_subscription(subscription: Subscription) -> None:
    """
    Check a subscription before it is written.

    Raises:
        InvalidInput: On a blank category, negative amount, or end date before
            start date
    """
    if not subscription.category or not subscription.category.strip():
        raise InvalidInput("category is required", field="category")
    if subscription.amount.to_cents() < 0:
        raise InvalidInput(f"amount must not be negative, got {subscription.amount}", field="amount")
    if subscription.end_date < subscription.start_date:
        raise InvalidInput(
            f"end_date {subscription.end_date} is before start_date {subscription.start_date}",
            field="end_date",
        )


class SubscriptionLifecycle:
    """
    Store-backed subscription operations for one store collaborator.

    The sweep is pull-based: it runs whenever a caller fetches the list, so a
    subscription nobody fetches can stay active past its end date until the
    next fetch.
    """

    def __init__(self, store: FinanceStore, warning_days: int = DEFAULT_EXPIRY_WARNING_DAYS):
        self.store = store
        self.warning_days = warning_days

    def sweep(self, user_id: str, now: Any) -> LifecycleEvaluation:
        """List a user's subscriptions, evaluate them, and persist the changes."""
        subscriptions = self.store.list_subscriptions(user_id)
        evaluation = evaluate_subscriptions(subscriptions, now, self.warning_days)
        apply_changes(self.store, evaluation.changes)
        return evaluation

    def create(self, user_id: str, subscription: Subscription, now: Any) -> SubscriptionCreated:
        """
        Store a new subscription and exactly one linked expense transaction.

        Args:
            user_id: Owner of the subscription
            subscription: Subscription to create; any id it carries is ignored
            now: Creation time; dates the linked transaction

        Returns:
            The stored subscription and its linked transaction, both with ids
        """
        validate_subscription(subscription)

        new_id = self.store.upsert_subscription(user_id, replace(subscription, id=""))
        stored = replace(subscription, id=new_id)

        transaction = linked_transaction_for(stored, now)
        transaction_id = self.store.insert_transaction(user_id, transaction)
        transaction = transaction.with_id(transaction_id)

        logger.info(
            "Created subscription %s (%s) with linked transaction %s for %s",
            new_id,
            stored.category,
            transaction_id,
            stored.amount,
        )
        return SubscriptionCreated(subscription=stored, linked_transaction=transaction)

    def update(self, user_id: str, subscription: Subscription) -> Subscription:
        """Save edits to an existing subscription. No linked transaction is created."""
        if not subscription.id:
            raise InvalidInput("cannot update a subscription without an id", field="id")
        validate_subscription(subscription)
        self.store.upsert_subscription(user_id, subscription)
        logger.info("Updated subscription %s", subscription.id)
        return subscription

    def toggle(self, subscription: Subscription) -> Subscription:
        """Manually flip a subscription's active flag, regardless of its dates."""
        return self.set_active(subscription, not subscription.is_active)

    def set_active(self, subscription: Subscription, active: bool) -> Subscription:
        self.store.set_subscription_active(subscription.id, active)
        logger.info("Subscription %s %s by user", subscription.id, "activated" if active else "deactivated")
        return replace(subscription, is_active=active)

    def delete(self, subscription_id: str) -> None:
        """Delete a subscription; its linked transactions stay in place."""
        self.store.delete_subscription(subscription_id)
        logger.info("Deleted subscription %s", subscription_id)
