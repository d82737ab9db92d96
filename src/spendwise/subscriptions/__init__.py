"""
Subscription Lifecycle Package

Expiry tracking for recurring subscriptions and the linked expense
transactions created alongside them.
"""

from .lifecycle import (
    DEFAULT_EXPIRY_WARNING_DAYS,
    ActiveStateChange,
    AlertKind,
    LifecycleAlert,
    LifecycleEvaluation,
    SubscriptionCreated,
    SubscriptionLifecycle,
    apply_changes,
    evaluate_subscription,
    evaluate_subscriptions,
    linked_transaction_for,
    validate_subscription,
)

__all__ = [
    "DEFAULT_EXPIRY_WARNING_DAYS",
    "ActiveStateChange",
    "AlertKind",
    "LifecycleAlert",
    "LifecycleEvaluation",
    "SubscriptionCreated",
    "SubscriptionLifecycle",
    "apply_changes",
    "evaluate_subscription",
    "evaluate_subscriptions",
    "linked_transaction_for",
    "validate_subscription",
]
