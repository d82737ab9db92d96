#!/usr/bin/env python3
"""
Alert Notification Seam

The core decides *that* an alert fires and *what* it says; delivery (email,
push, toast) belongs to whatever AlertNotifier the caller plugs in. Delivery
is best-effort: a failing notifier is logged and never undoes the state change
that produced the alert.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from .core.money import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BudgetAlertNotice:
    """Payload for a budget-exceeded notification."""

    recipient: str | None
    user_id: str
    year_month: str
    spend: Money
    budget: Money

    @property
    def over_by(self) -> Money:
        return self.spend - self.budget

    @property
    def message(self) -> str:
        return f"You have crossed your budget limit for {self.year_month}: spent {self.spend} of {self.budget}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.recipient,
            "spend": str(self.spend.to_decimal()),
            "budget": str(self.budget.to_decimal()),
        }


class AlertNotifier(Protocol):
    """Delivery channel for alerts raised by the core."""

    def notify_budget_exceeded(self, notice: BudgetAlertNotice) -> None: ...

    def notify_subscription(self, alert: Any) -> None: ...


class LoggingNotifier:
    """Notifier that writes alerts to the log; the default when nothing else is configured."""

    def notify_budget_exceeded(self, notice: BudgetAlertNotice) -> None:
        logger.warning(notice.message)

    def notify_subscription(self, alert: Any) -> None:
        logger.warning(alert.message)


class RecordingNotifier:
    """Notifier that keeps every alert in memory (CLI summaries, tests)."""

    def __init__(self):
        self.budget_notices: list[BudgetAlertNotice] = []
        self.subscription_alerts: list[Any] = []

    def notify_budget_exceeded(self, notice: BudgetAlertNotice) -> None:
        self.budget_notices.append(notice)

    def notify_subscription(self, alert: Any) -> None:
        self.subscription_alerts.append(alert)


def deliver(send: Callable[[Any], None], payload: Any) -> bool:
    """
    Deliver one alert, best-effort.

    Returns:
        True if the notifier accepted it, False if it raised
    """
    try:
        send(payload)
        return True
    except Exception as e:
        logger.error(f"Alert delivery failed: {e}")
        return False
