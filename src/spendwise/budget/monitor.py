#!/usr/bin/env python3
"""
Budget Monitor

Compares the current month's expense total against the user's monthly budget.

- evaluate_budget() is the pure threshold check: an alert is raised iff a
  budget is set (amount > 0) and spend strictly exceeds it.
- BudgetMonitor reads the month's transactions and budget from the store,
  computes spend from the current-month bucket, and optionally hands an alert
  to a notifier.

The check re-evaluates on every call; a caller that stays over budget gets the
alert every time. De-duplication belongs to the notification channel.
"""

import logging
from dataclasses import dataclass
from typing import Any

from ..analysis.aggregation import current_month_bucket
from ..core.currency import percent_of
from ..core.dates import FinancialDate, Granularity, Period
from ..core.datastore import FinanceStore
from ..core.models import Budget, TransactionType
from ..core.money import Money
from ..notifications import AlertNotifier, BudgetAlertNotice, deliver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BudgetAlert:
    """Raised when monthly spend exceeds a set budget."""

    spend: Money
    limit: Money

    @property
    def over_by(self) -> Money:
        return self.spend - self.limit


@dataclass(frozen=True)
class BudgetStatus:
    """Budget position for one user and month."""

    user_id: str
    year_month: str
    spend: Money
    limit: Money
    alert: BudgetAlert | None = None

    @property
    def is_set(self) -> bool:
        return self.limit.cents > 0

    @property
    def remaining(self) -> Money:
        """limit - spend when a budget is set (negative once over), otherwise zero."""
        if not self.is_set:
            return Money.zero()
        return self.limit - self.spend

    @property
    def usage_percent(self) -> float:
        """Spend as a percentage of the budget (0.0 with no budget)."""
        return percent_of(self.spend.to_cents(), self.limit.to_cents())


def evaluate_budget(month_spend: Money, budget: Budget | Money | None) -> BudgetAlert | None:
    """
    Check month spend against a budget.

    Args:
        month_spend: Expense total for the month
        budget: The month's Budget (or its amount); None or zero means no budget

    Returns:
        BudgetAlert if spend exceeds a set budget, otherwise None
    """
    if budget is None:
        return None
    limit = budget.amount if isinstance(budget, Budget) else budget
    if limit.cents > 0 and month_spend > limit:
        return BudgetAlert(spend=month_spend, limit=limit)
    return None


class BudgetMonitor:
    """Store-backed monthly budget checks for a user."""

    def __init__(self, store: FinanceStore, notifier: AlertNotifier | None = None):
        self.store = store
        self.notifier = notifier

    def month_spend(self, user_id: str, today: Any) -> Money:
        """Expense total for the calendar month containing today."""
        month = Period.containing(today, Granularity.MONTH)
        transactions = self.store.list_transactions(
            user_id,
            start=FinancialDate(date=month.start_date),
            end=FinancialDate(date=month.end_date),
            type=TransactionType.EXPENSE,
        )
        return current_month_bucket(transactions, today).expense

    def status(self, user_id: str, today: Any) -> BudgetStatus:
        """Compute spend, limit, remaining, and the alert for the current month."""
        year_month = FinancialDate.coerce(today, field="today").year_month()
        spend = self.month_spend(user_id, today)
        budget = self.store.get_budget(user_id, year_month)
        limit = budget.amount if budget is not None else Money.zero()

        alert = evaluate_budget(spend, budget)
        if alert is not None:
            logger.info("Budget exceeded for %s in %s: %s over %s", user_id, year_month, alert.over_by, limit)

        return BudgetStatus(user_id=user_id, year_month=year_month, spend=spend, limit=limit, alert=alert)

    def check(self, user_id: str, today: Any, recipient: str | None = None) -> BudgetStatus:
        """
        Compute the current status and notify when over budget.

        Notification failures are logged and do not affect the returned status.
        """
        status = self.status(user_id, today)
        if status.alert is not None and self.notifier is not None:
            notice = BudgetAlertNotice(
                recipient=recipient,
                user_id=user_id,
                year_month=status.year_month,
                spend=status.spend,
                budget=status.limit,
            )
            deliver(self.notifier.notify_budget_exceeded, notice)
        return status

    def set_budget(self, user_id: str, year_month: str, amount: Any) -> Budget:
        """
        Set the budget for a month, replacing any previous value.

        Zero clears the budget. Raises InvalidInput for negative or
        non-numeric amounts or a malformed YYYY-MM month.
        """
        period = Period.from_year_month(year_month)
        budget = self.store.upsert_budget(user_id, period.key, Money.parse(amount, field="budget"))
        logger.info("Set budget for %s in %s to %s", user_id, period.key, budget.amount)
        return budget
