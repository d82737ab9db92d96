#!/usr/bin/env python3
"""
Finance Service

Request/response orchestration over one store: each call fetches rows, runs
the aggregators, and runs the lifecycle and budget passes that may write back
to the store or raise alerts. Nothing runs in the background; every check is
evaluated when its view is requested.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from .analysis.aggregation import (
    Bucket,
    CategoryTotal,
    CategoryKey,
    PeriodWindow,
    aggregate_by_category,
    aggregate_by_period,
    current_month_expenses,
    exact_category,
    sum_buckets,
)
from .budget.monitor import BudgetMonitor, BudgetStatus
from .core.config import Config
from .core.dates import FinancialDate, Granularity
from .core.datastore import FinanceStore
from .core.models import Subscription, Transaction
from .core.money import Money
from .notifications import AlertNotifier, deliver
from .subscriptions.lifecycle import (
    DEFAULT_EXPIRY_WARNING_DAYS,
    LifecycleAlert,
    SubscriptionCreated,
    SubscriptionLifecycle,
)
from .wallet import WalletSummary, top_up, wallet_summary

logger = logging.getLogger(__name__)


@dataclass
class SubscriptionView:
    """A user's subscriptions after the expiry sweep, plus the alerts it raised."""

    subscriptions: list[Subscription]
    alerts: list[LifecycleAlert] = field(default_factory=list)

    @property
    def active(self) -> list[Subscription]:
        return [s for s in self.subscriptions if s.is_active]


@dataclass
class AnalyticsView:
    """Trend and category breakdown for the analytics page."""

    trend: list[Bucket]
    categories: list[CategoryTotal]

    @property
    def total_income(self) -> Money:
        return sum_buckets(self.trend)[0]

    @property
    def total_expense(self) -> Money:
        return sum_buckets(self.trend)[1]

    @property
    def average_monthly_spending(self) -> Money:
        """Expense total divided evenly over the trend months (integer cents, floored)."""
        if not self.trend:
            return Money.zero()
        return Money.from_cents(self.total_expense.to_cents() // len(self.trend))


class FinanceService:
    """Entry point used by the CLI and any UI layer."""

    def __init__(
        self,
        store: FinanceStore,
        notifier: AlertNotifier | None = None,
        warning_days: int = DEFAULT_EXPIRY_WARNING_DAYS,
        trend_months: int = 6,
        recent_limit: int = 5,
        alert_recipient: str | None = None,
        category_key: CategoryKey = exact_category,
    ):
        self.store = store
        self.notifier = notifier
        self.trend_months = trend_months
        self.recent_limit = recent_limit
        self.alert_recipient = alert_recipient
        self.category_key = category_key
        self.lifecycle = SubscriptionLifecycle(store, warning_days=warning_days)
        self.budgets = BudgetMonitor(store, notifier=notifier)

    @classmethod
    def from_config(
        cls, store: FinanceStore, config: Config, notifier: AlertNotifier | None = None
    ) -> "FinanceService":
        return cls(
            store,
            notifier=notifier if config.notifications.enabled else None,
            warning_days=config.lifecycle.expiry_warning_days,
            trend_months=config.reports.trend_months,
            recent_limit=config.reports.recent_transactions_limit,
            alert_recipient=config.notifications.alert_email,
        )

    # Transactions

    def record_transaction(self, user_id: str, **values: Any) -> Transaction:
        """
        Validate and store a user-entered transaction.

        Keyword arguments are those of Transaction.create (date, category,
        amount, type, subcategory, description).

        Raises:
            InvalidInput: On a malformed date or negative/non-numeric amount
        """
        transaction = Transaction.create(**values)
        transaction_id = self.store.insert_transaction(user_id, transaction)
        logger.info("Recorded %s of %s in %s", transaction.type.value, transaction.amount, transaction.category)
        return transaction.with_id(transaction_id)

    def delete_transaction(self, transaction_id: str) -> None:
        self.store.delete_transaction(transaction_id)

    def recent_transactions(self, user_id: str, limit: int | None = None) -> list[Transaction]:
        """Most recently recorded transactions (store order), capped at limit."""
        limit = self.recent_limit if limit is None else limit
        return self.store.list_transactions(user_id)[:limit]

    def transactions_by_month(self, user_id: str) -> list[tuple[Bucket, list[Transaction]]]:
        """
        Transaction history grouped by calendar month, most recent month first.

        Each group carries its month bucket (totals) and its transactions,
        newest date first.
        """
        transactions = self.store.list_transactions(user_id)
        buckets = aggregate_by_period(transactions, Granularity.MONTH)
        grouped = []
        for bucket in buckets:
            members = [t for t in transactions if bucket.period.contains(t.date)]
            members.sort(key=lambda t: t.date, reverse=True)
            grouped.append((bucket, members))
        return grouped

    # Subscriptions

    def subscriptions(self, user_id: str, now: Any) -> SubscriptionView:
        """
        Fetch a user's subscriptions, running the expiry sweep first.

        Expired subscriptions are marked inactive in the store before any alert
        is delivered; a failing notifier never undoes that write.
        """
        evaluation = self.lifecycle.sweep(user_id, now)
        if self.notifier is not None:
            for alert in evaluation.alerts:
                deliver(self.notifier.notify_subscription, alert)
        return SubscriptionView(subscriptions=evaluation.subscriptions, alerts=evaluation.alerts)

    def add_subscription(self, user_id: str, now: Any, **values: Any) -> SubscriptionCreated:
        """
        Validate, store, and link a new subscription.

        Keyword arguments are those of Subscription.create.
        """
        subscription = Subscription.create(**values)
        return self.lifecycle.create(user_id, subscription, now)

    # Budgets

    def budget_status(self, user_id: str, today: Any) -> BudgetStatus:
        """Current-month budget position; notifies when over budget."""
        return self.budgets.check(user_id, today, recipient=self.alert_recipient)

    def set_budget(self, user_id: str, today: Any, amount: Any):
        """Set the budget for the month containing today."""
        year_month = FinancialDate.coerce(today, field="today").year_month()
        return self.budgets.set_budget(user_id, year_month, amount)

    # Wallet and analytics

    def wallet(self, user_id: str) -> WalletSummary:
        return wallet_summary(self.store.list_transactions(user_id))

    def top_up(self, user_id: str, amount: Any, today: Any) -> Transaction:
        return top_up(self.store, user_id, amount, today)

    def trend(
        self, user_id: str, today: Any, periods: int | None = None, granularity: Granularity = Granularity.MONTH
    ) -> list[Bucket]:
        """Fixed-length trend ending in the period containing today."""
        window = PeriodWindow.last(self.trend_months if periods is None else periods, granularity, today)
        transactions = self.store.list_transactions(user_id, start=window.start_date, end=window.end_date)
        return aggregate_by_period(transactions, granularity, window)

    def analytics(self, user_id: str, today: Any, months: int | None = None) -> AnalyticsView:
        """Monthly trend plus current-month expense categories."""
        transactions = self.store.list_transactions(user_id)
        window = PeriodWindow.last(self.trend_months if months is None else months, Granularity.MONTH, today)
        trend = aggregate_by_period(transactions, Granularity.MONTH, window)
        categories = aggregate_by_category(current_month_expenses(transactions, today), key=self.category_key)
        return AnalyticsView(trend=trend, categories=categories)
