#!/usr/bin/env python3
"""
Row-Based Store Base

Shared FinanceStore behaviour for stores that keep raw rows (dicts) the way
the hosted backend returns them. Subclasses only provide table reads and
writes; this class owns id assignment, user scoping, ordering, and row
parsing. Rows are kept newest-first.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime
from typing import Any

from ..analysis.aggregation import filter_transactions
from ..core.dates import FinancialDate
from ..core.errors import InvalidInput, StoreUnavailable
from ..core.models import (
    Budget,
    Subscription,
    Transaction,
    TransactionType,
    parse_subscriptions,
    parse_transactions,
)
from ..core.money import Money

logger = logging.getLogger(__name__)

TRANSACTIONS = "transactions"
SUBSCRIPTIONS = "subscriptions"


def new_id() -> str:
    return uuid.uuid4().hex


class RowStore(ABC):
    """FinanceStore implementation over abstract row tables."""

    @abstractmethod
    def _read_rows(self, table: str) -> list[dict[str, Any]]:
        """Return all rows of a table, newest first."""
        ...

    @abstractmethod
    def _write_rows(self, table: str, rows: list[dict[str, Any]]) -> None:
        """Replace all rows of a table."""
        ...

    @abstractmethod
    def _read_budgets(self) -> dict[str, dict[str, str]]:
        """Return budgets as {user_id: {year_month: amount}}."""
        ...

    @abstractmethod
    def _write_budgets(self, budgets: dict[str, dict[str, str]]) -> None:
        ...

    # Transactions

    def list_transactions(
        self,
        user_id: str,
        start: FinancialDate | None = None,
        end: FinancialDate | None = None,
        type: TransactionType | None = None,
    ) -> list[Transaction]:
        rows = [row for row in self._read_rows(TRANSACTIONS) if row.get("user_id") == user_id]
        return filter_transactions(parse_transactions(rows), type=type, start=start, end=end)

    def insert_transaction(self, user_id: str, transaction: Transaction) -> str:
        if transaction.amount.to_cents() < 0:
            raise InvalidInput(f"amount must not be negative, got {transaction.amount}", field="amount")

        transaction_id = transaction.id or new_id()
        row = transaction.with_id(transaction_id).to_dict()
        row["user_id"] = user_id
        row["created_at"] = datetime.now().isoformat()

        rows = self._read_rows(TRANSACTIONS)
        if any(r.get("id") == transaction_id for r in rows):
            raise InvalidInput(f"transaction {transaction_id} already exists", field="id")
        self._write_rows(TRANSACTIONS, [row, *rows])
        return transaction_id

    def delete_transaction(self, transaction_id: str) -> None:
        rows = self._read_rows(TRANSACTIONS)
        kept = [r for r in rows if r.get("id") != transaction_id]
        if len(kept) != len(rows):
            self._write_rows(TRANSACTIONS, kept)

    # Subscriptions

    def list_subscriptions(self, user_id: str) -> list[Subscription]:
        rows = [row for row in self._read_rows(SUBSCRIPTIONS) if row.get("user_id") == user_id]
        return parse_subscriptions(rows)

    def get_subscription(self, subscription_id: str) -> Subscription | None:
        for row in self._read_rows(SUBSCRIPTIONS):
            if row.get("id") == subscription_id:
                return Subscription.from_dict(row)
        return None

    def upsert_subscription(self, user_id: str, subscription: Subscription) -> str:
        subscription_id = subscription.id or new_id()
        row = replace(subscription, id=subscription_id).to_dict()
        row["user_id"] = user_id

        rows = self._read_rows(SUBSCRIPTIONS)
        for index, existing in enumerate(rows):
            if existing.get("id") == subscription_id:
                if existing.get("user_id") != user_id:
                    raise InvalidInput(f"subscription {subscription_id} belongs to another user", field="id")
                row["created_at"] = existing.get("created_at")
                rows[index] = row
                break
        else:
            row["created_at"] = datetime.now().isoformat()
            rows = [row, *rows]

        self._write_rows(SUBSCRIPTIONS, rows)
        return subscription_id

    def set_subscription_active(self, subscription_id: str, active: bool) -> None:
        rows = self._read_rows(SUBSCRIPTIONS)
        for row in rows:
            if row.get("id") == subscription_id:
                row["is_active"] = bool(active)
                self._write_rows(SUBSCRIPTIONS, rows)
                return
        logger.warning("Cannot set active flag on unknown subscription %s", subscription_id)

    def delete_subscription(self, subscription_id: str) -> None:
        rows = self._read_rows(SUBSCRIPTIONS)
        kept = [r for r in rows if r.get("id") != subscription_id]
        if len(kept) != len(rows):
            self._write_rows(SUBSCRIPTIONS, kept)

    # Budgets

    def get_budget(self, user_id: str, year_month: str) -> Budget | None:
        amount = self._read_budgets().get(user_id, {}).get(year_month)
        if amount is None:
            return None
        try:
            parsed = Money.parse(amount, field="budget")
        except InvalidInput as e:
            raise StoreUnavailable(f"Stored budget for {user_id} in {year_month} is invalid: {e}") from e
        return Budget(user_id=user_id, year_month=year_month, amount=parsed)

    def upsert_budget(self, user_id: str, year_month: str, amount: Money) -> Budget:
        amount = Money.parse(amount, field="budget")
        budgets = self._read_budgets()
        budgets.setdefault(user_id, {})[year_month] = str(amount.to_decimal())
        self._write_budgets(budgets)
        return Budget(user_id=user_id, year_month=year_month, amount=amount)
