#!/usr/bin/env python3
"""
FinanceStore Protocol - interface to the persistence collaborator.

The core never talks to a database directly. Everything it needs from the
hosted backend goes through this protocol: row listing, inserts, the
subscription active flag, and monthly budget upserts. Every entity is scoped
by user_id; nothing crosses user boundaries.
"""

from typing import Protocol

from .dates import FinancialDate
from .models import Budget, Subscription, Transaction, TransactionType
from .money import Money


class FinanceStore(Protocol):
    """
    Protocol for the transaction/subscription/budget store.

    Implementations raise StoreUnavailable when the backing storage cannot be
    reached. Writes are simple last-write-wins updates; two concurrent sweeps
    that both mark a subscription inactive write the same value.
    """

    def list_transactions(
        self,
        user_id: str,
        start: FinancialDate | None = None,
        end: FinancialDate | None = None,
        type: TransactionType | None = None,
    ) -> list[Transaction]:
        """
        List a user's transactions, newest first.

        Args:
            user_id: Owner of the transactions
            start: Inclusive lower date bound
            end: Inclusive upper date bound
            type: Restrict to income or expense

        Returns:
            Valid transactions; malformed rows are skipped
        """
        ...

    def insert_transaction(self, user_id: str, transaction: Transaction) -> str:
        """
        Persist a new transaction.

        Returns:
            The id assigned to the stored transaction
        """
        ...

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction; deleting an unknown id is a no-op."""
        ...

    def list_subscriptions(self, user_id: str) -> list[Subscription]:
        """List a user's subscriptions, most recently created first."""
        ...

    def upsert_subscription(self, user_id: str, subscription: Subscription) -> str:
        """
        Insert a subscription (empty id) or replace an existing one.

        Returns:
            The subscription's id
        """
        ...

    def set_subscription_active(self, subscription_id: str, active: bool) -> None:
        """Set the is_active flag of a subscription."""
        ...

    def delete_subscription(self, subscription_id: str) -> None:
        """Delete a subscription. Linked transactions are left untouched."""
        ...

    def get_budget(self, user_id: str, year_month: str) -> Budget | None:
        """Get the budget for a YYYY-MM month, or None if never set."""
        ...

    def upsert_budget(self, user_id: str, year_month: str, amount: Money) -> Budget:
        """Set the budget for a month, replacing any previous value."""
        ...
