#!/usr/bin/env python3
"""
Wallet Summary and Top-ups

All-time balance view shown on the dashboard overview: balance is every
income transaction, spend every expense, remaining their difference. A top-up
is recorded as an ordinary income transaction.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .core.dates import FinancialDate
from .core.datastore import FinanceStore
from .core.models import Transaction, TransactionType
from .core.money import Money

logger = logging.getLogger(__name__)

TOP_UP_CATEGORY = "Income"
TOP_UP_SUBCATEGORY = "Wallet Top-up"
TOP_UP_DESCRIPTION = "Wallet top-up"


@dataclass(frozen=True)
class WalletSummary:
    balance: Money
    spend: Money

    @property
    def remaining(self) -> Money:
        return self.balance - self.spend


def wallet_summary(transactions: Iterable[Transaction]) -> WalletSummary:
    """Sum all income and all expense transactions."""
    balance = 0
    spend = 0
    for transaction in transactions:
        if transaction.type == TransactionType.INCOME:
            balance += transaction.amount.to_cents()
        else:
            spend += transaction.amount.to_cents()
    return WalletSummary(balance=Money.from_cents(balance), spend=Money.from_cents(spend))


def top_up(store: FinanceStore, user_id: str, amount: Any, today: Any) -> Transaction:
    """
    Add money to the wallet as an income transaction dated today.

    Raises:
        InvalidInput: If amount is not a positive number
    """
    transaction = Transaction(
        id="",
        date=FinancialDate.coerce(today, field="today"),
        category=TOP_UP_CATEGORY,
        subcategory=TOP_UP_SUBCATEGORY,
        amount=Money.parse(amount, allow_zero=False),
        type=TransactionType.INCOME,
        description=TOP_UP_DESCRIPTION,
    )
    transaction_id = store.insert_transaction(user_id, transaction)
    logger.info("Wallet top-up of %s for %s", transaction.amount, user_id)
    return transaction.with_id(transaction_id)
