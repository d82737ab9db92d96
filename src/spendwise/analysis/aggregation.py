#!/usr/bin/env python3
"""
Transaction Aggregation Module

Time-bucket and category aggregation over a user's transactions.

Two entry points:
- aggregate_by_period: income/expense/net per day, month, or year, ordered
  most-recent-first by calendar period. With an explicit PeriodWindow every
  period in the window is emitted, so trend charts always get a fixed-length
  series.
- aggregate_by_category: summed amounts per category label. Grouping uses a
  pluggable key; the default is exact string equality ("Food" and "food" are
  different groups).

Both are pure functions of their input: the same transactions always produce
the same result regardless of input order.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from ..core.dates import FinancialDate, Granularity, Period
from ..core.errors import InvalidInput
from ..core.models import Transaction, TransactionType
from ..core.money import Money

logger = logging.getLogger(__name__)

CategoryKey = Callable[[Transaction], str]


@dataclass(frozen=True)
class Bucket:
    """Aggregated totals for one calendar period."""

    period: Period
    income: Money
    expense: Money
    transaction_count: int = 0

    @property
    def net(self) -> Money:
        return self.income - self.expense

    @property
    def label(self) -> str:
        return self.period.label()

    @property
    def is_empty(self) -> bool:
        return self.transaction_count == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period.key,
            "label": self.label,
            "income": str(self.income.to_decimal()),
            "expense": str(self.expense.to_decimal()),
            "net": str(self.net.to_decimal()),
            "transaction_count": self.transaction_count,
        }


@dataclass(frozen=True)
class PeriodWindow:
    """
    An explicit run of consecutive periods ending at (and including) end.

    PeriodWindow.last(6, Granularity.MONTH, today) is "the last 6 calendar
    months ending this month".
    """

    end: Period
    count: int

    def __post_init__(self):
        if self.count < 0:
            raise InvalidInput(f"window length must be non-negative, got {self.count}", field="count")

    @classmethod
    def last(cls, count: int, granularity: Granularity, ending: Any) -> "PeriodWindow":
        """Window of count periods whose most recent period contains ending."""
        return cls(end=Period.containing(ending, granularity), count=count)

    @property
    def granularity(self) -> Granularity:
        return self.end.granularity

    def periods(self) -> list[Period]:
        """All periods in the window, most recent first."""
        periods = []
        period = self.end
        for _ in range(self.count):
            periods.append(period)
            period = period.previous()
        return periods

    @property
    def start_date(self) -> FinancialDate | None:
        """First calendar day covered by the window (None when empty)."""
        periods = self.periods()
        if not periods:
            return None
        return FinancialDate(date=periods[-1].start_date)

    @property
    def end_date(self) -> FinancialDate | None:
        """Last calendar day covered by the window (None when empty)."""
        if self.count == 0:
            return None
        return FinancialDate(date=self.end.end_date)


@dataclass(frozen=True)
class CategoryTotal:
    """Summed amount for one category group."""

    name: str
    amount: Money
    transaction_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "amount": str(self.amount.to_decimal()),
            "transaction_count": self.transaction_count,
        }


def aggregate_by_period(
    transactions: Iterable[Transaction],
    granularity: Granularity,
    window: PeriodWindow | None = None,
) -> list[Bucket]:
    """
    Group transactions into calendar buckets.

    Args:
        transactions: Transactions to aggregate
        granularity: Day, month, or year buckets
        window: Optional explicit window; when given, every period in it appears
            (empty ones with zero totals) and transactions outside it are ignored

    Returns:
        Buckets ordered most-recent-first

    Raises:
        InvalidInput: If the window's granularity differs from granularity
    """
    granularity = Granularity(granularity)
    if window is not None and window.granularity != granularity:
        raise InvalidInput(
            f"window granularity {window.granularity.value} does not match {granularity.value}",
            field="window",
        )

    # period -> [income cents, expense cents, count]
    totals: dict[Period, list[int]] = {}
    if window is not None:
        for period in window.periods():
            totals[period] = [0, 0, 0]

    skipped = 0
    for transaction in transactions:
        period = transaction.date.truncate(granularity)
        if period not in totals:
            if window is not None:
                skipped += 1
                continue
            totals[period] = [0, 0, 0]

        entry = totals[period]
        if transaction.type == TransactionType.INCOME:
            entry[0] += transaction.amount.to_cents()
        else:
            entry[1] += transaction.amount.to_cents()
        entry[2] += 1

    if skipped:
        logger.debug("Ignored %d transactions outside the %d-period window", skipped, window.count)

    return [
        Bucket(
            period=period,
            income=Money.from_cents(income),
            expense=Money.from_cents(expense),
            transaction_count=count,
        )
        for period, (income, expense, count) in sorted(totals.items(), key=lambda item: item[0], reverse=True)
    ]


def current_month_bucket(transactions: Iterable[Transaction], today: Any) -> Bucket:
    """The bucket for the calendar month containing today (zero totals if no activity)."""
    window = PeriodWindow.last(1, Granularity.MONTH, today)
    return aggregate_by_period(transactions, Granularity.MONTH, window)[0]


def exact_category(transaction: Transaction) -> str:
    """Group by the category label exactly as entered."""
    return transaction.category


def casefold_category(transaction: Transaction) -> str:
    """Group case- and surrounding-whitespace-insensitively ("Food " == "food")."""
    return transaction.category.strip().casefold()


def aggregate_by_category(
    transactions: Iterable[Transaction],
    key: CategoryKey = exact_category,
) -> list[CategoryTotal]:
    """
    Sum transaction amounts per category.

    Filtering (expense only, current month, ...) is the caller's job; every
    transaction passed in is counted. The result carries no ordering guarantee;
    sort by amount or name as needed.

    Args:
        transactions: Transactions already filtered to the period of interest
        key: Grouping key strategy (default: exact category string)

    Returns:
        One CategoryTotal per distinct key
    """
    amounts: dict[str, int] = {}
    counts: dict[str, int] = {}
    for transaction in transactions:
        name = key(transaction)
        amounts[name] = amounts.get(name, 0) + transaction.amount.to_cents()
        counts[name] = counts.get(name, 0) + 1

    return [
        CategoryTotal(name=name, amount=Money.from_cents(cents), transaction_count=counts[name])
        for name, cents in amounts.items()
    ]


def filter_transactions(
    transactions: Iterable[Transaction],
    type: TransactionType | None = None,
    start: Any = None,
    end: Any = None,
) -> list[Transaction]:
    """
    Filter transactions by type and inclusive date range.

    Args:
        transactions: Transactions to filter
        type: Keep only income or only expense
        start: Inclusive lower date bound (date, datetime, ISO string)
        end: Inclusive upper date bound
    """
    start_date = FinancialDate.coerce(start, field="start") if start is not None else None
    end_date = FinancialDate.coerce(end, field="end") if end is not None else None
    return [
        t
        for t in transactions
        if (type is None or t.type == type)
        and (start_date is None or t.date >= start_date)
        and (end_date is None or t.date <= end_date)
    ]


def current_month_expenses(transactions: Iterable[Transaction], today: Any) -> list[Transaction]:
    """Expense transactions dated within the calendar month containing today."""
    month = Period.containing(today, Granularity.MONTH)
    return filter_transactions(
        transactions,
        type=TransactionType.EXPENSE,
        start=month.start_date,
        end=month.end_date,
    )


def sum_buckets(buckets: Iterable[Bucket]) -> tuple[Money, Money]:
    """Total (income, expense) across buckets."""
    buckets = list(buckets)
    return Money.total(b.income for b in buckets), Money.total(b.expense for b in buckets)
