#!/usr/bin/env python3
"""
Unit tests for time-bucket and category aggregation.

Covers fixed-window completeness, total conservation, calendar ordering, and
category grouping strategies.
"""

import random

import pytest

from spendwise.analysis.aggregation import (
    PeriodWindow,
    aggregate_by_category,
    aggregate_by_period,
    casefold_category,
    current_month_bucket,
    current_month_expenses,
    filter_transactions,
    sum_buckets,
)
from spendwise.core.dates import Granularity, Period
from spendwise.core.errors import InvalidInput
from spendwise.core.models import TransactionType, parse_transactions
from spendwise.core.money import Money
from tests.fixtures.synthetic_data import generate_transaction_rows

INCOME = TransactionType.INCOME
EXPENSE = TransactionType.EXPENSE


class TestPeriodWindow:
    """Test PeriodWindow construction."""

    def test_periods_most_recent_first(self, today):
        window = PeriodWindow.last(3, Granularity.MONTH, today)
        assert [p.key for p in window.periods()] == ["2026-10", "2026-09", "2026-08"]

    def test_bounds(self, today):
        window = PeriodWindow.last(2, Granularity.MONTH, today)
        assert str(window.start_date) == "2026-09-01"
        assert str(window.end_date) == "2026-10-31"

    def test_empty_window_has_no_bounds(self, today):
        window = PeriodWindow.last(0, Granularity.YEAR, today)
        assert window.periods() == []
        assert window.start_date is None
        assert window.end_date is None

    def test_negative_count_rejected(self, today):
        with pytest.raises(InvalidInput):
            PeriodWindow.last(-1, Granularity.MONTH, today)


@pytest.mark.aggregation
class TestAggregateByPeriod:
    """Test aggregate_by_period."""

    def test_six_month_window_scenario(self, make_transaction, today):
        """Income 1000 and expense 400 two months back, nothing else."""
        transactions = [
            make_transaction("2026-08-10", "1000", INCOME, category="Salary"),
            make_transaction("2026-08-20", "400", EXPENSE),
        ]
        window = PeriodWindow.last(6, Granularity.MONTH, today)

        buckets = aggregate_by_period(transactions, Granularity.MONTH, window)

        assert [b.label for b in buckets] == [
            "Oct 2026",
            "Sep 2026",
            "Aug 2026",
            "Jul 2026",
            "Jun 2026",
            "May 2026",
        ]
        august = buckets[2]
        assert (august.income, august.expense, august.net) == (
            Money.parse("1000"),
            Money.parse("400"),
            Money.parse("600"),
        )
        for index in (0, 1, 3, 4, 5):
            assert buckets[index].income.is_zero()
            assert buckets[index].expense.is_zero()
            assert buckets[index].is_empty

    @pytest.mark.parametrize("granularity", list(Granularity))
    @pytest.mark.parametrize("count", [0, 1, 6, 13])
    def test_fixed_window_completeness(self, granularity, count, today):
        transactions = parse_transactions(generate_transaction_rows(count=150))
        window = PeriodWindow.last(count, granularity, today)

        buckets = aggregate_by_period(transactions, granularity, window)

        assert len(buckets) == count
        assert [b.period for b in buckets] == window.periods()
        assert [b.period for b in buckets] == sorted((b.period for b in buckets), reverse=True)

    @pytest.mark.parametrize("granularity", list(Granularity))
    def test_conservation_without_window(self, granularity):
        transactions = parse_transactions(generate_transaction_rows(count=300, seed=7))

        income, expense = sum_buckets(aggregate_by_period(transactions, granularity))

        assert income == Money.total(t.amount for t in transactions if t.is_income)
        assert expense == Money.total(t.amount for t in transactions if t.is_expense)

    def test_conservation_within_window(self, today):
        transactions = parse_transactions(generate_transaction_rows(count=300, seed=11))
        window = PeriodWindow.last(4, Granularity.MONTH, today)
        inside = filter_transactions(transactions, start=window.start_date, end=window.end_date)

        income, expense = sum_buckets(aggregate_by_period(transactions, Granularity.MONTH, window))

        assert income == Money.total(t.amount for t in inside if t.is_income)
        assert expense == Money.total(t.amount for t in inside if t.is_expense)

    def test_order_independent_of_input(self):
        transactions = parse_transactions(generate_transaction_rows(count=120, seed=3))
        shuffled = list(transactions)
        random.Random(99).shuffle(shuffled)  # noqa: S311

        assert aggregate_by_period(transactions, Granularity.MONTH) == aggregate_by_period(
            shuffled, Granularity.MONTH
        )

    def test_without_window_only_active_periods(self, make_transaction):
        transactions = [make_transaction("2025-12-31"), make_transaction("2026-03-01")]
        buckets = aggregate_by_period(transactions, Granularity.MONTH)
        assert [b.period.key for b in buckets] == ["2026-03", "2025-12"]

    def test_net_can_be_negative(self, make_transaction):
        buckets = aggregate_by_period(
            [make_transaction(amount="50", type=INCOME), make_transaction(amount="80")], Granularity.YEAR
        )
        assert buckets[0].net == Money.zero() - Money.parse("30")

    def test_window_granularity_mismatch(self, today):
        window = PeriodWindow.last(3, Granularity.MONTH, today)
        with pytest.raises(InvalidInput):
            aggregate_by_period([], Granularity.YEAR, window)

    def test_current_month_bucket(self, make_transaction, today):
        transactions = [
            make_transaction("2026-10-01", "100"),
            make_transaction("2026-10-31", "50"),
            make_transaction("2026-09-30", "999"),
        ]
        bucket = current_month_bucket(transactions, today)
        assert bucket.period == Period.from_year_month("2026-10")
        assert bucket.expense == Money.parse("150")
        assert bucket.transaction_count == 2

    def test_current_month_bucket_empty(self, today):
        bucket = current_month_bucket([], today)
        assert bucket.expense.is_zero()
        assert bucket.to_dict()["period"] == "2026-10"


@pytest.mark.aggregation
class TestAggregateByCategory:
    """Test aggregate_by_category."""

    def test_exact_grouping_is_case_sensitive(self, make_transaction):
        transactions = [
            make_transaction(category="Food", amount="10"),
            make_transaction(category="food", amount="20"),
            make_transaction(category="Food", amount="5"),
        ]
        totals = {t.name: t.amount for t in aggregate_by_category(transactions)}
        assert totals == {"Food": Money.parse("15"), "food": Money.parse("20")}

    def test_casefold_grouping(self, make_transaction):
        transactions = [
            make_transaction(category="Food", amount="10"),
            make_transaction(category=" food ", amount="20"),
        ]
        totals = aggregate_by_category(transactions, key=casefold_category)
        assert len(totals) == 1
        assert totals[0].name == "food"
        assert totals[0].amount == Money.parse("30")
        assert totals[0].transaction_count == 2

    def test_custom_key(self, make_transaction):
        transactions = [
            make_transaction(category="Food", subcategory="Groceries", amount="10"),
            make_transaction(category="Food", subcategory="Dining", amount="20"),
        ]
        totals = aggregate_by_category(transactions, key=lambda t: t.subcategory)
        assert sorted(t.name for t in totals) == ["Dining", "Groceries"]

    def test_empty(self):
        assert aggregate_by_category([]) == []

    def test_sum_matches_input(self):
        transactions = parse_transactions(generate_transaction_rows(count=200, seed=5))
        totals = aggregate_by_category(transactions)
        assert Money.total(t.amount for t in totals) == Money.total(t.amount for t in transactions)


class TestFilters:
    """Test transaction filters."""

    def test_filter_inclusive_bounds(self, make_transaction):
        transactions = [
            make_transaction("2026-09-30"),
            make_transaction("2026-10-01"),
            make_transaction("2026-10-31"),
            make_transaction("2026-11-01"),
        ]
        kept = filter_transactions(transactions, start="2026-10-01", end="2026-10-31")
        assert [str(t.date) for t in kept] == ["2026-10-01", "2026-10-31"]

    def test_filter_by_type(self, make_transaction):
        transactions = [make_transaction(type=INCOME), make_transaction(type=EXPENSE)]
        assert [t.type for t in filter_transactions(transactions, type=INCOME)] == [INCOME]

    def test_current_month_expenses(self, make_transaction, today):
        transactions = [
            make_transaction("2026-10-02", type=EXPENSE),
            make_transaction("2026-10-03", type=INCOME),
            make_transaction("2026-09-03", type=EXPENSE),
        ]
        kept = current_month_expenses(transactions, today)
        assert [str(t.date) for t in kept] == ["2026-10-02"]
