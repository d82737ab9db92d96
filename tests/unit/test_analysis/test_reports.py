#!/usr/bin/env python3
"""Unit tests for pandas report views."""

from decimal import Decimal

import pandas as pd
import pytest

from spendwise.analysis.aggregation import (
    CategoryTotal,
    PeriodWindow,
    aggregate_by_period,
)
from spendwise.analysis.reports import buckets_to_frame, categories_to_frame, export_csv
from spendwise.core.dates import Granularity
from spendwise.core.models import TransactionType
from spendwise.core.money import Money


@pytest.fixture
def three_month_buckets(make_transaction, today):
    transactions = [
        make_transaction("2026-10-03", "5000", TransactionType.INCOME, category="Salary"),
        make_transaction("2026-10-04", "1200.50"),
        make_transaction("2026-08-15", "300"),
    ]
    return aggregate_by_period(transactions, Granularity.MONTH, PeriodWindow.last(3, Granularity.MONTH, today))


class TestBucketsFrame:
    """Test buckets_to_frame."""

    def test_columns_and_index(self, three_month_buckets):
        df = buckets_to_frame(three_month_buckets)

        assert list(df.index) == ["2026-10", "2026-09", "2026-08"]
        assert list(df.columns) == ["Label", "Income", "Expense", "Net", "Transactions"]
        assert df.loc["2026-10", "Net"] == Decimal("3799.50")
        assert df.loc["2026-09", "Transactions"] == 0

    def test_chronological(self, three_month_buckets):
        df = buckets_to_frame(three_month_buckets, chronological=True)
        assert list(df["Label"]) == ["Aug 2026", "Sep 2026", "Oct 2026"]

    def test_empty(self):
        assert buckets_to_frame([]).empty


class TestCategoriesFrame:
    """Test categories_to_frame."""

    def test_sorted_with_share(self):
        totals = [
            CategoryTotal(name="Food", amount=Money.parse("250"), transaction_count=3),
            CategoryTotal(name="Rent", amount=Money.parse("750"), transaction_count=1),
        ]
        df = categories_to_frame(totals)

        assert list(df["Category"]) == ["Rent", "Food"]
        assert list(df["Share"]) == [75.0, 25.0]
        assert df.iloc[0]["Amount"] == Decimal("750.00")

    def test_ties_break_by_name(self):
        totals = [
            CategoryTotal(name="b", amount=Money.parse("1")),
            CategoryTotal(name="a", amount=Money.parse("1")),
        ]
        assert list(categories_to_frame(totals)["Category"]) == ["a", "b"]


class TestExport:
    def test_export_csv_creates_parents(self, three_month_buckets, temp_dir):
        output = export_csv(buckets_to_frame(three_month_buckets), temp_dir / "reports" / "trend.csv")

        assert output.exists()
        loaded = pd.read_csv(output, index_col="Period", dtype={"Period": str})
        assert list(loaded.index) == ["2026-10", "2026-09", "2026-08"]
        assert loaded.loc["2026-10", "Expense"] == pytest.approx(1200.50)
