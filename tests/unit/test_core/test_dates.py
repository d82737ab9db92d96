#!/usr/bin/env python3
"""Tests for FinancialDate and Period."""

from datetime import date, datetime

import pytest

from spendwise.core.dates import FinancialDate, Granularity, Period
from spendwise.core.errors import InvalidInput


class TestFinancialDate:
    """Test FinancialDate parsing and arithmetic."""

    def test_from_string(self):
        fd = FinancialDate.from_string("2026-10-18")
        assert fd.date == date(2026, 10, 18)
        assert str(fd) == "2026-10-18"

    @pytest.mark.parametrize("raw", ["", "   ", "2026-13-01", "18/10/2026"])
    def test_from_string_rejects_malformed(self, raw):
        with pytest.raises(InvalidInput):
            FinancialDate.from_string(raw)

    def test_coerce_accepts_date_like_values(self):
        expected = FinancialDate(date=date(2026, 10, 18))
        assert FinancialDate.coerce(date(2026, 10, 18)) == expected
        assert FinancialDate.coerce(datetime(2026, 10, 18, 23, 59)) == expected
        assert FinancialDate.coerce("2026-10-18T09:30:00+05:30") == expected
        assert FinancialDate.coerce(expected) is expected

    def test_coerce_rejects_other_types(self):
        with pytest.raises(InvalidInput) as exc_info:
            FinancialDate.coerce(20261018, field="now")
        assert exc_info.value.field == "now"

    def test_days_until(self):
        today = FinancialDate.from_string("2026-10-18")
        assert today.days_until(FinancialDate.from_string("2026-10-21")) == 3
        assert today.days_until(FinancialDate.from_string("2026-10-17")) == -1

    def test_year_month(self):
        assert FinancialDate.from_string("2026-03-09").year_month() == "2026-03"


class TestPeriod:
    """Test Period truncation, ordering, and labels."""

    def test_truncate_month(self):
        period = FinancialDate.from_string("2026-10-18").truncate(Granularity.MONTH)
        assert period == Period(year=2026, month=10, granularity=Granularity.MONTH)
        assert period.key == "2026-10"

    def test_truncate_year_and_day(self):
        fd = FinancialDate.from_string("2026-10-18")
        assert fd.truncate(Granularity.YEAR).key == "2026"
        assert fd.truncate(Granularity.DAY).key == "2026-10-18"

    def test_ordering_is_calendar_not_label(self):
        """Oct 2025 sorts before Jan 2026 although its label sorts after."""
        october = Period.from_year_month("2025-10")
        january = Period.from_year_month("2026-01")
        assert october < january
        assert october.label() > january.label()

    def test_previous_and_next_cross_year(self):
        jan = Period.from_year_month("2026-01")
        assert jan.previous().key == "2025-12"
        assert jan.previous().next() == jan

    def test_day_previous_crosses_month(self):
        day = Period.containing("2026-03-01", Granularity.DAY)
        assert day.previous().key == "2026-02-28"

    def test_end_date_inclusive(self):
        assert Period.from_year_month("2028-02").end_date == date(2028, 2, 29)
        assert Period.containing("2026-05-05", Granularity.YEAR).end_date == date(2026, 12, 31)

    def test_contains(self):
        october = Period.from_year_month("2026-10")
        assert october.contains("2026-10-31")
        assert not october.contains("2026-11-01")

    def test_labels(self):
        october = Period.from_year_month("2026-10")
        assert october.label() == "Oct 2026"
        assert october.label(long=True) == "October 2026"
        assert Period.containing("2026-10-18", Granularity.DAY).label() == "Oct 18, 2026"

    def test_from_year_month_rejects_malformed(self):
        with pytest.raises(InvalidInput):
            Period.from_year_month("2026-13")
