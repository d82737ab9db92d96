#!/usr/bin/env python3
"""
Calendar Primitive Types

FinancialDate wraps a calendar date (no time-of-day semantics). Period is the
sortable calendar key a date truncates to at day, month, or year granularity;
it is what buckets are ordered by, while labels stay a display concern.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any

from .errors import InvalidInput


class Granularity(str, Enum):
    """Bucketing granularity for time aggregation."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class FinancialDate:
    """Immutable calendar date with strict parsing."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, format: str = "%Y-%m-%d", field: str = "date") -> "FinancialDate":
        """
        Parse from string in specified format.

        Raises:
            InvalidInput: If the string is empty or does not match the format
        """
        if not isinstance(date_str, str) or not date_str.strip():
            raise InvalidInput(f"{field} is missing", field=field)
        try:
            return cls(date=datetime.strptime(date_str.strip(), format).date())
        except ValueError as e:
            raise InvalidInput(f"{field} is not a valid date: {date_str!r}", field=field) from e

    @classmethod
    def coerce(cls, value: Any, field: str = "date") -> "FinancialDate":
        """
        Build a FinancialDate from a date, datetime, ISO string, or FinancialDate.

        Datetimes are truncated to their calendar date. ISO strings with a time
        part ("2026-10-18T09:30:00") keep only the date portion.
        """
        if isinstance(value, FinancialDate):
            return value
        if isinstance(value, datetime):
            return cls(date=value.date())
        if isinstance(value, date):
            return cls(date=value)
        if isinstance(value, str):
            return cls.from_string(value.split("T", 1)[0], field=field)
        raise InvalidInput(f"{field} must be a date, got {type(value).__name__}", field=field)

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def year_month(self) -> str:
        """Format as YYYY-MM, the key budgets are stored under."""
        return f"{self.date.year:04d}-{self.date.month:02d}"

    def add_days(self, days: int) -> "FinancialDate":
        return FinancialDate(date=self.date + timedelta(days=days))

    def days_until(self, other: "FinancialDate") -> int:
        """Number of days from this date to other (negative if other is earlier)."""
        return (other.date - self.date).days

    def truncate(self, granularity: Granularity) -> "Period":
        """Return the period containing this date."""
        return Period.containing(self, granularity)

    def __str__(self) -> str:
        return self.to_iso_string()

    def __lt__(self, other: "FinancialDate") -> bool:
        return self.date < other.date

    def __le__(self, other: "FinancialDate") -> bool:
        return self.date <= other.date

    def __gt__(self, other: "FinancialDate") -> bool:
        return self.date > other.date

    def __ge__(self, other: "FinancialDate") -> bool:
        return self.date >= other.date

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"


@dataclass(frozen=True, order=True)
class Period:
    """
    A calendar period at a given granularity.

    Unused components are pinned to 1 (a month period is (year, month, 1)), so
    periods of the same granularity order by calendar position.
    """

    year: int
    month: int = 1
    day: int = 1
    granularity: Granularity = Granularity.DAY

    @classmethod
    def containing(cls, value: Any, granularity: Granularity) -> "Period":
        """Truncate a date-like value to its period."""
        d = FinancialDate.coerce(value).date
        if granularity == Granularity.YEAR:
            return cls(year=d.year, granularity=granularity)
        if granularity == Granularity.MONTH:
            return cls(year=d.year, month=d.month, granularity=granularity)
        return cls(year=d.year, month=d.month, day=d.day, granularity=granularity)

    @classmethod
    def from_year_month(cls, year_month: str) -> "Period":
        """Parse a YYYY-MM key into a month period."""
        fd = FinancialDate.from_string(f"{year_month}-01", field="year_month")
        return cls.containing(fd, Granularity.MONTH)

    @property
    def start_date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def end_date(self) -> date:
        """Last calendar day of the period (inclusive)."""
        return self.next().start_date - timedelta(days=1)

    def contains(self, value: Any) -> bool:
        return Period.containing(value, self.granularity) == self

    def previous(self) -> "Period":
        if self.granularity == Granularity.YEAR:
            return Period(year=self.year - 1, granularity=self.granularity)
        if self.granularity == Granularity.MONTH:
            if self.month == 1:
                return Period(year=self.year - 1, month=12, granularity=self.granularity)
            return Period(year=self.year, month=self.month - 1, granularity=self.granularity)
        return Period.containing(self.start_date - timedelta(days=1), self.granularity)

    def next(self) -> "Period":
        if self.granularity == Granularity.YEAR:
            return Period(year=self.year + 1, granularity=self.granularity)
        if self.granularity == Granularity.MONTH:
            if self.month == 12:
                return Period(year=self.year + 1, month=1, granularity=self.granularity)
            return Period(year=self.year, month=self.month + 1, granularity=self.granularity)
        return Period.containing(self.start_date + timedelta(days=1), self.granularity)

    @property
    def key(self) -> str:
        """Stable machine key: "2026", "2026-10", or "2026-10-18"."""
        if self.granularity == Granularity.YEAR:
            return f"{self.year:04d}"
        if self.granularity == Granularity.MONTH:
            return f"{self.year:04d}-{self.month:02d}"
        return self.start_date.isoformat()

    def label(self, long: bool = False) -> str:
        """
        Human-readable label for charts and tables.

        Month periods render as "Oct 2026" ("October 2026" when long), days as
        "Oct 18, 2026", years as "2026".
        """
        if self.granularity == Granularity.YEAR:
            return str(self.year)
        if self.granularity == Granularity.MONTH:
            return self.start_date.strftime("%B %Y" if long else "%b %Y")
        return self.start_date.strftime("%b %d, %Y")

    def __str__(self) -> str:
        return self.key
