#!/usr/bin/env python3
"""
Tabular Report Views

pandas DataFrame views of aggregation results for tables, CSV export, and
chart layers. Amount columns hold Decimal values (object dtype) so exported
figures match the integer arithmetic that produced them.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from ..core.currency import percent_of
from .aggregation import Bucket, CategoryTotal

logger = logging.getLogger(__name__)

BUCKET_COLUMNS = ["Period", "Label", "Income", "Expense", "Net", "Transactions"]
CATEGORY_COLUMNS = ["Category", "Amount", "Share", "Transactions"]


def buckets_to_frame(buckets: Iterable[Bucket], chronological: bool = False) -> pd.DataFrame:
    """
    Convert buckets to a DataFrame indexed by period key.

    Args:
        buckets: Buckets as returned by aggregate_by_period (most recent first)
        chronological: If True, order oldest first (the order charts plot in)
    """
    rows = [
        {
            "Period": b.period.key,
            "Label": b.label,
            "Income": b.income.to_decimal(),
            "Expense": b.expense.to_decimal(),
            "Net": b.net.to_decimal(),
            "Transactions": b.transaction_count,
        }
        for b in buckets
    ]
    df = pd.DataFrame(rows, columns=BUCKET_COLUMNS)
    if chronological:
        df = df.iloc[::-1]
    return df.set_index("Period")


def categories_to_frame(totals: Iterable[CategoryTotal]) -> pd.DataFrame:
    """
    Convert category totals to a DataFrame sorted by amount (largest first).

    Share is each category's percentage of the overall total.
    """
    totals = list(totals)
    grand_total = sum(t.amount.to_cents() for t in totals)
    rows = [
        {
            "Category": t.name,
            "Amount": t.amount.to_decimal(),
            "Share": percent_of(t.amount.to_cents(), grand_total),
            "Transactions": t.transaction_count,
        }
        for t in sorted(totals, key=lambda t: (-t.amount.to_cents(), t.name))
    ]
    return pd.DataFrame(rows, columns=CATEGORY_COLUMNS)


def export_csv(frame: pd.DataFrame, output_file: Path) -> Path:
    """Write a report frame to CSV, creating parent directories."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output_file)
    logger.info("Wrote %d report rows to %s", len(frame), output_file)
    return output_file
