"""
Financial Analysis Package

Aggregation of transactions into reporting views.

Key Components:
- aggregation: time-bucket (day/month/year) and category aggregation
- reports: pandas DataFrame views and CSV export of aggregation results
"""

from .aggregation import (
    Bucket,
    CategoryTotal,
    PeriodWindow,
    aggregate_by_category,
    aggregate_by_period,
    casefold_category,
    current_month_bucket,
    current_month_expenses,
    exact_category,
    filter_transactions,
    sum_buckets,
)
from .reports import buckets_to_frame, categories_to_frame, export_csv

__all__ = [
    "Bucket",
    "CategoryTotal",
    "PeriodWindow",
    "aggregate_by_category",
    "aggregate_by_period",
    "buckets_to_frame",
    "casefold_category",
    "categories_to_frame",
    "current_month_bucket",
    "current_month_expenses",
    "exact_category",
    "export_csv",
    "filter_transactions",
    "sum_buckets",
]
