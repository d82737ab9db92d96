"""
Spendwise - Personal Finance Aggregation and Lifecycle Core

The engine behind a personal-finance dashboard: it buckets transactions into
reporting windows, tracks subscription expiry and turns new subscriptions into
linked expenses, and checks monthly spend against a budget.

Domain Packages:
- core: Money, dates, models, store protocol, configuration
- analysis: Time-bucket and category aggregation, tabular reports
- subscriptions: Subscription lifecycle evaluation
- budget: Monthly budget threshold monitoring
- storage: In-memory and file-backed stores
- cli: Command-line interface

Example Usage:
    from spendwise import aggregate_by_period, evaluate_subscriptions, evaluate_budget
    from spendwise.core import Granularity
"""

__version__ = "0.1.0"
__author__ = "Spendwise Contributors"

from .analysis.aggregation import PeriodWindow, aggregate_by_category, aggregate_by_period
from .budget.monitor import evaluate_budget
from .core.config import Environment, get_config
from .core.models import Budget, Subscription, Transaction
from .subscriptions.lifecycle import evaluate_subscriptions

__all__ = [
    "Budget",
    "Environment",
    "PeriodWindow",
    "Subscription",
    "Transaction",
    "aggregate_by_category",
    "aggregate_by_period",
    "evaluate_budget",
    "evaluate_subscriptions",
    "get_config",
]
