"""
Core Utilities Package

Primitives shared by every spendwise component.

This package provides:
- Money and currency parsing with integer arithmetic for precision
- Calendar dates and periods for bucketing
- Transaction, Subscription, and Budget models
- The FinanceStore protocol the core reads and writes through
- Error types and environment-based configuration
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import cents_to_str, format_cents, parse_amount_to_cents, percent_of, to_decimal
from .dates import FinancialDate, Granularity, Period
from .datastore import FinanceStore
from .errors import InvalidInput, SpendwiseError, StoreUnavailable
from .models import (
    BillingCycle,
    Budget,
    Subscription,
    Transaction,
    TransactionType,
    parse_subscriptions,
    parse_transactions,
)
from .money import Money

__all__ = [
    "BillingCycle",
    "Budget",
    "Config",
    "Environment",
    "FinanceStore",
    "FinancialDate",
    "Granularity",
    "InvalidInput",
    "Money",
    "Period",
    "SpendwiseError",
    "StoreUnavailable",
    "Subscription",
    "Transaction",
    "TransactionType",
    "cents_to_str",
    "format_cents",
    "get_config",
    "get_data_dir",
    "is_development",
    "is_production",
    "is_test",
    "parse_amount_to_cents",
    "parse_subscriptions",
    "parse_transactions",
    "percent_of",
    "reload_config",
    "to_decimal",
]
