"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from spendwise.core import config as config_module
from spendwise.core.dates import FinancialDate
from spendwise.core.models import BillingCycle, Subscription, Transaction, TransactionType
from spendwise.core.money import Money
from spendwise.storage.memory import InMemoryFinanceStore

TODAY = date(2026, 10, 18)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def today() -> FinancialDate:
    """Fixed evaluation date so no test depends on the wall clock."""
    return FinancialDate(date=TODAY)


@pytest.fixture
def store() -> InMemoryFinanceStore:
    """Empty in-memory store."""
    return InMemoryFinanceStore()


@pytest.fixture
def make_transaction():
    """Factory for valid transactions with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(
        date_str: str = "2026-10-05",
        amount: str = "100",
        type: TransactionType = TransactionType.EXPENSE,
        category: str = "Food",
        **kwargs: Any,
    ) -> Transaction:
        return Transaction(
            id=kwargs.pop("id", f"txn-{next(counter)}"),
            date=FinancialDate.from_string(date_str),
            category=category,
            amount=Money.parse(amount),
            type=type,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_subscription():
    """Factory for valid subscriptions with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(end_date: str, start_date: str = "2026-01-01", is_active: bool = True, **kwargs: Any) -> Subscription:
        return Subscription(
            id=kwargs.pop("id", f"sub-{next(counter)}"),
            category=kwargs.pop("category", "Hostinger"),
            external_subscription_id=kwargs.pop("external_subscription_id", "WEB-01"),
            amount=Money.parse(kwargs.pop("amount", "299")),
            billing_cycle=kwargs.pop("billing_cycle", BillingCycle.MONTHLY),
            start_date=FinancialDate.from_string(start_date),
            end_date=FinancialDate.from_string(end_date),
            is_active=is_active,
        )

    return _make


@pytest.fixture
def sample_transaction_row() -> dict[str, Any]:
    """Sample store row for a transaction."""
    return {
        "id": "row-123",
        "user_id": "user-1",
        "date": "2026-10-02",
        "category": "Food",
        "subcategory": "Groceries",
        "amount": "249.50",
        "type": "expense",
        "description": "Weekly groceries",
        "subscription_id": None,
    }


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a fresh global config."""
    monkeypatch.setenv("SPENDWISE_ENV", "test")
    monkeypatch.setenv("SPENDWISE_DATA_DIR", str(tmp_path / "spendwise_data"))
    monkeypatch.setenv("SPENDWISE_USER", "test-user")
    monkeypatch.delenv("ALERT_EMAIL", raising=False)
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "aggregation: Tests for time-bucket and category aggregation")
    config.addinivalue_line("markers", "lifecycle: Tests for subscription lifecycle evaluation")
    config.addinivalue_line("markers", "budget: Tests for budget monitoring")
