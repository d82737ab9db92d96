#!/usr/bin/env python3
"""
In-Memory Store

FinanceStore held entirely in process memory. Used by tests and by callers
that load rows from elsewhere (e.g. a backend response) and only need the
core's evaluation on top.
"""

import copy
from typing import Any

from ..core.errors import StoreUnavailable
from .base import SUBSCRIPTIONS, TRANSACTIONS, RowStore


class InMemoryFinanceStore(RowStore):
    """
    FinanceStore backed by Python lists and dicts.

    Rows are deep-copied in and out, so callers never share mutable state with
    the store. Setting available to False makes every call raise
    StoreUnavailable, simulating a backend outage.
    """

    def __init__(
        self,
        transactions: list[dict[str, Any]] | None = None,
        subscriptions: list[dict[str, Any]] | None = None,
        budgets: dict[str, dict[str, str]] | None = None,
    ):
        self._tables: dict[str, list[dict[str, Any]]] = {
            TRANSACTIONS: copy.deepcopy(transactions or []),
            SUBSCRIPTIONS: copy.deepcopy(subscriptions or []),
        }
        self._budgets = copy.deepcopy(budgets or {})
        self.available = True
        self.write_count = 0

    def _check_available(self) -> None:
        if not self.available:
            raise StoreUnavailable("in-memory store is marked unavailable")

    def _read_rows(self, table: str) -> list[dict[str, Any]]:
        self._check_available()
        return copy.deepcopy(self._tables[table])

    def _write_rows(self, table: str, rows: list[dict[str, Any]]) -> None:
        self._check_available()
        self._tables[table] = copy.deepcopy(rows)
        self.write_count += 1

    def _read_budgets(self) -> dict[str, dict[str, str]]:
        self._check_available()
        return copy.deepcopy(self._budgets)

    def _write_budgets(self, budgets: dict[str, dict[str, str]]) -> None:
        self._check_available()
        self._budgets = copy.deepcopy(budgets)
        self.write_count += 1

    def rows(self, table: str) -> list[dict[str, Any]]:
        """Raw rows of a table (copy), for inspection."""
        return copy.deepcopy(self._tables[table])
