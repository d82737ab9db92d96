#!/usr/bin/env python3
"""
File-Backed Store

FinanceStore persisted under a local directory:
- transactions.json / subscriptions.json: row lists, newest first
- budgets.yaml: {user_id: {YYYY-MM: amount}}

Any I/O or decode failure is raised as StoreUnavailable with the original
error chained.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from ..core.config import StorageConfig
from ..core.errors import StoreUnavailable
from ..core.json_utils import read_json, write_json
from .base import SUBSCRIPTIONS, TRANSACTIONS, RowStore

logger = logging.getLogger(__name__)


class FileFinanceStore(RowStore):
    """FinanceStore over JSON and YAML files in one directory."""

    def __init__(self, store_dir: Path, config: StorageConfig | None = None):
        """
        Initialize the file store.

        Args:
            store_dir: Directory holding the store files (created if missing)
            config: File names; defaults to StorageConfig(store_dir)
        """
        self.store_dir = Path(store_dir)
        self.config = config or StorageConfig(store_dir=self.store_dir)
        self._files = {
            TRANSACTIONS: self.store_dir / self.config.transactions_file,
            SUBSCRIPTIONS: self.store_dir / self.config.subscriptions_file,
        }
        self.budgets_file = self.store_dir / self.config.budgets_file

    @classmethod
    def from_config(cls, config: StorageConfig) -> "FileFinanceStore":
        return cls(config.store_dir, config)

    def _read_rows(self, table: str) -> list[dict[str, Any]]:
        path = self._files[table]
        try:
            data = read_json(path, default=[])
        except (OSError, ValueError) as e:  # ValueError covers JSON and UTF-8 decode errors
            raise StoreUnavailable(f"Cannot read {path}: {e}") from e

        if not isinstance(data, list):
            raise StoreUnavailable(f"Invalid {table} file format: expected list, got {type(data).__name__}")
        return data

    def _write_rows(self, table: str, rows: list[dict[str, Any]]) -> None:
        path = self._files[table]
        try:
            write_json(path, rows)
        except OSError as e:
            raise StoreUnavailable(f"Cannot write {path}: {e}") from e
        logger.debug("Wrote %d %s rows to %s", len(rows), table, path)

    def _read_budgets(self) -> dict[str, dict[str, str]]:
        if not self.budgets_file.exists():
            return {}
        try:
            with open(self.budgets_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise StoreUnavailable(f"Cannot read {self.budgets_file}: {e}") from e

        if not isinstance(data, dict):
            raise StoreUnavailable(f"Invalid budgets file format: expected mapping, got {type(data).__name__}")
        budgets = {}
        for user, months in data.items():
            if not isinstance(months, dict):
                raise StoreUnavailable(
                    f"Invalid budgets file format: expected mapping for {user}, got {type(months).__name__}"
                )
            budgets[str(user)] = {str(month): str(amount) for month, amount in months.items()}
        return budgets

    def _write_budgets(self, budgets: dict[str, dict[str, str]]) -> None:
        try:
            self.store_dir.mkdir(parents=True, exist_ok=True)
            with open(self.budgets_file, "w", encoding="utf-8") as f:
                yaml.safe_dump(budgets, f, default_flow_style=False, sort_keys=True)
        except OSError as e:
            raise StoreUnavailable(f"Cannot write {self.budgets_file}: {e}") from e

    def exists(self) -> bool:
        """Check if any store file exists."""
        return any(path.exists() for path in [*self._files.values(), self.budgets_file])

    def last_modified(self) -> datetime | None:
        """Get timestamp of the most recently modified store file."""
        mtimes = [p.stat().st_mtime for p in [*self._files.values(), self.budgets_file] if p.exists()]
        if not mtimes:
            return None
        return datetime.fromtimestamp(max(mtimes))

    def summary_text(self) -> str:
        """Get human-readable summary of the store contents."""
        if not self.exists():
            return f"No data in {self.store_dir}"
        transactions = len(self._read_rows(TRANSACTIONS))
        subscriptions = len(self._read_rows(SUBSCRIPTIONS))
        return f"{transactions} transactions, {subscriptions} subscriptions in {self.store_dir}"
