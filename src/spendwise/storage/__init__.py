"""
Storage Package

FinanceStore implementations: in-memory and file-backed.
"""

from .base import RowStore
from .files import FileFinanceStore
from .memory import InMemoryFinanceStore

__all__ = [
    "FileFinanceStore",
    "InMemoryFinanceStore",
    "RowStore",
]
