"""
Budget Package

Monthly budget threshold checks and alerting.
"""

from .monitor import BudgetAlert, BudgetMonitor, BudgetStatus, evaluate_budget

__all__ = [
    "BudgetAlert",
    "BudgetMonitor",
    "BudgetStatus",
    "evaluate_budget",
]
