#!/usr/bin/env python3
"""
Error Types

Exceptions raised by the spendwise core. Validation failures are InvalidInput
(a ValueError so callers that already catch ValueError keep working); failures
talking to the store collaborator surface as StoreUnavailable.
"""


class SpendwiseError(Exception):
    """Base class for all spendwise errors."""

    pass


class InvalidInput(SpendwiseError, ValueError):
    """Raised when a date, amount, or entity fails validation."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class StoreUnavailable(SpendwiseError):
    """
    Raised when the store collaborator cannot be read or written.

    Aggregation and lifecycle evaluation hold no partial-commit state, so the
    failed operation is always safe to retry.
    """

    pass
