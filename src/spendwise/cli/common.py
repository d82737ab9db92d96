#!/usr/bin/env python3
"""
Shared CLI helpers: service construction, date options, and error mapping.
"""

from collections.abc import Callable
from datetime import date
from functools import wraps
from typing import Any

import click

from ..core.config import get_config
from ..core.dates import FinancialDate
from ..core.errors import InvalidInput, StoreUnavailable
from ..notifications import LoggingNotifier
from ..service import FinanceService
from ..storage.files import FileFinanceStore


def get_service(ctx: click.Context) -> FinanceService:
    """Build (once per invocation) the service over the configured file store."""
    obj = ctx.ensure_object(dict)
    if "service" not in obj:
        config = obj.get("config") or get_config()
        store = FileFinanceStore.from_config(config.storage)
        obj["service"] = FinanceService.from_config(store, config, notifier=LoggingNotifier())
    return obj["service"]


def get_user(ctx: click.Context, user: str | None) -> str:
    """Explicit --user, else the configured default user."""
    if user:
        return user
    obj = ctx.ensure_object(dict)
    config = obj.get("config") or get_config()
    return config.default_user


def get_symbol(ctx: click.Context) -> str:
    obj = ctx.ensure_object(dict)
    config = obj.get("config") or get_config()
    return config.reports.currency_symbol


def parse_today(value: str | None, option: str = "--as-of") -> FinancialDate:
    """Parse a YYYY-MM-DD date option, defaulting to today."""
    if not value:
        return FinancialDate(date=date.today())
    try:
        return FinancialDate.from_string(value, field=option)
    except InvalidInput as e:
        raise click.BadParameter(f"Invalid date format: {value}. Use YYYY-MM-DD", param_hint=option) from e


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn core validation and store errors into clean CLI failures."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except InvalidInput as e:
            raise click.ClickException(f"Invalid input: {e}") from e
        except StoreUnavailable as e:
            raise click.ClickException(f"Store unavailable (safe to retry): {e}") from e

    return wrapper


user_option = click.option("--user", "-u", help="User id (default: SPENDWISE_USER)")
as_of_option = click.option("--as-of", "as_of", help="Evaluate as of this date (YYYY-MM-DD, default: today)")
