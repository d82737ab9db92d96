#!/usr/bin/env python3
"""
Wallet CLI - all-time balance and top-ups.
"""

import click

from .common import as_of_option, get_service, get_symbol, get_user, handle_errors, parse_today, user_option


@click.group()
def wallet() -> None:
    """Wallet balance commands."""
    pass


@wallet.command()
@user_option
@click.pass_context
@handle_errors
def show(ctx: click.Context, user: str | None) -> None:
    """Show balance (all income), spend (all expenses), and remaining."""
    summary = get_service(ctx).wallet(get_user(ctx, user))
    symbol = get_symbol(ctx)

    click.echo(f"Balance:   {summary.balance.format(symbol)}")
    click.echo(f"Spend:     {summary.spend.format(symbol)}")
    click.echo(f"Remaining: {summary.remaining.format(symbol)}")


@wallet.command(name="top-up")
@click.argument("amount")
@as_of_option
@user_option
@click.pass_context
@handle_errors
def top_up(ctx: click.Context, amount: str, as_of: str | None, user: str | None) -> None:
    """
    Add money to the wallet as an income transaction.

    Example:
      spendwise wallet top-up 1500
    """
    transaction = get_service(ctx).top_up(get_user(ctx, user), amount, parse_today(as_of))
    click.echo(f"✅ {transaction.amount.format(get_symbol(ctx))} added to wallet")
