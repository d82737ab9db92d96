#!/usr/bin/env python3
"""
Budget CLI - set the monthly budget and check spend against it.
"""

import click

from .common import as_of_option, get_service, get_symbol, get_user, handle_errors, parse_today, user_option


@click.group()
def budget() -> None:
    """Monthly budget commands."""
    pass


@budget.command(name="set")
@click.argument("amount")
@as_of_option
@user_option
@click.pass_context
@handle_errors
def set_budget(ctx: click.Context, amount: str, as_of: str | None, user: str | None) -> None:
    """
    Set this month's budget (replaces any previous value; 0 clears it).

    Example:
      spendwise budget set 5000
    """
    result = get_service(ctx).set_budget(get_user(ctx, user), parse_today(as_of), amount)
    click.echo(f"✅ Monthly budget for {result.year_month} set: {result.amount.format(get_symbol(ctx))}")


@budget.command()
@as_of_option
@user_option
@click.pass_context
@handle_errors
def status(ctx: click.Context, as_of: str | None, user: str | None) -> None:
    """Show spend against this month's budget."""
    result = get_service(ctx).budget_status(get_user(ctx, user), parse_today(as_of))
    symbol = get_symbol(ctx)

    click.echo(f"Budget for {result.year_month}")
    click.echo("=" * 40)
    if not result.is_set:
        click.echo("  Monthly Budget: not set")
        click.echo(f"  Spend: {result.spend.format(symbol)}")
        return

    click.echo(f"  Monthly Budget: {result.limit.format(symbol)}")
    click.echo(f"  Spend: {result.spend.format(symbol)}")
    click.echo(f"  Remaining: {result.remaining.format(symbol)}")
    click.echo(f"  Used {result.usage_percent:.1f}% of your budget")

    if result.alert is not None:
        click.echo(f"\n⚠️ You have crossed your budget limit by {result.alert.over_by.format(symbol)}!")
