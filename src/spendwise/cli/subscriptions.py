#!/usr/bin/env python3
"""
Subscriptions CLI - manage subscriptions and surface expiry alerts.

Listing runs the expiry sweep: subscriptions past their end date are marked
inactive and reported, and those ending within the warning window are flagged.
"""

import click

from ..core.models import BillingCycle
from ..subscriptions.lifecycle import AlertKind
from .common import (
    as_of_option,
    get_service,
    get_symbol,
    get_user,
    handle_errors,
    parse_today,
    user_option,
)


@click.group()
def subscriptions() -> None:
    """Subscription tracking commands."""
    pass


@subscriptions.command()
@click.option("--category", required=True, help="Provider/category, e.g. Hostinger")
@click.option("--id", "external_id", default="", help="Your subscription id/label")
@click.option("--amount", required=True, help="Billing amount")
@click.option(
    "--cycle",
    type=click.Choice([c.value for c in BillingCycle]),
    default=BillingCycle.MONTHLY.value,
    help="Billing cycle (default: monthly)",
)
@click.option("--start", "start_str", required=True, help="Start date (YYYY-MM-DD)")
@click.option("--end", "end_str", required=True, help="End date (YYYY-MM-DD)")
@click.option("--inactive", is_flag=True, help="Create the subscription as inactive")
@as_of_option
@user_option
@click.pass_context
@handle_errors
def add(
    ctx: click.Context,
    category: str,
    external_id: str,
    amount: str,
    cycle: str,
    start_str: str,
    end_str: str,
    inactive: bool,
    as_of: str | None,
    user: str | None,
) -> None:
    """
    Add a subscription and record its linked expense.

    Examples:
      spendwise subscriptions add --category Hostinger --id WEB-01 --amount 299 \\
          --start 2026-10-01 --end 2027-09-30 --cycle yearly
    """
    service = get_service(ctx)
    created = service.add_subscription(
        get_user(ctx, user),
        parse_today(as_of),
        category=category,
        external_subscription_id=external_id,
        amount=amount,
        billing_cycle=cycle,
        start_date=start_str,
        end_date=end_str,
        is_active=not inactive,
    )
    symbol = get_symbol(ctx)
    click.echo(f"✅ Added subscription {created.subscription.display_name} [{created.subscription.id}]")
    click.echo(
        f"   Linked expense {created.linked_transaction.amount.format(symbol)} "
        f"on {created.linked_transaction.date} [{created.linked_transaction.id}]"
    )


@subscriptions.command(name="list")
@as_of_option
@user_option
@click.pass_context
@handle_errors
def list_subscriptions(ctx: click.Context, as_of: str | None, user: str | None) -> None:
    """List subscriptions, marking expired ones inactive."""
    service = get_service(ctx)
    view = service.subscriptions(get_user(ctx, user), parse_today(as_of))
    symbol = get_symbol(ctx)

    for alert in view.alerts:
        prefix = "⚠️ " if alert.kind == AlertKind.EXPIRED else "⏳"
        click.echo(f"{prefix} {alert.message}")
    if view.alerts:
        click.echo()

    if not view.subscriptions:
        click.echo("No subscriptions added yet")
        return

    for sub in view.subscriptions:
        status = "Active" if sub.is_active else "Inactive"
        click.echo(f"{sub.category}  {sub.amount.format(symbol)}/{sub.billing_cycle.value}  {status}  [{sub.id}]")
        if sub.external_subscription_id:
            click.echo(f"  ID: {sub.external_subscription_id}")
        click.echo(f"  {sub.start_date} → {sub.end_date}")


@subscriptions.command()
@click.argument("subscription_id")
@user_option
@click.pass_context
@handle_errors
def toggle(ctx: click.Context, subscription_id: str, user: str | None) -> None:
    """Manually activate or deactivate a subscription."""
    service = get_service(ctx)
    matches = [s for s in service.store.list_subscriptions(get_user(ctx, user)) if s.id == subscription_id]
    if not matches:
        raise click.ClickException(f"Subscription not found: {subscription_id}")

    updated = service.lifecycle.toggle(matches[0])
    click.echo(f"Subscription {'activated' if updated.is_active else 'deactivated'}")


@subscriptions.command()
@click.argument("subscription_id")
@click.pass_context
@handle_errors
def delete(ctx: click.Context, subscription_id: str) -> None:
    """Delete a subscription (its linked expense is kept)."""
    get_service(ctx).lifecycle.delete(subscription_id)
    click.echo(f"Deleted subscription {subscription_id}")
