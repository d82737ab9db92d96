#!/usr/bin/env python3
"""
Transactions CLI - record, list, and delete income and expense entries.
"""

import click

from ..core.models import TransactionType
from .common import get_service, get_symbol, get_user, handle_errors, parse_today, user_option


@click.group()
def transactions() -> None:
    """Transaction recording and history commands."""
    pass


@transactions.command()
@click.option(
    "--type",
    "type_",
    type=click.Choice([t.value for t in TransactionType]),
    default=TransactionType.EXPENSE.value,
    help="Transaction type (default: expense)",
)
@click.option("--category", required=True, help="Category label, e.g. Food")
@click.option("--subcategory", default="", help="Subcategory label")
@click.option("--amount", required=True, help="Amount, e.g. 249.50")
@click.option("--date", "date_str", help="Transaction date (YYYY-MM-DD, default: today)")
@click.option("--description", help="Optional description")
@user_option
@click.pass_context
@handle_errors
def add(
    ctx: click.Context,
    type_: str,
    category: str,
    subcategory: str,
    amount: str,
    date_str: str | None,
    description: str | None,
    user: str | None,
) -> None:
    """
    Record a transaction.

    Examples:
      spendwise transactions add --category Food --amount 249.50
      spendwise transactions add --type income --category Salary --amount 50000 --date 2026-10-01
    """
    service = get_service(ctx)
    transaction = service.record_transaction(
        get_user(ctx, user),
        date=parse_today(date_str, "--date"),
        category=category,
        subcategory=subcategory,
        amount=amount,
        type=type_,
        description=description,
    )
    click.echo(
        f"✅ Recorded {transaction.type.value} {transaction.amount.format(get_symbol(ctx))} "
        f"({transaction.category}) on {transaction.date} [{transaction.id}]"
    )


@transactions.command(name="list")
@click.option("--all", "show_all", is_flag=True, help="Show all transactions instead of the most recent")
@user_option
@click.pass_context
@handle_errors
def list_transactions(ctx: click.Context, show_all: bool, user: str | None) -> None:
    """List recent transactions (newest first)."""
    service = get_service(ctx)
    user_id = get_user(ctx, user)
    symbol = get_symbol(ctx)

    if show_all:
        items = service.store.list_transactions(user_id)
    else:
        items = service.recent_transactions(user_id)

    if not items:
        click.echo("No transactions yet. Start tracking your expenses!")
        return

    for t in items:
        sign = "+" if t.is_income else "-"
        label = f"{t.category} / {t.subcategory}" if t.subcategory else t.category
        click.echo(f"{t.date}  {sign}{t.amount.format(symbol):>14}  {label}  [{t.id}]")
        if t.description:
            click.echo(f"            {t.description}")


@transactions.command()
@user_option
@click.pass_context
@handle_errors
def history(ctx: click.Context, user: str | None) -> None:
    """Show transaction history grouped by month."""
    service = get_service(ctx)
    symbol = get_symbol(ctx)
    groups = service.transactions_by_month(get_user(ctx, user))

    if not groups:
        click.echo("No transactions yet.")
        return

    for bucket, members in groups:
        click.echo(f"\n{bucket.period.label(long=True)}")
        click.echo(
            f"  Income {bucket.income.format(symbol)}  Expense {bucket.expense.format(symbol)}  "
            f"Net {bucket.net.format(symbol)}"
        )
        click.echo(f"  {'-' * 56}")
        for t in members:
            sign = "+" if t.is_income else "-"
            click.echo(f"  {t.date}  {sign}{t.amount.format(symbol):>14}  {t.category}")


@transactions.command()
@click.argument("transaction_id")
@click.pass_context
@handle_errors
def delete(ctx: click.Context, transaction_id: str) -> None:
    """Delete a transaction by id."""
    get_service(ctx).delete_transaction(transaction_id)
    click.echo(f"Deleted transaction {transaction_id}")
