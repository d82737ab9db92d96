#!/usr/bin/env python3
"""
Report CLI - income/expense trends and category breakdowns.
"""

from pathlib import Path

import click

from ..analysis.aggregation import aggregate_by_period, casefold_category, exact_category
from ..analysis.reports import buckets_to_frame, categories_to_frame, export_csv
from ..core.dates import Granularity
from .common import as_of_option, get_service, get_symbol, get_user, handle_errors, parse_today, user_option


@click.group()
def report() -> None:
    """Aggregated reporting commands."""
    pass


@report.command()
@click.option(
    "--period",
    type=click.Choice([g.value for g in Granularity]),
    default=Granularity.MONTH.value,
    help="Bucket size (default: month)",
)
@click.option("--count", type=int, help="Number of periods (default: TREND_MONTHS)")
@click.option("--all-periods", is_flag=True, help="Group all transactions without a fixed window")
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False), help="Also write the table to CSV")
@as_of_option
@user_option
@click.pass_context
@handle_errors
def trend(
    ctx: click.Context,
    period: str,
    count: int | None,
    all_periods: bool,
    csv_path: str | None,
    as_of: str | None,
    user: str | None,
) -> None:
    """
    Show income, expense, and net per period, most recent first.

    Examples:
      spendwise report trend
      spendwise report trend --period year --count 3
      spendwise report trend --all-periods --csv trend.csv
    """
    service = get_service(ctx)
    user_id = get_user(ctx, user)
    granularity = Granularity(period)

    if all_periods:
        buckets = aggregate_by_period(service.store.list_transactions(user_id), granularity)
    else:
        if count is not None and count < 0:
            raise click.BadParameter("must be non-negative", param_hint="--count")
        buckets = service.trend(user_id, parse_today(as_of), periods=count, granularity=granularity)

    if not buckets:
        click.echo("No data for this report.")
        return

    symbol = get_symbol(ctx)
    for b in buckets:
        click.echo(
            f"{b.label:>14}  income {b.income.format(symbol):>14}  "
            f"expense {b.expense.format(symbol):>14}  net {b.net.format(symbol):>14}"
        )

    if csv_path:
        output = export_csv(buckets_to_frame(buckets), Path(csv_path))
        click.echo(f"\n✅ Report saved to: {output}")


@report.command()
@click.option("--ignore-case", is_flag=True, help="Group categories case-insensitively")
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False), help="Also write the table to CSV")
@as_of_option
@user_option
@click.pass_context
@handle_errors
def categories(
    ctx: click.Context, ignore_case: bool, csv_path: str | None, as_of: str | None, user: str | None
) -> None:
    """Show this month's expenses by category."""
    service = get_service(ctx)
    service.category_key = casefold_category if ignore_case else exact_category
    view = service.analytics(get_user(ctx, user), parse_today(as_of), months=1)

    frame = categories_to_frame(view.categories)
    if frame.empty:
        click.echo("No expenses this month.")
        return

    symbol = get_symbol(ctx)
    for row in frame.itertuples(index=False):
        click.echo(f"{row.Category:<24} {symbol}{row.Amount:>12,.2f}  {row.Share:5.1f}%")

    if csv_path:
        output = export_csv(frame.set_index("Category"), Path(csv_path))
        click.echo(f"\n✅ Report saved to: {output}")


@report.command()
@click.option("--months", type=int, help="Trend length (default: TREND_MONTHS)")
@as_of_option
@user_option
@click.pass_context
@handle_errors
def summary(ctx: click.Context, months: int | None, as_of: str | None, user: str | None) -> None:
    """Show analytics totals over the trend window."""
    service = get_service(ctx)
    view = service.analytics(get_user(ctx, user), parse_today(as_of), months=months)
    symbol = get_symbol(ctx)
    n = len(view.trend)

    click.echo(f"Total Income ({n} months): {view.total_income.format(symbol)}")
    click.echo(f"Total Expenses ({n} months): {view.total_expense.format(symbol)}")
    click.echo(f"Avg Monthly Spending: {view.average_monthly_spending.format(symbol)}")
