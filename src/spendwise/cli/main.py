#!/usr/bin/env python3
"""
Main CLI Entry Point for Spendwise

Provides unified command-line interface for transactions, subscriptions,
budgets, and reports.
"""

import click

from ..core.config import get_config
from ..core.json_utils import format_json


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Spendwise - Personal Finance Dashboard Core

    Track income and expenses, subscription expiry, and monthly budgets.
    """
    ctx.ensure_object(dict)

    if config_env:
        import os

        os.environ["SPENDWISE_ENV"] = config_env

    if debug:
        import logging
        import os

        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("spendwise").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")


@main.command()
def version() -> None:
    """Show version information."""
    from spendwise import __author__, __version__

    click.echo(f"Spendwise v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the full configuration as JSON")
@click.pass_context
def config(ctx: click.Context, as_json: bool) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    if as_json:
        click.echo(format_json(config_obj.to_dict()))
        return

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Store Directory: {config_obj.storage.store_dir}")
    click.echo(f"  Default User: {config_obj.default_user}")
    click.echo(f"  Expiry Warning Days: {config_obj.lifecycle.expiry_warning_days}")
    click.echo(f"  Trend Months: {config_obj.reports.trend_months}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .budget import budget  # noqa: E402
from .report import report  # noqa: E402
from .subscriptions import subscriptions  # noqa: E402
from .transactions import transactions  # noqa: E402
from .wallet import wallet  # noqa: E402

main.add_command(transactions)
main.add_command(subscriptions)
main.add_command(budget)
main.add_command(report)
main.add_command(wallet)


if __name__ == "__main__":
    main()
