#!/usr/bin/env python3
"""
Main CLI Entry Point for finledger

Provides unified command-line interface for ledger import, export,
categorization and reporting.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config


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
    finledger - Personal Finance Ledger

    Import and export transactions as CSV or JSON snapshots, auto-categorize
    them, and report category breakdowns, monthly totals and budget progress.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["LEDGER_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    # Pick up overrides made above
    config = reload_config() if (config_env or debug) else get_config()

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("finledger").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from finledger import __author__, __version__

    click.echo(f"finledger v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Rules File: {config_obj.rules.rules_file or '(default patterns)'}")
    click.echo(f"  Default Currency: {config_obj.analysis.default_currency}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import command modules
from .report import report  # noqa: E402
from .transactions import categorize, export_csv, import_csv  # noqa: E402

main.add_command(import_csv)
main.add_command(export_csv)
main.add_command(categorize)
main.add_command(report)


if __name__ == "__main__":
    main()
