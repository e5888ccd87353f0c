#!/usr/bin/env python3
"""
Transaction CLI - Import, Export and Categorization Commands
"""

import logging
from pathlib import Path

import click

from ..core.models import PREDEFINED_CATEGORIES
from ..exchange.csv_export import export_transactions
from ..exchange.csv_import import parse_transactions
from ..exchange.json_export import build_snapshot, export_snapshot
from ..rules.loader import load_engine
from .common import echo_warnings, load_snapshot, save_export

logger = logging.getLogger(__name__)


@click.command("import-csv")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", help="Snapshot file to write (default: export directory)")
@click.pass_context
def import_csv(ctx: click.Context, input_file: str, output: str | None) -> None:
    """
    Convert a transactions CSV into a JSON snapshot.

    Malformed rows are skipped and reported as warnings.

    Examples:
      finledger import-csv transactions.csv
      finledger import-csv transactions.csv --output backup.json
    """
    result = parse_transactions(Path(input_file).read_bytes())
    if result.is_err:
        raise click.ClickException(f"❌ {input_file}: {result.message}")

    imported = result.value
    echo_warnings(imported.warnings)

    snapshot = build_snapshot(PREDEFINED_CATEGORIES, (), imported.transactions)
    save_export(export_snapshot(snapshot), output)
    click.echo(f"Imported {len(imported.transactions)} transactions ({len(imported.warnings)} warnings)")


@click.command("export-csv")
@click.argument("snapshot_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", help="CSV file to write (default: export directory)")
def export_csv(snapshot_file: str, output: str | None) -> None:
    """
    Export the transactions of a JSON snapshot as CSV.

    Examples:
      finledger export-csv ledger-snapshot.json --output january.csv
    """
    imported = load_snapshot(snapshot_file)
    save_export(export_transactions(imported.transactions), output)
    click.echo(f"Exported {len(imported.transactions)} transactions")


@click.command()
@click.argument("snapshot_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--rules-file", type=click.Path(exists=True, dir_okay=False), help="YAML rules file")
@click.option("--output", "-o", help="Snapshot file to write (default: export directory)")
@click.pass_context
def categorize(ctx: click.Context, snapshot_file: str, rules_file: str | None, output: str | None) -> None:
    """
    Auto-categorize every transaction in a snapshot.

    Transactions that already have a category are left unchanged.

    Examples:
      finledger categorize ledger-snapshot.json
      finledger categorize ledger-snapshot.json --rules-file rules.yaml
    """
    imported = load_snapshot(snapshot_file)
    try:
        engine = load_engine(rules_file)
        processed = engine.apply_all(imported.transactions)
    except ValueError as e:
        raise click.ClickException(f"❌ Categorization failed: {e}") from e

    changed = sum(1 for before, after in zip(imported.transactions, processed) if before != after)
    if ctx.obj.get("verbose", False):
        click.echo(f"Rules: {', '.join(rule.name for rule in engine.rules)}")

    snapshot = build_snapshot(imported.categories, imported.budgets, processed)
    save_export(export_snapshot(snapshot), output)
    click.echo(f"Categorized {changed} of {len(processed)} transactions")
