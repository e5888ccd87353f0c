#!/usr/bin/env python3
"""
Report CLI - Ledger Analysis Commands

Category breakdowns, monthly totals and budget progress computed from a JSON
snapshot.
"""

from pathlib import Path

import click

from ..analysis.analytics import budget_progress, category_breakdown, monthly_totals
from ..analysis.charts import render_breakdown, render_monthly_totals
from ..analysis.frames import breakdown_frame, progress_frame, totals_frame
from ..core.config import get_config
from ..core.currency import CurrencyCode
from ..core.dates import YearMonth
from ..core.json_utils import write_json
from .common import load_snapshot


def _year_month(ctx: click.Context, param: click.Parameter, value: str | None) -> YearMonth | None:
    if value is None:
        return None
    try:
        return YearMonth.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _currency(value: str | None) -> CurrencyCode:
    if not value:
        return get_config().default_currency
    try:
        return CurrencyCode(value.upper())
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--currency") from e


@click.group()
def report() -> None:
    """Ledger analysis and reporting commands."""
    pass


@report.command()
@click.argument("snapshot_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--month", required=True, callback=_year_month, help="Month to analyze (YYYY-MM)")
@click.option("--currency", help="Currency code (default: LEDGER_DEFAULT_CURRENCY)")
@click.option("--chart", is_flag=True, help="Also render a pie chart")
@click.option("--output", "-o", help="Write the breakdown as JSON")
def breakdown(snapshot_file: str, month: YearMonth, currency: str | None, chart: bool, output: str | None) -> None:
    """
    Show expense totals per category for one month.

    Examples:
      finledger report breakdown ledger-snapshot.json --month 2024-01
    """
    imported = load_snapshot(snapshot_file)
    slices = category_breakdown(imported.transactions, month, _currency(currency))

    if not slices:
        click.echo(f"No categorized expenses in {month}")
        return

    click.echo(f"Category breakdown for {month}:")
    click.echo(breakdown_frame(slices).to_string(index=False))

    if output:
        write_json(output, [{"categoryId": s.category_id.value, "total": s.total.to_dict()} for s in slices])
        click.echo(f"✅ Saved to: {output}")
    if chart:
        chart_path = render_breakdown(slices, get_config().analysis.output_dir / f"breakdown-{month}.png")
        click.echo(f"✅ Chart saved to: {chart_path}")


@report.command()
@click.argument("snapshot_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--start", required=True, callback=_year_month, help="First month (YYYY-MM)")
@click.option("--end", required=True, callback=_year_month, help="Last month (YYYY-MM)")
@click.option("--currency", help="Currency code (default: LEDGER_DEFAULT_CURRENCY)")
@click.option("--chart", is_flag=True, help="Also render a bar chart")
def totals(snapshot_file: str, start: YearMonth, end: YearMonth, currency: str | None, chart: bool) -> None:
    """
    Show net signed totals for every month in a range.

    Examples:
      finledger report totals ledger-snapshot.json --start 2024-01 --end 2024-06 --chart
    """
    if start > end:
        raise click.BadParameter("--start must not be after --end")

    imported = load_snapshot(snapshot_file)
    points = monthly_totals(imported.transactions, start, end, _currency(currency))

    click.echo(f"Monthly totals {start} to {end}:")
    click.echo(totals_frame(points).to_string())

    if chart:
        chart_path = render_monthly_totals(
            points, get_config().analysis.output_dir / f"monthly-totals-{start}-{end}.png"
        )
        click.echo(f"✅ Chart saved to: {chart_path}")


@report.command()
@click.argument("snapshot_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", help="Write budget progress as JSON")
def budgets(snapshot_file: str, output: str | None) -> None:
    """
    Show spending against every budget in a snapshot.

    Examples:
      finledger report budgets ledger-snapshot.json
    """
    imported = load_snapshot(snapshot_file)
    progress = budget_progress(imported.budgets, imported.transactions)

    if not progress:
        click.echo("No budgets in snapshot")
        return

    click.echo("Budget progress:")
    click.echo(progress_frame(progress).to_string(index=False))

    over = [p for p in progress if p.is_over_budget]
    if over:
        click.echo(f"\n❌ Over budget: {', '.join(p.budget_id.value for p in over)}")

    if output:
        write_json(
            Path(output),
            [
                {
                    "budgetId": p.budget_id.value,
                    "spent": p.spent.to_dict(),
                    "remaining": p.remaining.to_dict(),
                    "percentUsed": f"{p.percent_used:f}",
                }
                for p in progress
            ],
        )
        click.echo(f"✅ Saved to: {output}")
