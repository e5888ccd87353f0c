#!/usr/bin/env python3
"""
Shared CLI helpers for reading snapshots and writing results.
"""

from pathlib import Path

import click

from ..core.config import get_config
from ..exchange.json_import import parse_snapshot
from ..exchange.results import ExportResult, ImportResult


def load_snapshot(path: str | Path) -> ImportResult:
    """Read and parse a JSON snapshot file, echoing any warnings."""
    result = parse_snapshot(Path(path).read_bytes())
    if result.is_err:
        raise click.ClickException(f"❌ {path}: {result.message}")
    echo_warnings(result.value.warnings)
    return result.value


def echo_warnings(warnings: tuple[str, ...]) -> None:
    for warning in warnings:
        click.echo(f"⚠️  {warning}", err=True)


def save_export(export: ExportResult, output: str | None) -> Path:
    """Write an export to ``output`` or to the configured export directory."""
    destination = Path(output) if output else get_config().output_dir
    path = export.write_to(destination)
    click.echo(f"✅ Saved to: {path}")
    return path
