#!/usr/bin/env python3
"""
Ledger Facade

Single entry point bundling the rule engine, analytics and import/export
operations for callers that do not want to wire the packages themselves.

Example Usage:
    from finledger import ledger

    imported = ledger.import_csv(path.read_bytes()).unwrap()
    for warning in imported.warnings:
        print(warning)
"""

from collections.abc import Iterable, Sequence

from . import __version__
from .analysis.analytics import (
    BudgetProgress,
    PieSlice,
    TimeSeriesPoint,
    budget_progress,
    category_breakdown,
    monthly_totals,
)
from .core.currency import CurrencyCode
from .core.dates import YearMonth
from .core.models import Budget, Transaction
from .core.result import Result
from .exchange.csv_export import export_transactions
from .exchange.csv_import import parse_transactions
from .exchange.json_export import export_from_store
from .exchange.json_import import parse_snapshot
from .exchange.results import ExportResult, ImportResult
from .rules.base import Rule, RuleEngine
from .storage.store import LedgerStore

VERSION = __version__


def apply_rules(transaction: Transaction, rules: Iterable[Rule]) -> Transaction:
    """Run ``rules`` in order over one transaction."""
    return RuleEngine(rules).process(transaction)


def breakdown_for_month(
    transactions: Iterable[Transaction], month: YearMonth, currency: CurrencyCode
) -> list[PieSlice]:
    return category_breakdown(transactions, month, currency)


def totals_for_range(
    transactions: Iterable[Transaction], start: YearMonth, end: YearMonth, currency: CurrencyCode
) -> list[TimeSeriesPoint]:
    return monthly_totals(transactions, start, end, currency)


def progress_for_budgets(budgets: Iterable[Budget], transactions: Sequence[Transaction]) -> list[BudgetProgress]:
    return budget_progress(budgets, transactions)


def export_json(store: LedgerStore, month: YearMonth | None = None) -> Result[ExportResult]:
    """Export the store, optionally limited to one month, as a JSON snapshot."""
    return export_from_store(store, month)


def export_csv_transactions(transactions: Iterable[Transaction]) -> ExportResult:
    return export_transactions(transactions)


def import_json(payload: bytes | str) -> Result[ImportResult]:
    """Parse a JSON snapshot payload."""
    return parse_snapshot(payload)


def import_csv(payload: bytes | str) -> Result[ImportResult]:
    """Parse a CSV transactions payload, skipping malformed rows with warnings."""
    return parse_transactions(payload)
