#!/usr/bin/env python3
"""
JSON Snapshot Export

Builds deterministic ledger snapshots and serializes them to JSON. Identical
input always produces byte-identical output apart from ``exportedAt``.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from ..core.config import get_config
from ..core.dates import YearMonth
from ..core.ids import CategoryId
from ..core.json_utils import format_json
from ..core.models import Budget, Category, Transaction
from ..core.result import Result, err, ok
from ..storage.memory import budget_sort_key, category_sort_key
from ..storage.query import QuerySpec, transaction_sort_key
from ..storage.store import LedgerStore
from .results import ExportResult
from .snapshot import LedgerSnapshot

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with a ``Z`` suffix."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_snapshot(
    categories: Iterable[Category],
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    month: YearMonth | None = None,
    exported_at: str | None = None,
) -> LedgerSnapshot:
    """
    Assemble a sorted snapshot.

    With ``month``, categories are reduced to those referenced by the given
    transactions and budgets plus every ancestor reachable through
    ``parent_id``, so the hierarchy stays valid on reimport. Budgets and
    transactions are expected to be month-filtered by the caller.

    Args:
        categories: Candidate categories
        budgets: Budgets to include
        transactions: Transactions to include
        month: Optional month filter applied to the category set
        exported_at: Timestamp override (defaults to now, UTC)

    Returns:
        LedgerSnapshot with categories by (name, id), budgets by
        (month, name, id) and transactions by (date, id)
    """
    budget_list = sorted(budgets, key=budget_sort_key)
    transaction_list = sorted(transactions, key=transaction_sort_key)
    category_list = list(categories)

    if month is not None:
        referenced = {tx.category_id for tx in transaction_list if tx.category_id is not None}
        for budget in budget_list:
            referenced.update(budget.category_ids)
        category_list = _with_ancestors(category_list, referenced)

    currency = transaction_list[0].currency if transaction_list else None

    return LedgerSnapshot(
        exported_at=exported_at or utc_timestamp(),
        currency=currency,
        categories=tuple(sorted(category_list, key=category_sort_key)),
        budgets=tuple(budget_list),
        transactions=tuple(transaction_list),
    )


def _with_ancestors(categories: list[Category], referenced: set[CategoryId]) -> list[Category]:
    by_id = {category.id: category for category in categories}
    included: set[CategoryId] = set()
    pending = [cid for cid in referenced if cid in by_id]
    while pending:
        current = pending.pop()
        if current in included:
            continue
        included.add(current)
        parent = by_id[current].parent_id
        if parent is not None and parent in by_id and parent not in included:
            pending.append(parent)
    return [by_id[cid] for cid in included]


def export_snapshot(snapshot: LedgerSnapshot, pretty: bool = True) -> ExportResult:
    """Serialize a snapshot to UTF-8 JSON."""
    config = get_config()
    indent = config.exports.json_indent if pretty else None
    text = format_json(snapshot.to_dict(), indent=indent)
    logger.info(
        "Exported snapshot: %d categories, %d budgets, %d transactions",
        len(snapshot.categories),
        len(snapshot.budgets),
        len(snapshot.transactions),
    )
    return ExportResult(
        content=text.encode("utf-8"),
        mime_type=JSON_MIME_TYPE,
        file_name=config.exports.json_filename,
    )


def export_from_store(store: LedgerStore, month: YearMonth | None = None) -> Result[ExportResult]:
    """
    Export a store (optionally one month of it) as a JSON snapshot.

    Returns:
        Ok(ExportResult), or the first Err reported by the store
    """
    categories = store.list_categories()
    if categories.is_err:
        return categories
    budgets = store.list_budgets(month)
    if budgets.is_err:
        return budgets
    spec = QuerySpec.for_month(month) if month is not None else QuerySpec()
    transactions = store.query_transactions(spec)
    if transactions.is_err:
        return transactions

    try:
        snapshot = build_snapshot(categories.value, budgets.value, transactions.value, month=month)
    except ValueError as e:
        return err(f"Failed to build snapshot: {e}", e)
    return ok(export_snapshot(snapshot))
