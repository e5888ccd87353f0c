#!/usr/bin/env python3
"""
JSON Snapshot Import

Parsing is all-or-nothing: malformed JSON or an invalid entity fails the whole
call. Duplicate ids and dangling category references are downgraded to
warnings.
"""

import json
import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from ..core.config import get_config
from ..core.result import Result, err, ok
from .results import ImportResult, decode_payload, log_warnings
from .snapshot import LedgerSnapshot

logger = logging.getLogger(__name__)

E = TypeVar("E")


def parse_snapshot(payload: bytes | str) -> Result[ImportResult]:
    """
    Parse a JSON snapshot into an ImportResult.

    Args:
        payload: UTF-8 bytes or text, optionally starting with a BOM

    Returns:
        Ok(ImportResult) with de-duplicated entities and warnings, or
        Err("Invalid JSON: ...") carrying the parse or validation error
    """
    try:
        data = json.loads(decode_payload(payload))
        snapshot = LedgerSnapshot.from_dict(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.error("Failed to parse JSON snapshot: %s", e)
        return err(f"Invalid JSON: {e}", e)

    warnings: list[str] = []
    categories = _dedupe(snapshot.categories, lambda c: c.id.value, "category", warnings)
    budgets = _dedupe(snapshot.budgets, lambda b: b.id.value, "budget", warnings)
    transactions = _dedupe(snapshot.transactions, lambda t: t.id.value, "transaction", warnings)

    known = {category.id for category in categories}
    for tx in transactions:
        if tx.category_id is not None and tx.category_id not in known:
            warnings.append(f"Transaction {tx.id} references missing category {tx.category_id}")

    log_warnings(warnings, "JSON import", get_config().imports.max_warnings_logged)
    logger.info(
        "Imported snapshot: %d categories, %d budgets, %d transactions (%d warnings)",
        len(categories),
        len(budgets),
        len(transactions),
        len(warnings),
    )
    return ok(
        ImportResult(
            transactions=tuple(transactions),
            categories=tuple(categories),
            budgets=tuple(budgets),
            warnings=tuple(warnings),
        )
    )


def _dedupe(items: Iterable[E], key: Callable[[E], str], label: str, warnings: list[str]) -> list[E]:
    seen: set[str] = set()
    unique = []
    for item in items:
        item_id = key(item)
        if item_id in seen:
            warnings.append(f"Duplicate {label} id '{item_id}' ignored")
            continue
        seen.add(item_id)
        unique.append(item)
    return unique
