#!/usr/bin/env python3
"""
CSV Transaction Export

One row per transaction with a fixed nine-column header and "\\n" record
terminators. Fields containing a comma, a quote, "\\n" or "\\r" are quoted with
internal quotes doubled; everything else is written bare.
"""

import logging
from collections.abc import Iterable

from ..core.config import get_config
from ..core.currency import format_amount
from ..core.dates import format_iso_date
from ..core.models import Transaction
from ..core.recurrence import encode_recurrence
from ..core.tags import join_tags
from .results import ExportResult

logger = logging.getLogger(__name__)

CSV_HEADER: tuple[str, ...] = (
    "id",
    "date",
    "type",
    "amount",
    "currency",
    "description",
    "categoryId",
    "tags",
    "recurrence",
)

CSV_MIME_TYPE = "text/csv"

QUOTE_TRIGGERS = (",", '"', "\n", "\r")


def transaction_row(tx: Transaction) -> list[str]:
    """Flatten a transaction into CSV cells in header order."""
    return [
        tx.id.value,
        format_iso_date(tx.date),
        tx.type.value,
        format_amount(tx.amount.amount),
        tx.currency.value,
        tx.description,
        tx.category_id.value if tx.category_id else "",
        join_tags(tx.tags),
        encode_recurrence(tx.recurrence),
    ]


def quote_cell(value: str) -> str:
    """Quote a cell holding a comma, quote, "\\n" or "\\r"; return others unchanged."""
    if any(trigger in value for trigger in QUOTE_TRIGGERS):
        return '"' + value.replace('"', '""') + '"'
    return value


def _csv_line(cells: Iterable[str]) -> str:
    return ",".join(quote_cell(cell) for cell in cells) + "\n"


def export_transactions(transactions: Iterable[Transaction]) -> ExportResult:
    """
    Export transactions as CSV, in the order given.

    Returns:
        ExportResult with ``text/csv`` content; a header-only document when
        there are no transactions
    """
    rows = [transaction_row(tx) for tx in transactions]
    text = _csv_line(CSV_HEADER) + "".join(_csv_line(row) for row in rows)
    logger.info("Exported %d transactions to CSV", len(rows))
    return ExportResult(
        content=text.encode("utf-8"),
        mime_type=CSV_MIME_TYPE,
        file_name=get_config().exports.csv_filename,
    )
