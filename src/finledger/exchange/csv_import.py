#!/usr/bin/env python3
"""
CSV Transaction Import

The header must match exactly (ignoring case) or the whole import fails.
After that every record is handled on its own: a malformed record is skipped
with a warning and never aborts the batch.

Row-fatal problems (record skipped):
- wrong column count
- a record the csv reader rejects, such as an oversized field
- bad id, date, type, currency or amount
- any transaction validation failure

Recoverable problems (record kept with a fallback):
- invalid category id -> no category
- invalid tags -> no tags
- invalid recurrence -> NONE
"""

import csv
import io
import logging

from ..core.config import get_config
from ..core.currency import CurrencyCode
from ..core.dates import parse_iso_date
from ..core.errors import ValidationError
from ..core.ids import CategoryId, TransactionId
from ..core.models import Transaction, TransactionType
from ..core.money import Money
from ..core.recurrence import NO_RECURRENCE, Recurrence, decode_recurrence
from ..core.result import Result, err, ok
from ..core.tags import EMPTY_TAGS, Tags, parse_tag_list
from .csv_export import CSV_HEADER
from .results import ImportResult, decode_payload, log_warnings

logger = logging.getLogger(__name__)

HEADER_LINE = ",".join(CSV_HEADER)


def parse_transactions(payload: bytes | str) -> Result[ImportResult]:
    """
    Parse CSV transactions with per-row recovery.

    Args:
        payload: UTF-8 bytes or text, optionally starting with a BOM

    Returns:
        Ok(ImportResult) with the valid transactions and one warning per
        problem, or Err on a header mismatch
    """
    try:
        text = decode_payload(payload)
    except UnicodeDecodeError as e:
        return err(f"Invalid CSV encoding: {e}", e)

    records = _read_records(text)
    if not records:
        return ok(ImportResult())

    header = records[0]
    if isinstance(header, csv.Error) or [cell.lower() for cell in header] != [name.lower() for name in CSV_HEADER]:
        logger.error("CSV header mismatch: %s", records[0])
        return err(f"CSV header mismatch. Expected: {HEADER_LINE}")

    transactions: list[Transaction] = []
    warnings: list[str] = []
    for row_number, record in enumerate(records[1:], start=2):
        if isinstance(record, csv.Error):
            warnings.append(f"Row {row_number} skipped: {record}")
            continue
        transaction = _parse_row(record, row_number, warnings)
        if transaction is not None:
            transactions.append(transaction)

    log_warnings(warnings, "CSV import", get_config().imports.max_warnings_logged)
    logger.info("Imported %d transactions from CSV (%d warnings)", len(transactions), len(warnings))
    return ok(ImportResult(transactions=tuple(transactions), warnings=tuple(warnings)))


def _read_records(text: str) -> list[list[str] | csv.Error]:
    """
    Split text into CSV records, dropping blank lines.

    A record the reader rejects (oversized field, stray NUL) is kept as its
    csv.Error so the caller can report it against its row number; the reader
    resumes at the next line.
    """
    reader = csv.reader(io.StringIO(text, newline=""))
    records: list[list[str] | csv.Error] = []
    while True:
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            records.append(e)
            continue
        if not _is_blank(record):
            records.append(record)
    return records


def _is_blank(record: list[str]) -> bool:
    return not record or (len(record) == 1 and not record[0].strip())


def _parse_row(cells: list[str], row_number: int, warnings: list[str]) -> Transaction | None:
    if len(cells) != len(CSV_HEADER):
        warnings.append(f"Row {row_number}: expected {len(CSV_HEADER)} columns, got {len(cells)}")
        return None

    id_cell, date_cell, type_cell, amount_cell, currency_cell = (cell.strip() for cell in cells[:5])
    description, category_cell, tags_cell, recurrence_cell = cells[5], cells[6].strip(), cells[7], cells[8].strip()

    row_warnings: list[str] = []
    try:
        transaction_id = TransactionId(id_cell)
        try:
            tx_date = parse_iso_date(date_cell)
        except ValueError as e:
            raise ValidationError(f"Invalid date '{date_cell}'") from e
        try:
            tx_type = TransactionType(type_cell.upper())
        except ValueError as e:
            raise ValidationError(f"Unknown transaction type '{type_cell}'") from e
        currency = CurrencyCode(currency_cell)
        amount = Money.of(amount_cell, currency)

        transaction = Transaction(
            id=transaction_id,
            date=tx_date,
            type=tx_type,
            amount=amount,
            description=description,
            category_id=_category_or_none(category_cell, row_number, row_warnings),
            tags=_tags_or_empty(tags_cell, row_number, row_warnings),
            recurrence=_recurrence_or_none(recurrence_cell, row_number, row_warnings),
        )
    except ValueError as e:
        warnings.append(f"Row {row_number} skipped: {e}")
        return None

    warnings.extend(row_warnings)
    return transaction


def _category_or_none(cell: str, row_number: int, warnings: list[str]) -> CategoryId | None:
    if not cell:
        return None
    try:
        return CategoryId(cell)
    except ValidationError:
        warnings.append(f"Row {row_number}: invalid categoryId '{cell}' (ignored)")
        return None


def _tags_or_empty(cell: str, row_number: int, warnings: list[str]) -> Tags:
    try:
        return parse_tag_list(cell)
    except ValidationError:
        warnings.append(f"Row {row_number}: invalid tags '{cell}', dropped")
        return EMPTY_TAGS


def _recurrence_or_none(cell: str, row_number: int, warnings: list[str]) -> Recurrence:
    recurrence = decode_recurrence(cell)
    if recurrence is None:
        warnings.append(f"Row {row_number}: invalid recurrence '{cell}', defaulted to NONE")
        return NO_RECURRENCE
    return recurrence
