"""
Exchange Package - JSON snapshot and CSV import/export.
"""

from .csv_export import CSV_HEADER, export_transactions
from .csv_import import parse_transactions
from .json_export import build_snapshot, export_from_store, export_snapshot
from .json_import import parse_snapshot
from .results import ExportResult, ImportResult
from .snapshot import LedgerSnapshot

__all__ = [
    "CSV_HEADER",
    "ExportResult",
    "ImportResult",
    "LedgerSnapshot",
    "build_snapshot",
    "export_from_store",
    "export_snapshot",
    "export_transactions",
    "parse_snapshot",
    "parse_transactions",
]
