"""
Storage Package

The store interface consumed by the ledger core plus the in-memory
reference implementation.
"""

from .memory import InMemoryLedgerStore
from .query import QuerySpec
from .store import LedgerStore, SyncStatus

__all__ = [
    "InMemoryLedgerStore",
    "LedgerStore",
    "QuerySpec",
    "SyncStatus",
]
