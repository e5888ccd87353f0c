#!/usr/bin/env python3
"""
LedgerStore Protocol - interface the ledger core consumes for persistence.

Every operation returns a Result instead of raising for expected failures.
Implementations must make each call atomic with respect to every other call.
"""

from enum import Enum
from typing import Protocol

from ..core.dates import YearMonth
from ..core.ids import BudgetId, CategoryId, TransactionId
from ..core.models import Budget, Category, Transaction
from ..core.result import Result
from .query import QuerySpec


class SyncStatus(Enum):
    """
    Reconciliation state of a transaction with an external system.

    - LOCAL_ONLY: exists locally and not yet synced
    - SYNCED: confirmed by remote
    - DIRTY: local changes pending after sync
    - CONFLICT: requires manual resolution
    """

    LOCAL_ONLY = "LOCAL_ONLY"
    SYNCED = "SYNCED"
    DIRTY = "DIRTY"
    CONFLICT = "CONFLICT"


class LedgerStore(Protocol):
    """Protocol for ledger entity persistence and querying."""

    # Categories
    def upsert_category(self, category: Category) -> Result[None]:
        """Insert or replace a category."""
        ...

    def delete_category(self, category_id: CategoryId) -> Result[None]:
        """Delete a category by id (no-op when absent)."""
        ...

    def get_category(self, category_id: CategoryId) -> Result[Category | None]:
        """Fetch a category, or Ok(None) when absent."""
        ...

    def list_categories(self) -> Result[list[Category]]:
        """List all categories ordered by name, then id."""
        ...

    # Budgets
    def upsert_budget(self, budget: Budget) -> Result[None]:
        ...

    def delete_budget(self, budget_id: BudgetId) -> Result[None]:
        ...

    def get_budget(self, budget_id: BudgetId) -> Result[Budget | None]:
        ...

    def list_budgets(self, month: YearMonth | None = None) -> Result[list[Budget]]:
        """List budgets, optionally for one month, ordered by month, name, id."""
        ...

    # Transactions
    def upsert_transaction(
        self, transaction: Transaction, status: SyncStatus = SyncStatus.LOCAL_ONLY
    ) -> Result[None]:
        """Insert or replace a transaction and set its sync status."""
        ...

    def delete_transaction(self, transaction_id: TransactionId) -> Result[None]:
        ...

    def get_transaction(self, transaction_id: TransactionId) -> Result[Transaction | None]:
        ...

    def query_transactions(self, spec: QuerySpec | None = None) -> Result[list[Transaction]]:
        """Run a QuerySpec: filter, sort by (date, id), then limit."""
        ...

    def get_transaction_sync_status(self, transaction_id: TransactionId) -> Result[SyncStatus | None]:
        ...

    def set_transaction_sync_status(self, transaction_id: TransactionId, status: SyncStatus) -> Result[None]:
        """Set sync status; Err when the transaction does not exist."""
        ...
