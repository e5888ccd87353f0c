#!/usr/bin/env python3
"""
In-Memory LedgerStore

Reference store backed by plain dictionaries. A single re-entrant lock
serializes every operation, so no call observes another's partial effect.
"""

import logging
import threading

from ..core.dates import YearMonth
from ..core.ids import BudgetId, CategoryId, TransactionId
from ..core.models import Budget, Category, Transaction
from ..core.result import Result, err, ok
from .query import QuerySpec
from .store import SyncStatus

logger = logging.getLogger(__name__)


def category_sort_key(category: Category) -> tuple[str, str]:
    return (category.name, category.id.value)


def budget_sort_key(budget: Budget) -> tuple[YearMonth, str, str]:
    return (budget.month, budget.name, budget.id.value)


class InMemoryLedgerStore:
    """
    Simple in-memory store for tests, examples and import staging.

    Satisfies the LedgerStore protocol.
    """

    def __init__(self):
        """Initialize empty collections and the store-wide lock."""
        self._categories: dict[CategoryId, Category] = {}
        self._budgets: dict[BudgetId, Budget] = {}
        self._transactions: dict[TransactionId, Transaction] = {}
        self._statuses: dict[TransactionId, SyncStatus] = {}
        self._lock = threading.RLock()

    # Categories

    def upsert_category(self, category: Category) -> Result[None]:
        with self._lock:
            self._categories[category.id] = category
            return ok(None)

    def delete_category(self, category_id: CategoryId) -> Result[None]:
        with self._lock:
            self._categories.pop(category_id, None)
            return ok(None)

    def get_category(self, category_id: CategoryId) -> Result[Category | None]:
        with self._lock:
            return ok(self._categories.get(category_id))

    def list_categories(self) -> Result[list[Category]]:
        with self._lock:
            return ok(sorted(self._categories.values(), key=category_sort_key))

    # Budgets

    def upsert_budget(self, budget: Budget) -> Result[None]:
        with self._lock:
            self._budgets[budget.id] = budget
            return ok(None)

    def delete_budget(self, budget_id: BudgetId) -> Result[None]:
        with self._lock:
            self._budgets.pop(budget_id, None)
            return ok(None)

    def get_budget(self, budget_id: BudgetId) -> Result[Budget | None]:
        with self._lock:
            return ok(self._budgets.get(budget_id))

    def list_budgets(self, month: YearMonth | None = None) -> Result[list[Budget]]:
        with self._lock:
            budgets = [b for b in self._budgets.values() if month is None or b.month == month]
            return ok(sorted(budgets, key=budget_sort_key))

    # Transactions

    def upsert_transaction(
        self, transaction: Transaction, status: SyncStatus = SyncStatus.LOCAL_ONLY
    ) -> Result[None]:
        with self._lock:
            self._transactions[transaction.id] = transaction
            self._statuses[transaction.id] = status
            return ok(None)

    def delete_transaction(self, transaction_id: TransactionId) -> Result[None]:
        with self._lock:
            self._transactions.pop(transaction_id, None)
            self._statuses.pop(transaction_id, None)
            return ok(None)

    def get_transaction(self, transaction_id: TransactionId) -> Result[Transaction | None]:
        with self._lock:
            return ok(self._transactions.get(transaction_id))

    def query_transactions(self, spec: QuerySpec | None = None) -> Result[list[Transaction]]:
        with self._lock:
            return ok((spec or QuerySpec()).apply(self._transactions.values()))

    def get_transaction_sync_status(self, transaction_id: TransactionId) -> Result[SyncStatus | None]:
        with self._lock:
            return ok(self._statuses.get(transaction_id))

    def set_transaction_sync_status(self, transaction_id: TransactionId, status: SyncStatus) -> Result[None]:
        with self._lock:
            if transaction_id not in self._transactions:
                return err(f"Transaction {transaction_id} not found")
            self._statuses[transaction_id] = status
            return ok(None)

    # Bulk helpers

    def load_import(self, imported) -> Result[int]:
        """
        Insert everything from an ImportResult in one atomic step.

        Args:
            imported: ImportResult produced by a JSON or CSV import

        Returns:
            Ok with the number of entities written
        """
        with self._lock:
            for category in imported.categories:
                self._categories[category.id] = category
            for budget in imported.budgets:
                self._budgets[budget.id] = budget
            for transaction in imported.transactions:
                self._transactions[transaction.id] = transaction
                self._statuses[transaction.id] = SyncStatus.LOCAL_ONLY
            count = len(imported.categories) + len(imported.budgets) + len(imported.transactions)
        logger.info("Loaded %d imported entities into store", count)
        return ok(count)
