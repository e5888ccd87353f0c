"""
finledger - Personal Finance Ledger Kernel

Strictly validated money, transactions, budgets and categories, with
analytics, a sequential categorization rule engine, and JSON/CSV
import/export with partial-failure recovery.

Domain Packages:
- core: Money, ids, tags, recurrence, entities, configuration, Result
- rules: transaction rule engine and categorization rules
- storage: store protocol, QuerySpec, in-memory store
- analysis: breakdowns, time series, budget progress, charts
- exchange: JSON snapshot and CSV import/export
- cli: command-line interface

Example Usage:
    from finledger import Money, ledger
    from finledger.core.currency import USD

    result = ledger.import_csv(payload)
    slices = ledger.breakdown_for_month(result.unwrap().transactions, month, USD)
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .core.models import Budget, Category, Transaction, TransactionType
from .core.money import Money
from .core.result import Err, Ok, Result

__all__ = [
    "Budget",
    "Category",
    "Environment",
    "Err",
    "Money",
    "Ok",
    "Result",
    "Transaction",
    "TransactionType",
    "get_config",
]
