"""
Core Utilities Package

Value types, entities and shared infrastructure used by every other package.

This package provides:
- Fixed-point Money with currency-safe arithmetic
- Validated ids, tags, recurrence and year-month values
- Immutable Category, Budget and Transaction entities
- Configuration management for environment-specific settings
- The Result type and exception hierarchy
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    get_output_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import CurrencyCode, format_amount, normalize_scale, parse_decimal, parse_decimal_or_none
from .dates import YearMonth, months_between
from .errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    InvalidCurrencyError,
    InvalidIdError,
    InvalidTagError,
    LedgerError,
    ResultError,
    ValidationError,
)
from .ids import BudgetId, CategoryId, RuleId, TransactionId
from .models import PREDEFINED_CATEGORIES, Budget, Category, Transaction, TransactionType
from .money import Money
from .recurrence import NO_RECURRENCE, Recurrence, RecurrenceKind, next_date
from .result import Err, Ok, Result, err, ok
from .tags import normalize_tags

__all__ = [
    "NO_RECURRENCE",
    "PREDEFINED_CATEGORIES",
    "Budget",
    "BudgetId",
    "Category",
    "CategoryId",
    # Configuration
    "Config",
    "CurrencyCode",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "Environment",
    "Err",
    "InvalidAmountError",
    "InvalidCurrencyError",
    "InvalidIdError",
    "InvalidTagError",
    "LedgerError",
    "Money",
    "Ok",
    "Recurrence",
    "RecurrenceKind",
    "Result",
    "ResultError",
    "RuleId",
    # Data models
    "Transaction",
    "TransactionId",
    "TransactionType",
    "ValidationError",
    "YearMonth",
    "err",
    "format_amount",
    "get_config",
    "get_data_dir",
    "get_output_dir",
    "is_development",
    "is_production",
    "is_test",
    "months_between",
    "next_date",
    "normalize_scale",
    "normalize_tags",
    "ok",
    "parse_decimal",
    "parse_decimal_or_none",
    "reload_config",
]
