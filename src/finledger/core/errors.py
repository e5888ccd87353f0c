#!/usr/bin/env python3
"""
Ledger Exception Hierarchy

Exceptions raised synchronously when a value or entity is built from data that
violates its invariants. Expected runtime failures (missing entities, malformed
import payloads) are reported through ``Result`` values instead.

All exceptions derive from ``ValueError`` so callers that only care about
"bad data" can catch the builtin.
"""


class LedgerError(ValueError):
    """Base class for all ledger errors."""


class ValidationError(LedgerError):
    """An entity or field failed its construction-time invariant."""


class InvalidAmountError(ValidationError):
    """A decimal amount could not be parsed."""


class InvalidCurrencyError(ValidationError):
    """A currency code is not three uppercase ASCII letters."""


class InvalidIdError(ValidationError):
    """An identifier does not match the allowed id format."""


class InvalidTagError(ValidationError):
    """A tag failed normalization."""


class CurrencyMismatchError(LedgerError):
    """Arithmetic or comparison was attempted across currencies."""


class DivisionByZeroError(LedgerError, ZeroDivisionError):
    """Money was divided by zero."""


class ResultError(LedgerError):
    """Raised when unwrapping a failed Result."""
