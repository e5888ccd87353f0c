#!/usr/bin/env python3
"""
Ledger Snapshot

Self-describing point-in-time bundle of categories, budgets and transactions
used for JSON backup and restore.

JSON layout:
    {
      "exportedAt": "2024-01-31T12:00:00Z",
      "currency": "USD",
      "categories": [...],
      "budgets": [...],
      "transactions": [...]
    }
"""

from dataclasses import dataclass
from typing import Any

from ..core.currency import CurrencyCode
from ..core.models import Budget, Category, Transaction


@dataclass(frozen=True)
class LedgerSnapshot:
    """Export/import unit. Collection order is preserved as given."""

    exported_at: str
    currency: CurrencyCode | None
    categories: tuple[Category, ...]
    budgets: tuple[Budget, ...]
    transactions: tuple[Transaction, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "exportedAt": self.exported_at,
            "currency": self.currency.value if self.currency else None,
            "categories": [c.to_dict() for c in self.categories],
            "budgets": [b.to_dict() for b in self.budgets],
            "transactions": [t.to_dict() for t in self.transactions],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LedgerSnapshot":
        """
        Create LedgerSnapshot from dictionary.

        Unknown keys are ignored at every level.

        Raises:
            KeyError, TypeError, ValueError: If required structure is missing or invalid
        """
        if not isinstance(data, dict):
            raise TypeError("Snapshot must be a JSON object")
        currency = data.get("currency")
        return cls(
            exported_at=str(data.get("exportedAt", "")),
            currency=CurrencyCode(currency) if currency else None,
            categories=tuple(Category.from_dict(c) for c in _list_of(data, "categories")),
            budgets=tuple(Budget.from_dict(b) for b in _list_of(data, "budgets")),
            transactions=tuple(Transaction.from_dict(t) for t in _list_of(data, "transactions")),
        )


def _list_of(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list")
    return value
