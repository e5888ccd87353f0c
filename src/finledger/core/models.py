#!/usr/bin/env python3
"""
Core Data Models for the Ledger

Immutable, validated value objects for categories, budgets and transactions.
Every invariant is enforced at construction; relations between entities are
plain id references resolved by the caller or store.
"""

import re
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any

from .currency import CurrencyCode
from .dates import YearMonth, format_iso_date, parse_iso_date
from .errors import ValidationError
from .ids import BudgetId, CategoryId, TransactionId
from .money import Money
from .recurrence import NO_RECURRENCE, Recurrence
from .tags import Tags, normalize_tags

MAX_NAME_LENGTH = 40
MAX_DESCRIPTION_LENGTH = 120

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class TransactionType(Enum):
    """Polarity classification for transactions."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"


def _validate_name(name: str, label: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"{label} name cannot be blank")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"{label} name must be at most {MAX_NAME_LENGTH} characters")


def _optional_category_id(value: Any) -> CategoryId | None:
    if value is None or value == "":
        return None
    return CategoryId(str(value))


def _string_list(value: Any, label: str) -> list[str]:
    if not isinstance(value, list):
        raise ValidationError(f"{label} must be a list, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Category:
    """
    Classification for transactions, optionally nested under a parent.

    The parent is a weak reference by id: it may be absent and cycles are not
    checked.
    """

    id: CategoryId
    name: str
    color_hex: str | None = None
    parent_id: CategoryId | None = None

    def __post_init__(self) -> None:
        _validate_name(self.name, "Category")
        if self.color_hex is not None and not HEX_COLOR_PATTERN.match(self.color_hex):
            raise ValidationError(f"Color must match #RRGGBB: {self.color_hex!r}")

    @classmethod
    def predefined(cls) -> list["Category"]:
        """Built-in starter categories."""
        return list(PREDEFINED_CATEGORIES)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id.value,
            "name": self.name,
            "colorHex": self.color_hex,
            "parentId": self.parent_id.value if self.parent_id else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Category":
        """Create Category from dictionary; unknown keys are ignored."""
        return cls(
            id=CategoryId(data["id"]),
            name=data["name"],
            color_hex=data.get("colorHex"),
            parent_id=_optional_category_id(data.get("parentId")),
        )


FOOD = Category(CategoryId("food"), "Food")
TRANSPORT = Category(CategoryId("transport"), "Transport")
BILLS = Category(CategoryId("bills"), "Bills")
SHOPPING = Category(CategoryId("shopping"), "Shopping")
HEALTH = Category(CategoryId("health"), "Health")
SALARY = Category(CategoryId("salary"), "Salary")

PREDEFINED_CATEGORIES: tuple[Category, ...] = (FOOD, TRANSPORT, BILLS, SHOPPING, HEALTH, SALARY)


@dataclass(frozen=True)
class Budget:
    """Spending cap for a set of categories within one month."""

    id: BudgetId
    name: str
    month: YearMonth
    limit: Money
    category_ids: frozenset[CategoryId]

    def __post_init__(self) -> None:
        _validate_name(self.name, "Budget")
        if self.limit.is_negative():
            raise ValidationError("Budget limit must be non-negative")
        object.__setattr__(self, "category_ids", frozenset(self.category_ids))
        if not self.category_ids:
            raise ValidationError("Budget must target at least one category")
        if not all(isinstance(cid, CategoryId) for cid in self.category_ids):
            raise ValidationError("Budget category ids must be CategoryId values")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id.value,
            "name": self.name,
            "month": str(self.month),
            "limit": self.limit.to_dict(),
            "categoryIds": sorted(cid.value for cid in self.category_ids),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Budget":
        """Create Budget from dictionary; unknown keys are ignored."""
        return cls(
            id=BudgetId(data["id"]),
            name=data["name"],
            month=YearMonth.parse(data["month"]),
            limit=Money.from_dict(data["limit"]),
            category_ids=frozenset(CategoryId(cid) for cid in _string_list(data["categoryIds"], "categoryIds")),
        )


@dataclass(frozen=True)
class Transaction:
    """
    A recorded financial event.

    ``amount`` is always positive; the sign comes from ``type`` via
    ``signed_amount()`` so aggregations can sum without branching.

    Tags are normalized on construction.
    """

    id: TransactionId
    date: date
    type: TransactionType
    amount: Money
    description: str
    category_id: CategoryId | None = None
    tags: Tags = field(default_factory=frozenset)
    recurrence: Recurrence = NO_RECURRENCE

    def __post_init__(self) -> None:
        if not isinstance(self.description, str):
            raise ValidationError("Description must be a string")
        trimmed = self.description.strip()
        if not trimmed:
            raise ValidationError("Description cannot be blank")
        if len(trimmed) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters")
        if trimmed != self.description:
            raise ValidationError("Description cannot have leading/trailing whitespace")
        if not self.amount.is_positive():
            raise ValidationError("Transaction amount must be positive")
        if not isinstance(self.type, TransactionType):
            raise ValidationError(f"Unknown transaction type: {self.type!r}")
        object.__setattr__(self, "tags", normalize_tags(self.tags))

    @property
    def currency(self) -> CurrencyCode:
        return self.amount.currency

    def signed_amount(self) -> Money:
        """Amount with sign applied: expenses negative, income/transfers positive."""
        if self.type is TransactionType.EXPENSE:
            return -self.amount
        return self.amount

    def matches_text(self, query: str) -> bool:
        """Case-insensitive substring match against the description."""
        needle = (query or "").strip()
        if not needle:
            return False
        return needle.casefold() in self.description.casefold()

    def with_category(self, category_id: CategoryId | None) -> "Transaction":
        return replace(self, category_id=category_id)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id.value,
            "date": format_iso_date(self.date),
            "type": self.type.value,
            "amount": self.amount.to_dict(),
            "description": self.description,
            "categoryId": self.category_id.value if self.category_id else None,
            "tags": sorted(self.tags),
            "recurrence": self.recurrence.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        """Create Transaction from dictionary; unknown keys are ignored."""
        try:
            tx_type = TransactionType(str(data["type"]).upper())
        except ValueError as e:
            raise ValidationError(f"Unknown transaction type: {data['type']!r}") from e
        try:
            tx_date = parse_iso_date(str(data["date"]))
        except ValueError as e:
            raise ValidationError(f"Invalid date: {data['date']!r}") from e
        tags = data.get("tags")
        return cls(
            id=TransactionId(data["id"]),
            date=tx_date,
            type=tx_type,
            amount=Money.from_dict(data["amount"]),
            description=data["description"],
            category_id=_optional_category_id(data.get("categoryId")),
            tags=frozenset(_string_list(tags, "tags")) if tags is not None else frozenset(),
            recurrence=Recurrence.from_dict(data.get("recurrence")),
        )


def is_expense_in(tx: Transaction, month: YearMonth, currency: CurrencyCode) -> bool:
    """True for an expense booked in ``month`` with the given currency."""
    return tx.type is TransactionType.EXPENSE and month.contains(tx.date) and tx.amount.currency == currency

