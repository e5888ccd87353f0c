#!/usr/bin/env python3
"""
Transaction Query Specification

Declarative, stateless filter over transactions. Absent filters always pass;
active filters are combined with AND. Results are sorted by (date, id) before
any limit is applied, so "first N" is independent of storage order.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from ..core.dates import YearMonth
from ..core.errors import ValidationError
from ..core.ids import CategoryId
from ..core.models import Transaction, TransactionType
from ..core.tags import normalize_tags

MAX_LIMIT = 10_000


def transaction_sort_key(tx: Transaction) -> tuple[date, str]:
    """Deterministic transaction order: date, then id."""
    return (tx.date, tx.id.value)


@dataclass(frozen=True)
class QuerySpec:
    """
    In-memory transaction filter.

    Attributes:
        date_from: Inclusive start date
        date_to: Inclusive end date
        types: Allowed transaction types (empty = any)
        category_ids: Allowed categories (empty = any); uncategorized
            transactions never match an active category filter
        tags_any: Matches when at least one tag intersects (normalized)
        text_contains: Case-insensitive substring of the description
        limit: Maximum number of results, applied after sorting
    """

    date_from: date | None = None
    date_to: date | None = None
    types: frozenset[TransactionType] = frozenset()
    category_ids: frozenset[CategoryId] = frozenset()
    tags_any: frozenset[str] = frozenset()
    text_contains: str | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.date_from is not None and self.date_to is not None and self.date_from > self.date_to:
            raise ValidationError("date_from must be on or before date_to")
        if self.limit is not None and not 1 <= self.limit <= MAX_LIMIT:
            raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")
        object.__setattr__(self, "types", frozenset(self.types))
        object.__setattr__(self, "category_ids", frozenset(self.category_ids))
        object.__setattr__(self, "tags_any", normalize_tags(self.tags_any))

    @classmethod
    def for_month(cls, month: YearMonth, **kwargs) -> "QuerySpec":
        """Query covering every day of ``month``."""
        return cls(date_from=month.first_day(), date_to=month.last_day(), **kwargs)

    def matches(self, tx: Transaction) -> bool:
        """Check whether a transaction satisfies every active filter."""
        if self.date_from is not None and tx.date < self.date_from:
            return False
        if self.date_to is not None and tx.date > self.date_to:
            return False
        if self.types and tx.type not in self.types:
            return False
        if self.category_ids and (tx.category_id is None or tx.category_id not in self.category_ids):
            return False
        if self.tags_any and not (tx.tags & self.tags_any):
            return False
        needle = (self.text_contains or "").strip()
        if needle and not tx.matches_text(needle):
            return False
        return True

    def apply(self, transactions: Iterable[Transaction]) -> list[Transaction]:
        """Filter, sort by (date, id), then truncate to ``limit``."""
        result = sorted((tx for tx in transactions if self.matches(tx)), key=transaction_sort_key)
        if self.limit is not None:
            result = result[: self.limit]
        return result
