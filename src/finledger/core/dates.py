#!/usr/bin/env python3
"""
YearMonth Primitive Type

Immutable calendar month used for budgets, analytics ranges and
month-filtered exports, plus ISO date helpers shared by importers.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta


@dataclass(frozen=True, order=True)
class YearMonth:
    """Immutable year + month, ordered chronologically."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12: {self.month}")
        if not 1 <= self.year <= 9999:
            raise ValueError(f"Year must be between 1 and 9999: {self.year}")

    @classmethod
    def parse(cls, text: str) -> "YearMonth":
        """
        Parse from "YYYY-MM".

        Raises:
            ValueError: If text is not a valid year-month
        """
        parsed = datetime.strptime(text.strip(), "%Y-%m")
        return cls(parsed.year, parsed.month)

    @classmethod
    def of(cls, value: date) -> "YearMonth":
        """Month containing ``value``."""
        return cls(value.year, value.month)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def last_day(self) -> date:
        return self.plus_months(1).first_day() - timedelta(days=1)

    def plus_months(self, months: int) -> "YearMonth":
        index = self.year * 12 + (self.month - 1) + months
        return YearMonth(index // 12, index % 12 + 1)

    def contains(self, value: date) -> bool:
        return value.year == self.year and value.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def months_between(start: YearMonth, end: YearMonth) -> list[YearMonth]:
    """
    List every month from ``start`` to ``end`` inclusive.

    Returns an empty list when ``start`` is after ``end``.
    """
    months = []
    current = start
    while current <= end:
        months.append(current)
        current = current.plus_months(1)
    return months


def parse_iso_date(text: str) -> date:
    """
    Parse a YYYY-MM-DD date.

    Raises:
        ValueError: If text is not an ISO calendar date
    """
    return datetime.strptime(text.strip(), "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    """Format as YYYY-MM-DD."""
    return value.isoformat()
