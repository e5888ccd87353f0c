#!/usr/bin/env python3
"""
Recurrence Schedules

A recurrence is a closed set of variants (none, weekly, monthly, yearly)
represented as a kind tag plus payload fields. ``next_date`` dispatches on the
kind; monthly and yearly schedules restrict the day to 1-28 so every month
has the target day.

Text encoding used by CSV files:
- NONE
- WEEKLY:<iso weekday 1-7>
- MONTHLY:<day 1-28>
- YEARLY:<mm>-<dd>
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any

from .errors import ValidationError


class RecurrenceKind(Enum):
    """Recurrence variants."""

    NONE = "NONE"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationError(message)


def _in_range(value: int | None, low: int, high: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and low <= value <= high


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Expected integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Expected integer, got {value!r}") from e


@dataclass(frozen=True)
class Recurrence:
    """
    Tagged recurrence schedule.

    Use the factory classmethods; the payload fields that do not apply to a
    kind must be None.
    """

    kind: RecurrenceKind
    day_of_week: int | None = None  # ISO weekday, Monday = 1
    day: int | None = None
    month: int | None = None

    def __post_init__(self) -> None:
        if self.kind is RecurrenceKind.NONE:
            _require(
                self.day_of_week is None and self.day is None and self.month is None,
                "NONE recurrence takes no fields",
            )
        elif self.kind is RecurrenceKind.WEEKLY:
            _require(_in_range(self.day_of_week, 1, 7), "Weekly dayOfWeek must be 1-7")
            _require(self.day is None and self.month is None, "Weekly recurrence only takes dayOfWeek")
        elif self.kind is RecurrenceKind.MONTHLY:
            _require(_in_range(self.day, 1, 28), "Monthly day must be between 1 and 28")
            _require(self.day_of_week is None and self.month is None, "Monthly recurrence only takes day")
        elif self.kind is RecurrenceKind.YEARLY:
            _require(_in_range(self.month, 1, 12), "Yearly month must be between 1 and 12")
            _require(_in_range(self.day, 1, 28), "Yearly day must be between 1 and 28")
            _require(self.day_of_week is None, "Yearly recurrence does not take dayOfWeek")
        else:
            raise ValidationError(f"Unknown recurrence kind: {self.kind!r}")

    @classmethod
    def none(cls) -> "Recurrence":
        return NO_RECURRENCE

    @classmethod
    def weekly(cls, day_of_week: int) -> "Recurrence":
        return cls(RecurrenceKind.WEEKLY, day_of_week=day_of_week)

    @classmethod
    def monthly(cls, day: int) -> "Recurrence":
        return cls(RecurrenceKind.MONTHLY, day=day)

    @classmethod
    def yearly(cls, month: int, day: int) -> "Recurrence":
        return cls(RecurrenceKind.YEARLY, month=month, day=day)

    @property
    def is_none(self) -> bool:
        return self.kind is RecurrenceKind.NONE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {"type": self.kind.value}
        if self.kind is RecurrenceKind.WEEKLY:
            data["dayOfWeek"] = self.day_of_week
        elif self.kind is RecurrenceKind.MONTHLY:
            data["day"] = self.day
        elif self.kind is RecurrenceKind.YEARLY:
            data["month"] = self.month
            data["day"] = self.day
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Recurrence":
        """Create Recurrence from its JSON form; missing data means NONE."""
        if not data:
            return NO_RECURRENCE
        try:
            kind = RecurrenceKind(str(data.get("type", "NONE")).upper())
        except ValueError as e:
            raise ValidationError(f"Unknown recurrence type: {data.get('type')!r}") from e
        if kind is RecurrenceKind.WEEKLY:
            return cls.weekly(_as_int(data.get("dayOfWeek")))
        if kind is RecurrenceKind.MONTHLY:
            return cls.monthly(_as_int(data.get("day")))
        if kind is RecurrenceKind.YEARLY:
            return cls.yearly(_as_int(data.get("month")), _as_int(data.get("day")))
        return NO_RECURRENCE


NO_RECURRENCE = Recurrence(RecurrenceKind.NONE)


def next_date(recurrence: Recurrence, start: date) -> date | None:
    """
    Next occurrence on or after ``start``, or None for a non-recurring schedule.

    Examples:
        next_date(Recurrence.monthly(15), date(2024, 1, 20)) -> date(2024, 2, 15)
        next_date(Recurrence.weekly(1), date(2024, 1, 1)) -> date(2024, 1, 1)  # a Monday
    """
    kind = recurrence.kind
    if kind is RecurrenceKind.NONE:
        return None
    if kind is RecurrenceKind.WEEKLY:
        assert recurrence.day_of_week is not None
        days_ahead = (recurrence.day_of_week - start.isoweekday()) % 7
        return start + timedelta(days=days_ahead)
    if kind is RecurrenceKind.MONTHLY:
        assert recurrence.day is not None
        if start.day <= recurrence.day:
            return start.replace(day=recurrence.day)
        if start.month == 12:
            return date(start.year + 1, 1, recurrence.day)
        return date(start.year, start.month + 1, recurrence.day)
    if kind is RecurrenceKind.YEARLY:
        assert recurrence.month is not None and recurrence.day is not None
        this_year = date(start.year, recurrence.month, recurrence.day)
        if start <= this_year:
            return this_year
        return date(start.year + 1, recurrence.month, recurrence.day)
    raise ValidationError(f"Unknown recurrence kind: {kind!r}")


def encode_recurrence(recurrence: Recurrence) -> str:
    """Encode as NONE, WEEKLY:<n>, MONTHLY:<n> or YEARLY:<mm>-<dd>."""
    kind = recurrence.kind
    if kind is RecurrenceKind.WEEKLY:
        return f"WEEKLY:{recurrence.day_of_week}"
    if kind is RecurrenceKind.MONTHLY:
        return f"MONTHLY:{recurrence.day}"
    if kind is RecurrenceKind.YEARLY:
        return f"YEARLY:{recurrence.month:02d}-{recurrence.day:02d}"
    return "NONE"


def decode_recurrence(token: str | None) -> Recurrence | None:
    """
    Decode a recurrence token (case-insensitive).

    Blank input and "NONE" decode to no recurrence. Returns None when the
    token is unrecognized or its values are out of range, leaving the fallback
    policy to the caller.
    """
    text = (token or "").strip()
    if not text or text.upper() == "NONE":
        return NO_RECURRENCE
    prefix, sep, payload = text.partition(":")
    if not sep:
        return None
    prefix = prefix.upper()
    try:
        if prefix == "WEEKLY":
            return Recurrence.weekly(int(payload))
        if prefix == "MONTHLY":
            return Recurrence.monthly(int(payload))
        if prefix == "YEARLY":
            month_text, dash, day_text = payload.partition("-")
            if not dash:
                return None
            return Recurrence.yearly(int(month_text), int(day_text))
    except (ValueError, ValidationError):
        return None
    return None
