#!/usr/bin/env python3
"""
Identifier Types

Distinct validated wrappers for each kind of entity id. Ids are never trimmed
on the caller's behalf: a value with surrounding whitespace is rejected.
"""

import re
from dataclasses import dataclass

from .errors import InvalidIdError

ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")
MAX_ID_LENGTH = 64


def validate_id(value: str, kind: str = "Id") -> str:
    """
    Validate an identifier string and return it unchanged.

    Raises:
        InvalidIdError: If the value is blank, too long, untrimmed, or contains
            characters outside [A-Za-z0-9_-]
    """
    if not isinstance(value, str):
        raise InvalidIdError(f"{kind} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise InvalidIdError(f"{kind} cannot be blank")
    if len(trimmed) > MAX_ID_LENGTH:
        raise InvalidIdError(f"{kind} must be {MAX_ID_LENGTH} characters or fewer")
    if not ID_PATTERN.match(trimmed):
        raise InvalidIdError(f"{kind} must match [A-Za-z0-9_-]: {value!r}")
    if trimmed != value:
        raise InvalidIdError(f"{kind} must be trimmed: {value!r}")
    return value


@dataclass(frozen=True, order=True)
class _EntityId:
    value: str

    def __post_init__(self) -> None:
        validate_id(self.value, type(self).__name__)

    def __str__(self) -> str:
        return self.value


class TransactionId(_EntityId):
    """Identifier for transactions."""


class CategoryId(_EntityId):
    """Identifier for categories."""


class BudgetId(_EntityId):
    """Identifier for budgets."""


class RuleId(_EntityId):
    """Identifier for rules."""
