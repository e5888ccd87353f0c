#!/usr/bin/env python3
"""
Built-in Rules

- AutoCategorizeRule: first-match-wins regex categorization
- ValidationRule: re-asserts transaction invariants after transformation
"""

import logging
import re
from collections.abc import Iterable

from ..core.errors import ValidationError
from ..core.ids import CategoryId, RuleId
from ..core.models import Transaction
from .base import Rule

logger = logging.getLogger(__name__)

CategoryPattern = tuple[re.Pattern, CategoryId]


class AutoCategorizeRule(Rule):
    """
    Assign a category from regex matches against the description.

    Transactions that already have a category are left unchanged. Otherwise
    the first pattern (in construction order) that matches anywhere in the
    description decides the category; later patterns are not consulted.
    """

    def __init__(self, patterns: Iterable[CategoryPattern]):
        self.id = RuleId("auto-categorize")
        self.name = "AutoCategorizeRule"
        self.patterns: tuple[CategoryPattern, ...] = tuple(patterns)

    def apply(self, transaction: Transaction) -> Transaction:
        if transaction.category_id is not None:
            return transaction
        for pattern, category_id in self.patterns:
            if pattern.search(transaction.description):
                logger.debug(
                    "Transaction %s matched /%s/ -> %s", transaction.id, pattern.pattern, category_id
                )
                return transaction.with_category(category_id)
        return transaction


class ValidationRule(Rule):
    """Re-check description and amount invariants after earlier rules ran."""

    def __init__(self):
        self.id = RuleId("validation")
        self.name = "ValidationRule"

    def apply(self, transaction: Transaction) -> Transaction:
        if not transaction.description.strip():
            raise ValidationError("Transaction description cannot be blank")
        if not transaction.amount.is_positive():
            raise ValidationError("Transaction amount must be positive")
        return transaction
