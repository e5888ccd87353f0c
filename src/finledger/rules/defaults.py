#!/usr/bin/env python3
"""
Default Rule Set

Process-wide constant pattern table for quick starts. Order matters:
AutoCategorizeRule stops at the first matching pattern.
"""

import re

from ..core.models import BILLS, FOOD, HEALTH, SALARY, SHOPPING, TRANSPORT
from .base import Rule, RuleEngine
from .categorize import AutoCategorizeRule, CategoryPattern, ValidationRule

DEFAULT_PATTERNS: tuple[CategoryPattern, ...] = (
    (re.compile(r"uber|careem", re.IGNORECASE), TRANSPORT.id),
    (re.compile(r"starbucks|cafe", re.IGNORECASE), FOOD.id),
    (re.compile(r"netflix|spotify", re.IGNORECASE), SHOPPING.id),
    (re.compile(r"rent|electric|water", re.IGNORECASE), BILLS.id),
    (re.compile(r"pharmacy|clinic", re.IGNORECASE), HEALTH.id),
    (re.compile(r"salary|payroll", re.IGNORECASE), SALARY.id),
)


def default_rules(patterns: tuple[CategoryPattern, ...] = DEFAULT_PATTERNS) -> list[Rule]:
    """Categorization followed by validation."""
    return [AutoCategorizeRule(patterns), ValidationRule()]


def default_engine() -> RuleEngine:
    """RuleEngine with the default rule list."""
    return RuleEngine(default_rules())
