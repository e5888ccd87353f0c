"""
Transaction Rules Package

Ordered, pure transformation pipeline over transactions.

Key Components:
- Rule / RuleEngine: rule interface and sequential runner
- AutoCategorizeRule: first-match-wins regex categorization
- ValidationRule: invariant re-check after transformation
- defaults: constant default pattern table
- loader: YAML rule files
"""

from .base import Rule, RuleEngine
from .categorize import AutoCategorizeRule, ValidationRule
from .defaults import DEFAULT_PATTERNS, default_engine, default_rules
from .loader import load_engine, load_patterns

__all__ = [
    "DEFAULT_PATTERNS",
    "AutoCategorizeRule",
    "Rule",
    "RuleEngine",
    "ValidationRule",
    "default_engine",
    "default_rules",
    "load_engine",
    "load_patterns",
]
