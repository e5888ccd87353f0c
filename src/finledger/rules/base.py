#!/usr/bin/env python3
"""
Rule Interface and Sequential Engine

A rule is a pure transformation of a transaction. The engine applies rules
strictly in order, each rule seeing the previous rule's output.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from ..core.ids import RuleId
from ..core.models import Transaction

logger = logging.getLogger(__name__)


class Rule(ABC):
    """Transformation applied to a transaction."""

    id: RuleId
    name: str

    @abstractmethod
    def apply(self, transaction: Transaction) -> Transaction:
        """
        Return the transformed transaction.

        Rules must not mutate state; returning the input unchanged is valid.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id.value!r})"


class RuleEngine:
    """Runs rules sequentially over transactions."""

    def __init__(self, rules: Iterable[Rule]):
        self._rules: tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def process(self, transaction: Transaction) -> Transaction:
        """Apply every rule in order to one transaction."""
        current = transaction
        for rule in self._rules:
            current = rule.apply(current)
        return current

    def apply_all(self, transactions: Sequence[Transaction]) -> list[Transaction]:
        """Process each transaction independently, preserving order."""
        processed = [self.process(tx) for tx in transactions]
        logger.debug("Applied %d rules to %d transactions", len(self._rules), len(processed))
        return processed
