#!/usr/bin/env python3
"""Tests for QuerySpec filtering, ordering and limits."""

from datetime import date

import pytest

from finledger.core.dates import YearMonth
from finledger.core.errors import ValidationError
from finledger.core.ids import CategoryId
from finledger.core.models import TransactionType
from finledger.storage.query import MAX_LIMIT, QuerySpec
from tests.fixtures.ledger_data import make_transaction


@pytest.mark.storage
class TestQuerySpecValidation:
    """Test QuerySpec construction rules."""

    def test_inverted_date_range_rejected(self):
        """Test date_from after date_to raises."""
        with pytest.raises(ValidationError):
            QuerySpec(date_from=date(2024, 2, 1), date_to=date(2024, 1, 1))

    @pytest.mark.parametrize("limit", [0, -1, MAX_LIMIT + 1], ids=["zero", "negative", "too-large"])
    def test_limit_bounds(self, limit):
        """Test limit must be within 1..MAX_LIMIT."""
        with pytest.raises(ValidationError):
            QuerySpec(limit=limit)

    def test_tags_are_normalized(self):
        """Test tag filter values are normalized."""
        assert QuerySpec(tags_any={" Coffee "}).tags_any == frozenset({"coffee"})

    def test_for_month(self):
        """Test month helper covers the whole month."""
        spec = QuerySpec.for_month(YearMonth(2024, 2), limit=5)
        assert spec.date_from == date(2024, 2, 1)
        assert spec.date_to == date(2024, 2, 29)
        assert spec.limit == 5


@pytest.mark.storage
class TestQuerySpecMatching:
    """Test QuerySpec predicate semantics."""

    def test_empty_spec_matches_everything(self):
        """Test absent filters pass."""
        assert QuerySpec().matches(make_transaction(category=None))

    def test_date_bounds_inclusive(self):
        """Test both date bounds are inclusive."""
        spec = QuerySpec(date_from=date(2024, 1, 15), date_to=date(2024, 1, 15))
        assert spec.matches(make_transaction(day=date(2024, 1, 15)))
        assert not spec.matches(make_transaction(day=date(2024, 1, 16)))
        assert not spec.matches(make_transaction(day=date(2024, 1, 14)))

    def test_types(self):
        """Test type filter."""
        spec = QuerySpec(types={TransactionType.INCOME})
        assert spec.matches(make_transaction(tx_type=TransactionType.INCOME))
        assert not spec.matches(make_transaction(tx_type=TransactionType.EXPENSE))

    def test_categories_exclude_uncategorized(self):
        """Test an active category filter never matches uncategorized transactions."""
        spec = QuerySpec(category_ids={CategoryId("food")})
        assert spec.matches(make_transaction(category="food"))
        assert not spec.matches(make_transaction(category="bills"))
        assert not spec.matches(make_transaction(category=None))

    def test_tags_any(self):
        """Test tag filter matches on any intersection."""
        spec = QuerySpec(tags_any={"coffee", "lunch"})
        assert spec.matches(make_transaction(tags=["lunch", "work"]))
        assert not spec.matches(make_transaction(tags=["work"]))
        assert not spec.matches(make_transaction())

    def test_text_contains(self):
        """Test case-insensitive description search; blank text is ignored."""
        assert QuerySpec(text_contains="GROC").matches(make_transaction(description="Groceries"))
        assert not QuerySpec(text_contains="rent").matches(make_transaction(description="Groceries"))
        assert QuerySpec(text_contains="  ").matches(make_transaction(description="Groceries"))

    def test_filters_combine_with_and(self):
        """Test every active filter must pass."""
        spec = QuerySpec(types={TransactionType.EXPENSE}, category_ids={CategoryId("food")}, text_contains="x")
        assert not spec.matches(make_transaction(description="Groceries"))


@pytest.mark.storage
class TestQuerySpecApply:
    """Test ordering and limits."""

    def test_limit_returns_earliest_by_date(self):
        """Test limit is applied after sorting by date, not insertion order."""
        txs = [
            make_transaction("a", date(2024, 3, 1)),
            make_transaction("b", date(2024, 1, 1)),
            make_transaction("c", date(2024, 2, 1)),
        ]
        result = QuerySpec(limit=2).apply(txs)
        assert [tx.date for tx in result] == [date(2024, 1, 1), date(2024, 2, 1)]

    def test_same_date_ordered_by_id(self):
        """Test ties on date are broken by id."""
        txs = [make_transaction("z"), make_transaction("a"), make_transaction("m")]
        assert [tx.id.value for tx in QuerySpec().apply(txs)] == ["a", "m", "z"]
