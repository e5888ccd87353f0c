#!/usr/bin/env python3
"""Tests for breakdown, time-series and budget progress analytics."""

from datetime import date
from decimal import Decimal

import pytest

from finledger.analysis import budget_progress, category_breakdown, monthly_totals, net_total
from finledger.core.currency import EUR, USD
from finledger.core.dates import YearMonth
from finledger.core.ids import BudgetId, CategoryId
from finledger.core.models import Budget, TransactionType
from finledger.core.money import Money
from tests.fixtures.ledger_data import make_transaction

JAN = YearMonth(2024, 1)


def _budget(limit: str, categories=("food",), budget_id="b1", name="Food") -> Budget:
    return Budget(
        id=BudgetId(budget_id),
        name=name,
        month=JAN,
        limit=Money.of(limit, USD),
        category_ids=frozenset(CategoryId(c) for c in categories),
    )


@pytest.mark.analysis
class TestCategoryBreakdown:
    """Test per-category expense totals."""

    def test_sums_and_orders_by_total(self):
        """Test totals are summed per category and sorted descending."""
        txs = [
            make_transaction("a", amount="5.00", category="food"),
            make_transaction("b", amount="7.00", category="food"),
            make_transaction("c", amount="20.00", category="transport"),
        ]
        slices = category_breakdown(txs, JAN, USD)
        assert [(s.category_id.value, s.total.amount) for s in slices] == [
            ("transport", Decimal("20.00")),
            ("food", Decimal("12.00")),
        ]

    def test_ties_broken_by_category_id(self):
        """Test equal totals sort by category id."""
        txs = [make_transaction("a", category="zeta"), make_transaction("b", category="alpha")]
        assert [s.category_id.value for s in category_breakdown(txs, JAN, USD)] == ["alpha", "zeta"]

    def test_excludes_non_matching(self):
        """Test income, other months, other currencies and uncategorized are excluded."""
        txs = [
            make_transaction("a", tx_type=TransactionType.INCOME),
            make_transaction("b", day=date(2024, 2, 1)),
            make_transaction("c", currency="EUR"),
            make_transaction("d", category=None),
            make_transaction("e", tx_type=TransactionType.TRANSFER),
        ]
        assert category_breakdown(txs, JAN, USD) == []

    def test_totals_are_non_negative(self):
        """Test slice totals are positive amounts."""
        slices = category_breakdown([make_transaction(amount="3.00")], JAN, USD)
        assert slices[0].total == Money.of("3.00", USD)


@pytest.mark.analysis
class TestMonthlyTotals:
    """Test the monthly time series."""

    def test_one_point_per_month_with_zero_fill(self):
        """Test empty months produce zero points."""
        txs = [
            make_transaction("a", day=date(2024, 1, 10), tx_type=TransactionType.INCOME, amount="100.00"),
            make_transaction("b", day=date(2024, 1, 12), amount="30.00"),
            make_transaction("c", day=date(2024, 3, 1), amount="5.00"),
        ]
        points = monthly_totals(txs, YearMonth(2023, 12), YearMonth(2024, 3), USD)
        assert [str(p.period) for p in points] == ["2023-12", "2024-01", "2024-02", "2024-03"]
        assert [p.total.amount for p in points] == [
            Decimal("0.00"),
            Decimal("70.00"),
            Decimal("0.00"),
            Decimal("-5.00"),
        ]

    def test_transfers_count_as_positive(self):
        """Test transfers contribute their positive amount."""
        points = monthly_totals([make_transaction(tx_type=TransactionType.TRANSFER)], JAN, JAN, USD)
        assert points[0].total == Money.of("10.00", USD)

    def test_other_currency_ignored(self):
        """Test foreign currency transactions are skipped."""
        points = monthly_totals([make_transaction(currency="EUR")], JAN, JAN, USD)
        assert points[0].total.is_zero()

    def test_inverted_range_is_empty(self):
        """Test start after end yields no points."""
        assert monthly_totals([make_transaction()], YearMonth(2024, 3), JAN, USD) == []

    def test_net_total(self):
        """Test overall signed net."""
        txs = [
            make_transaction("a", tx_type=TransactionType.INCOME, amount="50.00"),
            make_transaction("b", amount="20.00"),
            make_transaction("c", amount="99.00", currency="EUR"),
        ]
        assert net_total(txs, USD) == Money.of("30.00", USD)
        assert net_total(txs, EUR) == Money.of("-99.00", EUR)


@pytest.mark.analysis
class TestBudgetProgress:
    """Test spent, remaining and percent used."""

    def test_partial_spend(self):
        """Test progress for spending below the limit."""
        txs = [make_transaction("a", amount="25.00"), make_transaction("b", amount="12.50")]
        (progress,) = budget_progress([_budget("100.00")], txs)
        assert progress.spent == Money.of("37.50", USD)
        assert progress.remaining == Money.of("62.50", USD)
        assert progress.percent_used == Decimal("0.3750")
        assert not progress.is_over_budget

    def test_over_budget(self):
        """Test remaining goes negative when overspent."""
        (progress,) = budget_progress([_budget("10.00")], [make_transaction(amount="15.00")])
        assert progress.remaining == Money.of("-5.00", USD)
        assert progress.percent_used == Decimal("1.5000")
        assert progress.is_over_budget

    def test_percent_rounds_half_up_to_four_places(self):
        """Test percent precision."""
        (progress,) = budget_progress([_budget("3.00")], [make_transaction(amount="1.00")])
        assert progress.percent_used == Decimal("0.3333")

    def test_only_budget_categories_and_month_count(self):
        """Test scoping by category, month, type and currency."""
        txs = [
            make_transaction("a", amount="10.00", category="food"),
            make_transaction("b", amount="10.00", category="transport"),
            make_transaction("c", amount="10.00", day=date(2024, 2, 1)),
            make_transaction("d", amount="10.00", tx_type=TransactionType.INCOME),
            make_transaction("e", amount="10.00", currency="EUR"),
        ]
        (progress,) = budget_progress([_budget("100.00")], txs)
        assert progress.spent == Money.of("10.00", USD)

    @pytest.mark.parametrize(
        "spend,expected",
        [(None, Decimal("0")), ("1.00", Decimal("1"))],
        ids=["zero-limit-nothing-spent", "zero-limit-saturates"],
    )
    def test_zero_limit(self, spend, expected):
        """Test a zero limit reports 0 when unspent and 1 otherwise."""
        txs = [make_transaction(amount=spend)] if spend else []
        (progress,) = budget_progress([_budget("0.00")], txs)
        assert progress.percent_used == expected

    def test_results_sorted_by_name_then_id(self):
        """Test output ordering."""
        budgets = [_budget("1", budget_id="b2", name="Zeta"), _budget("1", budget_id="b1", name="Alpha")]
        assert [p.budget_id.value for p in budget_progress(budgets, [])] == ["b1", "b2"]
