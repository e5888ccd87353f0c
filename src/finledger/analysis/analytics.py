#!/usr/bin/env python3
"""
Ledger Analytics

Stateless aggregations over in-memory transactions and budgets:
- category_breakdown: expense totals per category for one month
- monthly_totals: net totals per month over an inclusive range
- budget_progress: spend versus limit per budget

All sums use Money, so totals keep two decimal places exactly. Outputs are
deterministically ordered.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ..core.currency import CurrencyCode
from ..core.dates import YearMonth, months_between
from ..core.ids import BudgetId, CategoryId
from ..core.models import Budget, Transaction, is_expense_in
from ..core.money import Money

PERCENT_QUANTUM = Decimal("0.0001")


@dataclass(frozen=True)
class PieSlice:
    """Expense total for one category."""

    category_id: CategoryId
    total: Money


@dataclass(frozen=True)
class TimeSeriesPoint:
    """Net total for one month."""

    period: YearMonth
    total: Money


@dataclass(frozen=True)
class BudgetProgress:
    """
    Spend versus limit for a single budget.

    ``remaining`` goes negative on overspend. ``percent_used`` is a ratio
    (0.4 means 40%) with four decimal places.
    """

    budget_id: BudgetId
    spent: Money
    remaining: Money
    percent_used: Decimal

    @property
    def is_over_budget(self) -> bool:
        return self.remaining.is_negative()


def category_breakdown(
    transactions: Iterable[Transaction], month: YearMonth, currency: CurrencyCode
) -> list[PieSlice]:
    """
    Expense totals by category for a month.

    Only categorized EXPENSE transactions in ``month`` and ``currency`` count.
    Slices are sorted by total descending, then category id ascending.
    """
    totals: dict[CategoryId, Money] = defaultdict(lambda: Money.zero(currency))
    for tx in transactions:
        if tx.category_id is None or not is_expense_in(tx, month, currency):
            continue
        totals[tx.category_id] = totals[tx.category_id] + tx.signed_amount().abs()

    slices = [PieSlice(category_id, total) for category_id, total in totals.items()]
    return sorted(slices, key=lambda s: (-s.total.amount, s.category_id.value))


def monthly_totals(
    transactions: Iterable[Transaction], start: YearMonth, end: YearMonth, currency: CurrencyCode
) -> list[TimeSeriesPoint]:
    """
    Net signed totals per month from ``start`` to ``end`` inclusive.

    Every month in the range gets a point, with 0.00 for months that have no
    matching transactions, so the result length always equals the number of
    months in the range.
    """
    months = months_between(start, end)
    totals: dict[YearMonth, Money] = {month: Money.zero(currency) for month in months}
    for tx in transactions:
        if tx.amount.currency != currency:
            continue
        period = YearMonth.of(tx.date)
        if period in totals:
            totals[period] = totals[period] + tx.signed_amount()
    return [TimeSeriesPoint(month, totals[month]) for month in months]


def budget_progress(budgets: Iterable[Budget], transactions: Sequence[Transaction]) -> list[BudgetProgress]:
    """
    Spent, remaining and percent used for each budget.

    Spending is the sum of EXPENSE amounts in the budget's month, categories
    and currency. A zero limit reports 0 used when nothing was spent and 1
    (fully used) otherwise.

    Results are ordered by budget name, then id.
    """
    progress = []
    for budget in sorted(budgets, key=lambda b: (b.name, b.id.value)):
        currency = budget.limit.currency
        spent = Money.zero(currency)
        for tx in transactions:
            if tx.category_id in budget.category_ids and is_expense_in(tx, budget.month, currency):
                spent = spent + tx.signed_amount().abs()
        progress.append(
            BudgetProgress(
                budget_id=budget.id,
                spent=spent,
                remaining=budget.limit - spent,
                percent_used=_percent_used(spent, budget.limit),
            )
        )
    return progress


def _percent_used(spent: Money, limit: Money) -> Decimal:
    if limit.is_zero():
        return Decimal(0) if spent.is_zero() else Decimal(1)
    return (spent.amount / limit.amount).quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)


def net_total(transactions: Iterable[Transaction], currency: CurrencyCode) -> Money:
    """Net signed total of all transactions in ``currency``."""
    total = Money.zero(currency)
    for tx in transactions:
        if tx.amount.currency == currency:
            total = total + tx.signed_amount()
    return total

