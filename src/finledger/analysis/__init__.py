"""
Ledger Analysis Package

Pure aggregations over transactions and budgets, plus DataFrame and chart
helpers for presenting them.

Key Components:
- analytics: category breakdown, monthly totals, budget progress
- frames: pandas DataFrame conversions
- charts: matplotlib rendering
"""

from .analytics import (
    BudgetProgress,
    PieSlice,
    TimeSeriesPoint,
    budget_progress,
    category_breakdown,
    monthly_totals,
    net_total,
)

__all__ = [
    "BudgetProgress",
    "PieSlice",
    "TimeSeriesPoint",
    "budget_progress",
    "category_breakdown",
    "monthly_totals",
    "net_total",
]
