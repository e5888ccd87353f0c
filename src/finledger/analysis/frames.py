#!/usr/bin/env python3
"""
DataFrame Conversions

Turns analytics results into pandas DataFrames for tabular display and
charting. Amounts are converted to float only here, at the presentation edge.
"""

from collections.abc import Sequence

import pandas as pd

from .analytics import BudgetProgress, PieSlice, TimeSeriesPoint


def breakdown_frame(slices: Sequence[PieSlice]) -> pd.DataFrame:
    """One row per category: category, total, currency, share of the month."""
    df = pd.DataFrame(
        [
            {
                "category": s.category_id.value,
                "total": float(s.total.amount),
                "currency": s.total.currency.value,
            }
            for s in slices
        ],
        columns=["category", "total", "currency"],
    )
    grand_total = df["total"].sum()
    df["share"] = df["total"] / grand_total if grand_total else 0.0
    return df


def totals_frame(points: Sequence[TimeSeriesPoint]) -> pd.DataFrame:
    """Monthly net totals indexed by pandas monthly Period."""
    df = pd.DataFrame(
        [
            {
                "period": pd.Period(str(p.period), freq="M"),
                "total": float(p.total.amount),
                "currency": p.total.currency.value,
            }
            for p in points
        ],
        columns=["period", "total", "currency"],
    )
    df.set_index("period", inplace=True)
    df["cumulative"] = df["total"].cumsum()
    return df


def progress_frame(progress: Sequence[BudgetProgress]) -> pd.DataFrame:
    """One row per budget with spent, remaining and percent used."""
    return pd.DataFrame(
        [
            {
                "budget": p.budget_id.value,
                "spent": float(p.spent.amount),
                "remaining": float(p.remaining.amount),
                "percent_used": float(p.percent_used),
                "over_budget": p.is_over_budget,
            }
            for p in progress
        ],
        columns=["budget", "spent", "remaining", "percent_used", "over_budget"],
    )
