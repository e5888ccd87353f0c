#!/usr/bin/env python3
"""Tests for DataFrame conversions and chart rendering."""


import pandas as pd
import pytest

from finledger.analysis.analytics import budget_progress, category_breakdown, monthly_totals
from finledger.analysis.charts import render_breakdown, render_monthly_totals
from finledger.analysis.frames import breakdown_frame, progress_frame, totals_frame
from finledger.core.currency import USD
from finledger.core.dates import YearMonth

JAN = YearMonth(2024, 1)


@pytest.mark.analysis
class TestFrames:
    """Test pandas conversions."""

    def test_breakdown_frame_shares(self, sample_transactions):
        """Test shares sum to one."""
        df = breakdown_frame(category_breakdown(sample_transactions, JAN, USD))
        assert list(df.columns) == ["category", "total", "currency", "share"]
        assert df["share"].sum() == pytest.approx(1.0)
        assert df.iloc[0]["category"] == "transport"

    def test_breakdown_frame_empty(self):
        """Test an empty breakdown gives an empty frame."""
        df = breakdown_frame([])
        assert df.empty
        assert "share" in df.columns

    def test_totals_frame_cumulative(self, sample_transactions):
        """Test period index and cumulative column."""
        df = totals_frame(monthly_totals(sample_transactions, JAN, YearMonth(2024, 2), USD))
        assert list(df.index) == [pd.Period("2024-01", freq="M"), pd.Period("2024-02", freq="M")]
        assert df["total"].tolist() == [958.0, -8.5]
        assert df["cumulative"].tolist() == [958.0, 949.5]

    def test_progress_frame(self, sample_budget, sample_transactions):
        """Test budget progress rows."""
        df = progress_frame(budget_progress([sample_budget], sample_transactions))
        row = df.iloc[0]
        assert row["budget"] == "b1"
        assert row["spent"] == 12.0
        assert row["remaining"] == 88.0
        assert not row["over_budget"]


@pytest.mark.analysis
class TestCharts:
    """Test chart files are written."""

    def test_render_monthly_totals(self, sample_transactions, temp_dir):
        """Test the time-series chart is saved."""
        points = monthly_totals(sample_transactions, JAN, YearMonth(2024, 3), USD)
        path = render_monthly_totals(points, temp_dir / "charts" / "totals.png")
        assert path.exists()
        assert path.stat().st_size > 0

    def test_render_breakdown(self, sample_transactions, temp_dir):
        """Test the pie chart is saved."""
        path = render_breakdown(category_breakdown(sample_transactions, JAN, USD), temp_dir / "pie.png")
        assert path.exists()

    def test_render_breakdown_empty(self, temp_dir):
        """Test an empty breakdown still renders."""
        assert render_breakdown([], temp_dir / "empty.png").exists()
