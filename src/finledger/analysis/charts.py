#!/usr/bin/env python3
"""
Chart Rendering

Static PNG/PDF/SVG charts for monthly totals and category breakdowns.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # Use non-interactive backend

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from ..core.config import get_config  # noqa: E402
from .analytics import PieSlice, TimeSeriesPoint  # noqa: E402
from .frames import breakdown_frame, totals_frame  # noqa: E402

logger = logging.getLogger(__name__)


def _figure_size() -> tuple[int, int]:
    config = get_config()
    return (config.analysis.chart_width, config.analysis.chart_height)


def render_monthly_totals(points: Sequence[TimeSeriesPoint], output_path: str | Path) -> Path:
    """
    Render monthly net totals as a bar chart with a cumulative line.

    Positive months are drawn green, negative months red.

    Returns:
        Path of the written image
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = totals_frame(points)
    x = np.arange(len(df))
    totals = df["total"].to_numpy()
    colors = np.where(totals >= 0, "tab:green", "tab:red")

    fig, ax = plt.subplots(figsize=_figure_size())
    try:
        ax.bar(x, totals, color=colors, label="Net total")
        ax.plot(x, df["cumulative"].to_numpy(), color="tab:blue", marker="o", label="Cumulative")
        ax.axhline(0, color="black", linewidth=0.8)
        ax.set_xticks(x)
        ax.set_xticklabels([str(period) for period in df.index], rotation=45, ha="right")
        currency = df["currency"].iloc[0] if len(df) else ""
        ax.set_ylabel(f"Amount ({currency})" if currency else "Amount")
        ax.set_title("Monthly Net Totals")
        ax.legend()
        fig.tight_layout()
        fig.savefig(output_path)
    finally:
        plt.close(fig)

    logger.info("Saved monthly totals chart to %s", output_path)
    return output_path


def render_breakdown(slices: Sequence[PieSlice], output_path: str | Path) -> Path:
    """
    Render a category breakdown as a pie chart.

    Returns:
        Path of the written image
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = breakdown_frame(slices)

    fig, ax = plt.subplots(figsize=_figure_size())
    try:
        if len(df):
            ax.pie(df["total"].to_numpy(), labels=df["category"].tolist(), autopct="%1.1f%%", startangle=90)
            ax.axis("equal")
        else:
            ax.text(0.5, 0.5, "No expenses", ha="center", va="center")
            ax.set_axis_off()
        ax.set_title("Expenses by Category")
        fig.tight_layout()
        fig.savefig(output_path)
    finally:
        plt.close(fig)

    logger.info("Saved category breakdown chart to %s", output_path)
    return output_path
