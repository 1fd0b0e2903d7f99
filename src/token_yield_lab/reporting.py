"""File-first CSV outputs for a projection run."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from .analytics.projection import projection_frame
from .core import CurrentStats, ProjectionResult

_SUMMARY_COLUMNS = [
    "total_usd_value",
    "total_tokens",
    "net_profit_usd",
    "total_roi_percent",
    "multiplier",
    "daily_estimate_usd",
    "days_elapsed",
]


def _ensure_outdir(outdir: str | Path) -> Path:
    p = Path(outdir)
    p.mkdir(parents=True, exist_ok=True)
    return p


def summary_table(result: ProjectionResult, stats: CurrentStats | None = None) -> pd.DataFrame:
    """One-row summary of a projection, optionally with the live snapshot.

    An empty projection yields an empty frame with the summary columns so
    callers can render a "no data" state.
    """

    if result.summary is None:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    row = result.summary.to_dict()
    row["daily_rate"] = result.daily_rate
    row["base_price"] = result.base_price
    row["used_fallback_window"] = result.used_fallback_window
    if stats is not None:
        row["current_price"] = stats.current_price
        row["price_change_24h"] = stats.price_change_24h
        row["stats_source"] = stats.source or "unavailable"
    return pd.DataFrame([row])


def projection_report(
    result: ProjectionResult,
    outdir: str | Path,
    *,
    stats: CurrentStats | None = None,
) -> dict[str, Path]:
    """Write ``projection.csv`` and ``summary.csv`` and return their paths.

    Nothing is written for an empty projection.
    """

    if result.empty:
        return {}
    out = _ensure_outdir(outdir)
    paths = {"projection": out / "projection.csv", "summary": out / "summary.csv"}
    projection_frame(result).to_csv(paths["projection"])
    summary_table(result, stats).to_csv(paths["summary"], index=False)
    return paths


__all__ = ["projection_report", "summary_table"]
