"""
TokenYieldLab: price acquisition and compounding projections for a staked token.

Design goals:
- Extensible price adapters (GeckoTerminal, DexScreener, OKX, CSV, ...)
- One canonical shape (CurrentStats, PricePoint) whatever the upstream schema
- Provider failures degrade to zero/empty results instead of exceptions
- Pure, deterministic daily-compounding projection engine
- Matplotlib visualizations (single-plot functions)
"""

from __future__ import annotations

import logging

from . import analytics, reporting
from .analytics.projection import daily_rate, project, projection_frame, select_window
from .core import (
    CurrentStats,
    MarketConfig,
    MarketSnapshot,
    PriceHistory,
    PricePoint,
    ProjectionConfig,
    ProjectionPoint,
    ProjectionResult,
    ProjectionSummary,
)
from .gateway import MarketDataGateway, build_provider
from .sources import (
    CSVPriceSource,
    DexScreenerSource,
    GeckoTerminalSource,
    OKXDexSource,
    PriceProvider,
)
from .visualization import Visualizer

logger = logging.getLogger(__name__)


def run_projection(
    gateway: MarketDataGateway,
    params: ProjectionConfig | None = None,
) -> tuple[MarketSnapshot, ProjectionResult]:
    """Refresh market data and project it with ``params``.

    The live price doubles as the fallback base price. An empty projection
    is returned as-is; detecting it is the caller's job.
    """

    params = params or ProjectionConfig()
    snapshot = gateway.refresh()
    result = project(
        snapshot.series,
        params.principal,
        params.annual_yield_percent,
        params.start_date,
        snapshot.stats.current_price,
        fallback_window=params.fallback_window,
        compounding=params.compounding,
    )
    if result.empty:
        logger.warning("Projection for %s is empty", gateway.config.token_address)
    return snapshot, result


__all__ = [
    "CSVPriceSource",
    "CurrentStats",
    "DexScreenerSource",
    "GeckoTerminalSource",
    "MarketConfig",
    "MarketDataGateway",
    "MarketSnapshot",
    "OKXDexSource",
    "PriceHistory",
    "PricePoint",
    "PriceProvider",
    "ProjectionConfig",
    "ProjectionPoint",
    "ProjectionResult",
    "ProjectionSummary",
    "Visualizer",
    "analytics",
    "build_provider",
    "daily_rate",
    "project",
    "projection_frame",
    "reporting",
    "run_projection",
    "select_window",
]
