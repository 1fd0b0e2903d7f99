"""Immutable data models used throughout TokenYieldLab."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class PricePoint:
    """Daily close price observation."""

    timestamp: int  # epoch milliseconds, UTC
    price: float  # USD, never negative

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "timestamp_iso": datetime.fromtimestamp(self.timestamp / 1000, tz=UTC).isoformat(),
            "price": self.price,
        }


@dataclass(frozen=True)
class CurrentStats:
    """Market snapshot for a single token.

    All numeric fields default to zero. ``source`` names the provider that
    answered; an empty source means no provider could be reached, which
    separates "the provider reported zero" from "the lookup failed".
    """

    current_price: float = 0.0
    price_change_24h: float = 0.0  # percent
    market_cap: float = 0.0  # fully diluted valuation, USD
    volume_24h: float = 0.0
    source: str = ""

    @property
    def available(self) -> bool:
        return bool(self.source)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectionPoint:
    """One day of a compounding projection."""

    timestamp: int
    date_label: str  # MM-DD, for chart axes
    full_date: str  # YYYY-MM-DD
    price: float
    token_balance: float
    usd_value: float
    multiplier: float  # token_balance / initial token balance
    profit_usd: float
    roi_percent: float  # nan when the principal is zero

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectionSummary:
    """Terminal statistics derived from the last projection point."""

    total_usd_value: float
    total_tokens: float
    net_profit_usd: float
    total_roi_percent: float  # nan when the principal is zero
    multiplier: float
    daily_estimate_usd: float
    days_elapsed: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectionResult:
    """Curve plus summary returned by :func:`~token_yield_lab.analytics.projection.project`."""

    points: list[ProjectionPoint] = field(default_factory=list)
    summary: ProjectionSummary | None = None
    daily_rate: float = 0.0
    base_price: float = 0.0
    used_fallback_window: bool = False

    @property
    def empty(self) -> bool:
        return not self.points


@dataclass(frozen=True)
class MarketSnapshot:
    """Result of one gateway refresh cycle."""

    stats: CurrentStats = field(default_factory=CurrentStats)
    series: list[PricePoint] = field(default_factory=list)

    @property
    def has_history(self) -> bool:
        return bool(self.series)


__all__ = [
    "CurrentStats",
    "MarketSnapshot",
    "PricePoint",
    "ProjectionPoint",
    "ProjectionResult",
    "ProjectionSummary",
]
