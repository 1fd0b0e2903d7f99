"""CSV-backed price source for offline runs."""

from __future__ import annotations

import logging

import pandas as pd

from ..core import CurrentStats, PricePoint
from .base import MAX_TIMESTAMP_MS, MILLIS_THRESHOLD, sort_points, to_price

logger = logging.getLogger(__name__)


def _to_millis(column: pd.Series) -> list[int]:
    numeric = pd.to_numeric(column, errors="coerce")
    if numeric.notna().all():
        return [int(v) if v >= MILLIS_THRESHOLD else int(v * 1000) for v in numeric]
    parsed = pd.to_datetime(column, utc=True)
    return [int(ts.timestamp() * 1000) for ts in parsed]


class CSVPriceSource:
    """Load a daily price series from a CSV with ``timestamp`` and ``price``.

    Timestamps may be epoch seconds, epoch milliseconds or ISO strings. The
    snapshot is derived from the last two rows unless ``stats`` is false, in
    which case the source only serves history and live providers answer
    snapshot requests.
    """

    name = "csv"

    def __init__(self, path: str, *, stats: bool = True) -> None:
        self.path = path
        self.stats = stats

    def load(self) -> list[PricePoint]:
        df = pd.read_csv(self.path)
        required = {"timestamp", "price"}
        missing = required.difference(df.columns)
        if missing:
            raise ValueError(f"CSV missing columns: {missing}")
        df = df.dropna(subset=["timestamp"])
        points = [
            PricePoint(timestamp=ts, price=to_price(price))
            for ts, price in zip(_to_millis(df["timestamp"]), df["price"])
            if 0 < ts <= MAX_TIMESTAMP_MS
        ]
        return sort_points(points)

    def fetch_historical_series(self, platform_id: str, token_address: str) -> list[PricePoint]:
        try:
            return self.load()
        except Exception as exc:
            logger.warning("CSV price source %s failed: %s", self.path, exc)
            return []

    def fetch_current_stats(self, token_address: str) -> CurrentStats:
        if not self.stats:
            return CurrentStats()
        points = self.fetch_historical_series("", token_address)
        if not points:
            return CurrentStats()
        last = points[-1].price
        change = 0.0
        if len(points) > 1 and points[-2].price > 0:
            change = (last / points[-2].price - 1.0) * 100.0
        return CurrentStats(current_price=last, price_change_24h=change, source=self.name)


__all__ = ["CSVPriceSource"]
