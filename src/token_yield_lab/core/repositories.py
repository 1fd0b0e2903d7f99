"""In-memory repositories for TokenYieldLab data models."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import pandas as pd

from .models import PricePoint


class PriceHistory:
    """Price series kept in ascending timestamp order, with pandas export."""

    def __init__(self, points: Iterable[PricePoint] | None = None) -> None:
        self._points: list[PricePoint] = sorted(points or [], key=lambda p: p.timestamp)

    def since(self, timestamp_ms: int) -> "PriceHistory":
        return PriceHistory(p for p in self._points if p.timestamp >= timestamp_ms)

    def tail(self, n: int) -> "PriceHistory":
        if n <= 0:
            return PriceHistory()
        return PriceHistory(self._points[-n:])

    def to_list(self) -> list[PricePoint]:
        return list(self._points)

    def to_dataframe(self) -> pd.DataFrame:
        if not self._points:
            return pd.DataFrame(columns=["price"], index=pd.DatetimeIndex([], tz="UTC"))
        df = pd.DataFrame([{"timestamp": p.timestamp, "price": p.price} for p in self._points])
        df.index = pd.to_datetime(df.pop("timestamp"), unit="ms", utc=True)
        df.index.name = "timestamp"
        return df

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self._points)


__all__ = ["PriceHistory"]
