"""Price provider adapters used by :mod:`token_yield_lab`."""

from __future__ import annotations

from typing import Protocol

from ..core import CurrentStats, PricePoint
from .base import ProviderError, to_float
from .csv import CSVPriceSource
from .dexscreener import DexScreenerSource
from .geckoterminal import GeckoTerminalSource
from .okx import OKXDexSource


class PriceProvider(Protocol):
    """Adapter protocol returning canonical stats and price series.

    Implementations never raise: failures yield ``CurrentStats()`` or ``[]``.
    """

    name: str

    def fetch_current_stats(self, token_address: str) -> CurrentStats: ...

    def fetch_historical_series(self, platform_id: str, token_address: str) -> list[PricePoint]: ...


__all__ = [
    "CSVPriceSource",
    "DexScreenerSource",
    "GeckoTerminalSource",
    "OKXDexSource",
    "PriceProvider",
    "ProviderError",
    "to_float",
]
