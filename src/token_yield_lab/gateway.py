"""Market data gateway composing price provider adapters."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from .core import CurrentStats, MarketConfig, MarketSnapshot, PricePoint
from .sources import DexScreenerSource, GeckoTerminalSource, OKXDexSource, PriceProvider
from .sources.base import sort_points

logger = logging.getLogger(__name__)


def build_provider(name: str, config: MarketConfig) -> PriceProvider:
    """Instantiate the adapter registered under ``name``."""

    key = name.lower()
    if key == "geckoterminal":
        return GeckoTerminalSource(
            config.platform_id,
            base_url=config.geckoterminal_base_url,
            ohlcv_limit=config.ohlcv_limit,
            timeout=config.timeout,
        )
    if key == "dexscreener":
        return DexScreenerSource(base_url=config.dexscreener_base_url, timeout=config.timeout)
    if key == "okx":
        return OKXDexSource(config.chain_id, base_url=config.okx_base_url, timeout=config.timeout)
    raise ValueError(f"Unknown price provider: {name!r}")


def _provider_name(provider: PriceProvider) -> str:
    return getattr(provider, "name", provider.__class__.__name__)


class MarketDataGateway:
    """Best-effort market data for one token behind a single canonical interface.

    Providers are consulted in order. Stats come from the first provider that
    answers; history from the first provider returning a non-empty series.
    No call raises: total failure yields ``CurrentStats()`` or ``[]``.
    """

    def __init__(
        self,
        providers: Sequence[PriceProvider],
        config: MarketConfig | None = None,
    ) -> None:
        self._providers: list[PriceProvider] = list(providers)
        self.config = config or MarketConfig()

    @classmethod
    def from_config(cls, config: MarketConfig | None = None) -> "MarketDataGateway":
        cfg = config or MarketConfig()
        return cls([build_provider(name, cfg) for name in cfg.providers], cfg)

    @property
    def providers(self) -> list[PriceProvider]:
        return list(self._providers)

    def fetch_current_stats(self, token_address: str | None = None) -> CurrentStats:
        address = token_address or self.config.token_address
        for provider in self._providers:
            try:
                stats = provider.fetch_current_stats(address)
            except Exception as exc:
                logger.warning("Provider %s failed: %s", _provider_name(provider), exc)
                continue
            if isinstance(stats, CurrentStats) and stats.available:
                return stats
            logger.info("Provider %s returned no stats; trying next", _provider_name(provider))
        return CurrentStats()

    def fetch_historical_series(
        self,
        platform_id: str | None = None,
        token_address: str | None = None,
    ) -> list[PricePoint]:
        platform = platform_id or self.config.platform_id
        address = token_address or self.config.token_address
        for provider in self._providers:
            try:
                series = provider.fetch_historical_series(platform, address)
            except Exception as exc:
                logger.warning("Provider %s failed: %s", _provider_name(provider), exc)
                continue
            if isinstance(series, list) and series:
                # adapters sort already; re-sorting keeps third-party providers honest
                return sort_points(series)
        return []

    def refresh(
        self,
        token_address: str | None = None,
        platform_id: str | None = None,
    ) -> MarketSnapshot:
        """Fetch stats and history concurrently."""

        with ThreadPoolExecutor(max_workers=2) as pool:
            stats_future = pool.submit(self.fetch_current_stats, token_address)
            series_future = pool.submit(self.fetch_historical_series, platform_id, token_address)
            snapshot = MarketSnapshot(stats=stats_future.result(), series=series_future.result())
        if not snapshot.has_history:
            logger.warning(
                "No historical prices for %s on %s",
                token_address or self.config.token_address,
                platform_id or self.config.platform_id,
            )
        return snapshot


__all__ = ["MarketDataGateway", "build_provider"]
