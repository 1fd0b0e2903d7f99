"""DexScreener adapter for :mod:`token_yield_lab`."""

from __future__ import annotations

import logging

from ..core import CurrentStats, PricePoint
from ..core.constants import DEFAULT_TIMEOUT, DEXSCREENER_API_BASE
from .base import JSONHTTPSource, ProviderError, dig, to_float, to_price

logger = logging.getLogger(__name__)


class DexScreenerSource(JSONHTTPSource):
    """HTTP client for the DexScreener token-pairs endpoint.

    Pairs are returned ordered by liquidity, so ``pairs[0]`` is the market
    used for the snapshot. DexScreener exposes no daily candles.
    """

    name = "dexscreener"

    def __init__(self, *, base_url: str = DEXSCREENER_API_BASE, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__(base_url, timeout=timeout)

    def fetch_current_stats(self, token_address: str) -> CurrentStats:
        try:
            payload = self._get_json(f"{self.base_url}/tokens/{token_address}")
            pair = dig(payload, "pairs", 0)
            if not isinstance(pair, dict):
                raise ProviderError("no trading pairs in response")
        except Exception as exc:
            logger.warning("DexScreener stats request failed: %s", exc)
            return CurrentStats()
        return CurrentStats(
            current_price=to_price(pair.get("priceUsd")),
            price_change_24h=to_float(dig(pair, "priceChange", "h24")),
            market_cap=to_float(pair.get("fdv")),
            volume_24h=to_float(dig(pair, "volume", "h24")),
            source=self.name,
        )

    def fetch_historical_series(self, platform_id: str, token_address: str) -> list[PricePoint]:
        logger.debug("DexScreener offers no daily history for %s", token_address)
        return []


__all__ = ["DexScreenerSource"]
