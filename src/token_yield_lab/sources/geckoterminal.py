"""GeckoTerminal adapter for :mod:`token_yield_lab`."""

from __future__ import annotations

import logging

from ..core import CurrentStats, PricePoint
from ..core.constants import (
    DEFAULT_OHLCV_LIMIT,
    DEFAULT_PLATFORM_ID,
    DEFAULT_TIMEOUT,
    GECKO_TERMINAL_ACCEPT,
    GECKO_TERMINAL_API_BASE,
)
from .base import JSONHTTPSource, ProviderError, dig, ohlcv_to_points, to_float, to_price

logger = logging.getLogger(__name__)


class GeckoTerminalSource(JSONHTTPSource):
    """HTTP client for the GeckoTerminal on-chain pool indexer.

    Token stats come from the token endpoint; daily history is read from the
    OHLCV bars of the token's top pool.
    """

    name = "geckoterminal"

    def __init__(
        self,
        platform_id: str = DEFAULT_PLATFORM_ID,
        *,
        base_url: str = GECKO_TERMINAL_API_BASE,
        ohlcv_limit: int = DEFAULT_OHLCV_LIMIT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(base_url, timeout=timeout)
        self.platform_id = platform_id
        self.ohlcv_limit = ohlcv_limit

    def _headers(self) -> dict[str, str]:
        return {"Accept": GECKO_TERMINAL_ACCEPT}

    def _stats(self, token_address: str) -> CurrentStats:
        url = f"{self.base_url}/networks/{self.platform_id}/tokens/{token_address}"
        attrs = dig(self._get_json(url), "data", "attributes")
        if not isinstance(attrs, dict):
            raise ProviderError("token attributes missing from response")
        return CurrentStats(
            current_price=to_price(attrs.get("price_usd")),
            price_change_24h=to_float(dig(attrs, "price_change_percentage", "h24")),
            market_cap=to_float(attrs.get("fdv_usd")),
            volume_24h=to_float(attrs.get("total_volume_usd")),
            source=self.name,
        )

    def top_pool(self, platform_id: str, token_address: str) -> str | None:
        """Return the address of the token's highest-liquidity pool."""

        url = f"{self.base_url}/networks/{platform_id}/tokens/{token_address}/pools"
        address = dig(self._get_json(url), "data", 0, "attributes", "address")
        return str(address) if address else None

    def _history(self, platform_id: str, token_address: str) -> list[PricePoint]:
        pool = self.top_pool(platform_id, token_address)
        if pool is None:
            logger.info("GeckoTerminal has no pool for %s on %s", token_address, platform_id)
            return []
        url = f"{self.base_url}/networks/{platform_id}/pools/{pool}/ohlcv/day"
        payload = self._get_json(url, {"limit": self.ohlcv_limit})
        return ohlcv_to_points(dig(payload, "data", "attributes", "ohlcv_list"))

    def fetch_current_stats(self, token_address: str) -> CurrentStats:
        try:
            return self._stats(token_address)
        except Exception as exc:
            logger.warning("GeckoTerminal stats request failed: %s", exc)
            return CurrentStats()

    def fetch_historical_series(self, platform_id: str, token_address: str) -> list[PricePoint]:
        try:
            return self._history(platform_id, token_address)
        except Exception as exc:
            logger.warning("GeckoTerminal history request failed: %s", exc)
            return []


__all__ = ["GeckoTerminalSource"]
