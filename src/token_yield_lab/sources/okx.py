"""OKX DEX aggregator adapter for :mod:`token_yield_lab`."""

from __future__ import annotations

import logging

from ..core import CurrentStats, PricePoint
from ..core.constants import DEFAULT_CHAIN_ID, DEFAULT_TIMEOUT, OKX_DEX_API_BASE
from .base import JSONHTTPSource, ProviderError, to_float, to_price

logger = logging.getLogger(__name__)


class OKXDexSource(JSONHTTPSource):
    """HTTP client for the OKX DEX token-info endpoint."""

    name = "okx"

    def __init__(
        self,
        chain_id: str = DEFAULT_CHAIN_ID,
        *,
        base_url: str = OKX_DEX_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(base_url, timeout=timeout)
        self.chain_id = str(chain_id)

    def fetch_current_stats(self, token_address: str) -> CurrentStats:
        try:
            payload = self._get_json(
                self.base_url, {"chainId": self.chain_id, "tokenAddress": token_address}
            )
            data = payload.get("data") if isinstance(payload, dict) else None
            # some gateway versions wrap the record in a one-element list
            if isinstance(data, list):
                data = data[0] if data else None
            if not isinstance(data, dict):
                raise ProviderError("token info missing from response")
        except Exception as exc:
            logger.warning("OKX stats request failed: %s", exc)
            return CurrentStats()
        return CurrentStats(
            current_price=to_price(data.get("priceUsd")),
            price_change_24h=to_float(data.get("priceChange24h")),
            market_cap=to_float(data.get("fdv")),
            volume_24h=to_float(data.get("volume24h")),
            source=self.name,
        )

    def fetch_historical_series(self, platform_id: str, token_address: str) -> list[PricePoint]:
        logger.debug("OKX token-info offers no daily history for %s", token_address)
        return []


__all__ = ["OKXDexSource"]
