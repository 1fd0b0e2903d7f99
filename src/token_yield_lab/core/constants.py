"""Core constants shared across TokenYieldLab modules."""

from __future__ import annotations

# Default token: LGNS on Polygon PoS. The projection defaults mirror the
# staking APR advertised for that token.
DEFAULT_TOKEN_ADDRESS = "0xeb51d9a39ad5eef215dc0bf39a8821ff804a0f01"
DEFAULT_PLATFORM_ID = "polygon_pos"
DEFAULT_CHAIN_ID = "137"
DEFAULT_ANNUAL_YIELD = 1000.0
DEFAULT_PRINCIPAL = 1000.0
DEFAULT_LOOKBACK_DAYS = 30

GECKO_TERMINAL_API_BASE = "https://api.geckoterminal.com/api/v2"
GECKO_TERMINAL_ACCEPT = "application/json;version=20230302"
DEXSCREENER_API_BASE = "https://api.dexscreener.com/latest/dex"
OKX_DEX_API_BASE = "https://www.okx.com/priapi/v5/dex/token/token-info"

# GeckoTerminal caps daily OHLCV at 1000 bars; 180 covers half a year.
DEFAULT_OHLCV_LIMIT = 180
DEFAULT_TIMEOUT = 10.0

# Number of most recent points used when the start date precedes no data.
DEFAULT_FALLBACK_WINDOW = 30

DAYS_PER_YEAR = 365

__all__ = [
    "DAYS_PER_YEAR",
    "DEFAULT_ANNUAL_YIELD",
    "DEFAULT_CHAIN_ID",
    "DEFAULT_FALLBACK_WINDOW",
    "DEFAULT_LOOKBACK_DAYS",
    "DEFAULT_OHLCV_LIMIT",
    "DEFAULT_PLATFORM_ID",
    "DEFAULT_PRINCIPAL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_TOKEN_ADDRESS",
    "DEXSCREENER_API_BASE",
    "GECKO_TERMINAL_ACCEPT",
    "GECKO_TERMINAL_API_BASE",
    "OKX_DEX_API_BASE",
]
