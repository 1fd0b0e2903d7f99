"""Explicit configuration objects threaded into the gateway and the engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import date, timedelta
from typing import Any, Literal

from .constants import (
    DEFAULT_ANNUAL_YIELD,
    DEFAULT_CHAIN_ID,
    DEFAULT_FALLBACK_WINDOW,
    DEFAULT_LOOKBACK_DAYS,
    DEFAULT_OHLCV_LIMIT,
    DEFAULT_PLATFORM_ID,
    DEFAULT_PRINCIPAL,
    DEFAULT_TIMEOUT,
    DEFAULT_TOKEN_ADDRESS,
    DEXSCREENER_API_BASE,
    GECKO_TERMINAL_API_BASE,
    OKX_DEX_API_BASE,
)

Compounding = Literal["point", "calendar"]


def _known_keys(cls: type, raw: Mapping[str, Any]) -> dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in raw.items() if k in names}


@dataclass(frozen=True)
class MarketConfig:
    """Token identity and provider endpoints for :class:`MarketDataGateway`."""

    token_address: str = DEFAULT_TOKEN_ADDRESS
    platform_id: str = DEFAULT_PLATFORM_ID
    chain_id: str = DEFAULT_CHAIN_ID
    geckoterminal_base_url: str = GECKO_TERMINAL_API_BASE
    dexscreener_base_url: str = DEXSCREENER_API_BASE
    okx_base_url: str = OKX_DEX_API_BASE
    ohlcv_limit: int = DEFAULT_OHLCV_LIMIT
    timeout: float = DEFAULT_TIMEOUT
    providers: tuple[str, ...] = ("geckoterminal", "dexscreener", "okx")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "MarketConfig":
        """Build from a config table, ignoring unknown keys."""

        values = _known_keys(cls, raw or {})
        if "providers" in values:
            values["providers"] = tuple(str(p).lower() for p in values["providers"])
        if "chain_id" in values:
            values["chain_id"] = str(values["chain_id"])
        if "ohlcv_limit" in values:
            values["ohlcv_limit"] = int(values["ohlcv_limit"])
        if "timeout" in values:
            values["timeout"] = float(values["timeout"])
        return cls(**values)


def _default_start() -> date:
    return date.today() - timedelta(days=DEFAULT_LOOKBACK_DAYS)


@dataclass(frozen=True)
class ProjectionConfig:
    """User parameters for one projection run."""

    principal: float = DEFAULT_PRINCIPAL
    annual_yield_percent: float = DEFAULT_ANNUAL_YIELD
    start_date: date = field(default_factory=_default_start)
    fallback_window: int | None = DEFAULT_FALLBACK_WINDOW
    compounding: Compounding = "point"

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "ProjectionConfig":
        values = _known_keys(cls, raw or {})
        if "principal" in values:
            values["principal"] = float(values["principal"])
        if "annual_yield_percent" in values:
            values["annual_yield_percent"] = float(values["annual_yield_percent"])
        start = values.get("start_date")
        if start in (None, ""):
            values.pop("start_date", None)
        elif isinstance(start, str):
            values["start_date"] = date.fromisoformat(start)
        if "fallback_window" in values:
            # TOML has no null; zero or a negative value selects the full series
            window = values["fallback_window"]
            values["fallback_window"] = int(window) if window and int(window) > 0 else None
        if values.get("compounding") not in (None, "point", "calendar"):
            raise ValueError(f"Unknown compounding mode: {values['compounding']!r}")
        return cls(**values)


__all__ = ["Compounding", "MarketConfig", "ProjectionConfig"]
