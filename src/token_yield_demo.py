from __future__ import annotations

import logging
import math
import os
import sys
import tomllib
from pathlib import Path
from typing import Any, cast

from token_yield_lab import (
    CSVPriceSource,
    MarketConfig,
    MarketDataGateway,
    ProjectionConfig,
    Visualizer,
    build_provider,
    projection_frame,
    run_projection,
)
from token_yield_lab.core import PriceHistory
from token_yield_lab.reporting import projection_report

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None) -> dict[str, Any]:
    """Load configuration from a TOML file and merge with defaults.

    Parameters
    ----------
    path:
        Optional path to a configuration file. When ``None`` or missing, the
        built-in defaults are used.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary with any file overrides applied.
    """

    default: dict[str, Any] = {
        "market": {
            "token_address": MarketConfig.token_address,
            "platform_id": MarketConfig.platform_id,
            "chain_id": MarketConfig.chain_id,
            "providers": list(MarketConfig.providers),
            "ohlcv_limit": MarketConfig.ohlcv_limit,
            "timeout": MarketConfig.timeout,
        },
        "projection": {
            "principal": ProjectionConfig.principal,
            "annual_yield_percent": ProjectionConfig.annual_yield_percent,
            "start_date": None,
            "fallback_window": ProjectionConfig.fallback_window,
            "compounding": ProjectionConfig.compounding,
        },
        "history_csv": None,
        "output": {"outdir": None, "show": True, "charts": ["value", "price"]},
    }

    cfg_path = Path(path) if path else None

    if cfg_path and cfg_path.is_file():
        with open(cfg_path, "rb") as f:
            file_cfg = tomllib.load(f)

        for k, v in file_cfg.items():
            if isinstance(v, dict) and k in default and isinstance(default[k], dict):
                cast(dict, default[k]).update(v)
            else:
                default[k] = v
    elif cfg_path:
        print(f"[WARN] Config file not found at {cfg_path}. Using defaults.")

    return default


def _apply_env(cfg: dict[str, Any]) -> None:
    projection = cfg.setdefault("projection", {})
    if principal_env := os.getenv("TOKEN_YIELD_PRINCIPAL"):
        try:
            projection["principal"] = float(principal_env)
        except ValueError:
            logger.warning("Ignoring non-numeric TOKEN_YIELD_PRINCIPAL=%r", principal_env)
    if apr_env := os.getenv("TOKEN_YIELD_APR"):
        try:
            projection["annual_yield_percent"] = float(apr_env)
        except ValueError:
            logger.warning("Ignoring non-numeric TOKEN_YIELD_APR=%r", apr_env)
    if start_env := os.getenv("TOKEN_YIELD_START_DATE"):
        projection["start_date"] = start_env
    if token_env := os.getenv("TOKEN_YIELD_TOKEN_ADDRESS"):
        cfg.setdefault("market", {})["token_address"] = token_env
    if csv_env := os.getenv("TOKEN_YIELD_HISTORY_CSV"):
        cfg["history_csv"] = csv_env
    if outdir_env := os.getenv("TOKEN_YIELD_OUTDIR"):
        cfg.setdefault("output", {})["outdir"] = outdir_env


def build_gateway(cfg: dict[str, Any]) -> MarketDataGateway:
    """Gateway for the configured providers, with an optional CSV history source first.

    The CSV source serves history only; snapshots come from the live providers.
    """

    market = MarketConfig.from_mapping(cfg.get("market"))
    providers = [build_provider(name, market) for name in market.providers]
    if history_csv := cfg.get("history_csv"):
        providers.insert(0, CSVPriceSource(str(history_csv), stats=False))
    return MarketDataGateway(providers, market)


def _fmt_pct(value: float) -> str:
    return "n/a" if math.isnan(value) else f"{value:,.2f}%"


def main() -> None:
    """Run the demo using configuration from file or environment variables."""
    logging.basicConfig(level=os.getenv("TOKEN_YIELD_LOG_LEVEL", "INFO").upper())

    cfg_file = os.getenv("TOKEN_YIELD_CONFIG") or (sys.argv[1] if len(sys.argv) > 1 else None)
    cfg = load_config(cfg_file)
    _apply_env(cfg)

    gateway = build_gateway(cfg)
    params = ProjectionConfig.from_mapping(cfg.get("projection"))
    snapshot, result = run_projection(gateway, params)

    stats = snapshot.stats
    if stats.available:
        print(
            f"Live price ({stats.source}): ${stats.current_price:,.6f} "
            f"({stats.price_change_24h:+.2f}% 24h), FDV ${stats.market_cap:,.0f}, "
            f"volume ${stats.volume_24h:,.0f}"
        )
    else:
        print("Live price unavailable.")

    if result.summary is None:
        print("No historical price data; check the network or token address.")
        return

    summary = result.summary
    if result.used_fallback_window:
        print("Start date precedes the available window; showing the most recent data.")
    print(f"Days projected: {summary.days_elapsed} ({len(result.points)} data points)")
    print(f"Final value: ${summary.total_usd_value:,.2f} ({summary.total_tokens:,.4f} tokens)")
    print(f"Net profit: ${summary.net_profit_usd:,.2f} (ROI {_fmt_pct(summary.total_roi_percent)})")
    print(f"Token multiplier: {summary.multiplier:.4f}x, daily yield ~${summary.daily_estimate_usd:,.2f}")

    out = cfg.get("output", {})
    outdir = Path(out["outdir"]) if out.get("outdir") else None
    show = bool(out.get("show", True)) if not outdir else False
    charts = out.get("charts", [])

    if outdir:
        paths = projection_report(result, outdir, stats=stats)
        for label, p in paths.items():
            print(f"Wrote {label}: {p}")

    if "value" in charts:
        Visualizer.projection_chart(
            projection_frame(result),
            principal=params.principal,
            save_path=str(outdir / "projection.png") if outdir else None,
            show=show,
        )
    if "price" in charts:
        Visualizer.price_chart(
            PriceHistory(snapshot.series).to_dataframe(),
            save_path=str(outdir / "price.png") if outdir else None,
            show=show,
        )


if __name__ == "__main__":
    main()
