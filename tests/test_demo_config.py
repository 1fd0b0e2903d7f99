from pathlib import Path

from token_yield_demo import build_gateway, load_config
from token_yield_lab import CSVPriceSource, GeckoTerminalSource

ROOT = Path(__file__).resolve().parents[1]


def test_loads_config_file() -> None:
    cfg = load_config(ROOT / "configs" / "demo.toml")
    assert cfg["history_csv"].endswith("sample_prices.csv")
    assert cfg["market"]["platform_id"] == "polygon_pos"
    assert cfg["market"]["providers"] == ["geckoterminal", "dexscreener", "okx"]
    assert cfg["projection"]["start_date"] == "2024-03-01"
    assert cfg["projection"]["annual_yield_percent"] == 1000.0
    assert cfg["output"]["show"] is False
    assert cfg["output"]["charts"] == ["value", "price"]


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.toml")
    assert cfg["projection"]["principal"] == 1000.0
    assert cfg["history_csv"] is None


def test_build_gateway_puts_csv_source_first() -> None:
    cfg = load_config(ROOT / "configs" / "demo.toml")
    cfg["history_csv"] = str(ROOT / "src" / "sample_prices.csv")
    gateway = build_gateway(cfg)
    assert isinstance(gateway.providers[0], CSVPriceSource)
    assert isinstance(gateway.providers[1], GeckoTerminalSource)


def test_build_gateway_csv_serves_history_only() -> None:
    cfg = load_config(ROOT / "configs" / "demo.toml")
    cfg["history_csv"] = str(ROOT / "src" / "sample_prices.csv")
    csv_source = build_gateway(cfg).providers[0]
    assert csv_source.stats is False
    assert not csv_source.fetch_current_stats("").available
    assert len(csv_source.fetch_historical_series("", "")) == 60
