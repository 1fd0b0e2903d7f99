from __future__ import annotations

import json
from pathlib import Path

import pytest

from token_yield_lab.core import CurrentStats
from token_yield_lab.sources import OKXDexSource

TOKEN = "0xeb51d9a39ad5eef215dc0bf39a8821ff804a0f01"
FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def test_okx_parses_token_info_and_sends_query(fake_http) -> None:
    fake_http.add_fixture("/token-info", "okx_token_info.json")

    stats = OKXDexSource("137").fetch_current_stats(TOKEN)

    assert stats.current_price == pytest.approx(6.8401)
    assert stats.price_change_24h == pytest.approx(-2.38)
    assert stats.market_cap == pytest.approx(1523111222.5)
    assert stats.volume_24h == pytest.approx(2833000.75)
    assert stats.source == "okx"
    url = fake_http.urls[0]
    assert "chainId=137" in url
    assert f"tokenAddress={TOKEN}" in url


def test_okx_accepts_list_wrapped_data(fake_http) -> None:
    payload = json.loads((FIXTURES / "okx_token_info.json").read_text())
    payload["data"] = [payload["data"]]
    fake_http.add("/token-info", payload)

    stats = OKXDexSource().fetch_current_stats(TOKEN)

    assert stats.current_price == pytest.approx(6.8401)


@pytest.mark.parametrize("payload", [{"code": 50011, "data": []}, {"msg": "rate limited"}, []])
def test_okx_missing_data_returns_zero_snapshot(fake_http, payload: object) -> None:
    fake_http.add("/token-info", payload)

    assert OKXDexSource().fetch_current_stats(TOKEN) == CurrentStats()


def test_okx_numeric_fields_may_be_numbers(fake_http) -> None:
    fake_http.add(
        "/token-info",
        {"data": {"priceUsd": 1.5, "priceChange24h": 3, "fdv": None, "volume24h": "n/a"}},
    )

    stats = OKXDexSource().fetch_current_stats(TOKEN)

    assert stats == CurrentStats(current_price=1.5, price_change_24h=3.0, source="okx")


def test_okx_has_no_history(fake_http) -> None:
    assert OKXDexSource().fetch_historical_series("polygon_pos", TOKEN) == []
