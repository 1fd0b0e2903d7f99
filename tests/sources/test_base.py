from __future__ import annotations

import math

import pytest

from token_yield_lab.core import PricePoint
from token_yield_lab.sources.base import ProviderError, dig, ohlcv_to_points, to_float, to_price


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1.25", 1.25),
        (3, 3.0),
        (" 7.5 ", 7.5),
        (None, 0.0),
        ("", 0.0),
        ("abc", 0.0),
        ("nan", 0.0),
        (float("inf"), 0.0),
        (True, 0.0),
        ({"h24": 1}, 0.0),
    ],
)
def test_to_float_coerces_or_zeroes(raw: object, expected: float) -> None:
    assert to_float(raw) == expected


def test_to_price_clamps_negative() -> None:
    assert to_price("-4.2") == 0.0
    assert to_price("4.2") == 4.2


def test_dig_walks_dicts_and_lists() -> None:
    payload = {"data": [{"attributes": {"address": "0xabc"}}]}
    assert dig(payload, "data", 0, "attributes", "address") == "0xabc"
    assert dig(payload, "data", 1, "attributes") is None
    assert dig(payload, "data", "attributes") is None
    assert dig(None, "data") is None


def test_ohlcv_to_points_sorts_and_scales_seconds() -> None:
    rows = [
        [300, 1, 1, 1, "3.0", 0],
        [100, 1, 1, 1, 1.0, 0],
        [200, 1, 1, 1, 2.0, 0],
    ]
    assert ohlcv_to_points(rows) == [
        PricePoint(100_000, 1.0),
        PricePoint(200_000, 2.0),
        PricePoint(300_000, 3.0),
    ]


def test_ohlcv_to_points_skips_malformed_rows() -> None:
    rows = [[100, 1, 1, 1], "row", [None, 1, 1, 1, 2.0], [200, 1, 1, 1, "bad", 0]]
    points = ohlcv_to_points(rows)
    assert points == [PricePoint(200_000, 0.0)]
    assert not any(math.isnan(p.price) for p in points)


def test_ohlcv_to_points_rejects_non_list() -> None:
    with pytest.raises(ProviderError):
        ohlcv_to_points({"ohlcv_list": []})


def test_ohlcv_to_points_keeps_millisecond_bars() -> None:
    rows = [[1704153600, 1, 1, 1, 2.0, 0], [1704067200000, 1, 1, 1, 1.0, 0]]
    assert ohlcv_to_points(rows) == [
        PricePoint(1704067200000, 1.0),
        PricePoint(1704153600000, 2.0),
    ]


def test_ohlcv_to_points_drops_bars_past_datetime_range() -> None:
    rows = [[1e16, 1, 1, 1, 5.0, 0], [1704067200, 1, 1, 1, 1.0, 0]]
    assert ohlcv_to_points(rows) == [PricePoint(1704067200000, 1.0)]
    assert ohlcv_to_points([[1e16, 1, 1, 1, 5.0, 0]], seconds=False) == []
