import pandas as pd
import pytest

from token_yield_lab.core import PriceHistory, PricePoint


@pytest.fixture
def shuffled_points() -> list[PricePoint]:
    """Daily points delivered out of order, as some upstreams do."""

    return [
        PricePoint(timestamp=1704240000000, price=6.95),
        PricePoint(timestamp=1704067200000, price=6.5),
        PricePoint(timestamp=1704326400000, price=7.05),
        PricePoint(timestamp=1704153600000, price=6.8),
    ]


def test_history_sorts_on_construction(shuffled_points: list[PricePoint]) -> None:
    history = PriceHistory(shuffled_points)
    assert [p.price for p in history] == [6.5, 6.8, 6.95, 7.05]
    assert len(history) == 4
    assert history.to_list()[0] == PricePoint(1704067200000, 6.5)


def test_since_is_inclusive(shuffled_points: list[PricePoint]) -> None:
    window = PriceHistory(shuffled_points).since(1704153600000)
    assert [p.price for p in window] == [6.8, 6.95, 7.05]


def test_tail(shuffled_points: list[PricePoint]) -> None:
    history = PriceHistory(shuffled_points)
    assert [p.price for p in history.tail(2)] == [6.95, 7.05]
    assert len(history.tail(10)) == 4
    assert len(history.tail(0)) == 0


def test_empty_history() -> None:
    history = PriceHistory()
    assert len(history) == 0
    assert history.to_list() == []
    df = history.to_dataframe()
    assert df.empty
    assert list(df.columns) == ["price"]


def test_to_dataframe_has_utc_index(shuffled_points: list[PricePoint]) -> None:
    df = PriceHistory(shuffled_points).to_dataframe()
    assert df.index[0] == pd.Timestamp("2024-01-01", tz="UTC")
    assert df.index.is_monotonic_increasing
    assert df["price"].tolist() == [6.5, 6.8, 6.95, 7.05]
