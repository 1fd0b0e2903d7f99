"""Base utilities for TokenYieldLab data sources."""

from __future__ import annotations

import json
import logging
import math
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Iterable, Mapping
from typing import Any

from ..core import PricePoint
from ..core.constants import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

# Epoch values above this are already milliseconds (year 5138 in seconds).
MILLIS_THRESHOLD = 1e11
# 9999-12-31T23:59:59.999Z, the last instant datetime can represent.
MAX_TIMESTAMP_MS = 253_402_300_799_999


class ProviderError(RuntimeError):
    """Transport or schema failure inside a provider adapter."""


def to_float(value: object) -> float:
    """Coerce a provider number or numeric string to ``float``.

    ``None``, non-numeric strings, NaN and infinities all become ``0.0``.
    """

    if value is None or isinstance(value, bool):
        return 0.0
    try:
        out = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    return out if math.isfinite(out) else 0.0


def to_price(value: object) -> float:
    return max(to_float(value), 0.0)


def dig(payload: Any, *keys: str | int) -> Any:
    """Walk nested dicts/lists, returning ``None`` at the first missing step."""

    node = payload
    for key in keys:
        if isinstance(key, int):
            if not isinstance(node, list) or not -len(node) <= key < len(node):
                return None
        elif not isinstance(node, Mapping):
            return None
        try:
            node = node[key]
        except (KeyError, IndexError):
            return None
    return node


def ohlcv_to_points(rows: object, *, close_index: int = 4, seconds: bool = True) -> list[PricePoint]:
    """Project OHLCV bars onto close-price points sorted ascending by time.

    Bars that are not sequences of at least ``close_index + 1`` items or
    whose timestamp is not numeric are skipped. Second timestamps that are
    already in milliseconds are kept as is, and bars outside the datetime
    range are dropped.
    """

    if not isinstance(rows, list):
        raise ProviderError(f"OHLCV payload is not a list: {type(rows).__name__}")
    points: list[PricePoint] = []
    for row in rows:
        if not isinstance(row, (list, tuple)) or len(row) <= close_index:
            continue
        ts = to_float(row[0])
        if ts <= 0:
            continue
        ms = ts * 1000 if seconds and ts < MILLIS_THRESHOLD else ts
        if ms > MAX_TIMESTAMP_MS:
            continue
        points.append(PricePoint(timestamp=int(ms), price=to_price(row[close_index])))
    return sort_points(points)


def sort_points(points: Iterable[PricePoint]) -> list[PricePoint]:
    return sorted(points, key=lambda p: p.timestamp)


class JSONHTTPSource:
    """Shared ``urllib`` plumbing for JSON REST providers."""

    name = "http"

    def __init__(self, base_url: str, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    def _get_json(self, url: str, params: Mapping[str, object] | None = None) -> Any:
        if params:
            url = f"{url}?{urllib.parse.urlencode(params)}"
        req = urllib.request.Request(url, headers=self._headers())
        logger.debug("GET %s", url)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                status = getattr(resp, "status", 200)
                if not 200 <= status < 300:
                    raise ProviderError(f"HTTP {status} from {url}")
                return json.load(resp)
        except urllib.error.HTTPError as exc:
            raise ProviderError(f"HTTP {exc.code} from {url}") from exc
        except (urllib.error.URLError, TimeoutError, OSError) as exc:
            raise ProviderError(f"request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderError(f"invalid JSON from {url}: {exc}") from exc


__all__ = [
    "MAX_TIMESTAMP_MS",
    "MILLIS_THRESHOLD",
    "JSONHTTPSource",
    "ProviderError",
    "dig",
    "ohlcv_to_points",
    "sort_points",
    "to_float",
    "to_price",
]
