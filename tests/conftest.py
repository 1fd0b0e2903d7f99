from __future__ import annotations

import json
import sys
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any

import pytest

# Ensure the package is importable without installation when running tests locally
pkg_src = Path(__file__).resolve().parents[1] / "src"
if str(pkg_src) not in sys.path:
    sys.path.insert(0, str(pkg_src))

FIXTURES = Path(__file__).resolve().parent / "fixtures"

TOKEN = "0xeb51d9a39ad5eef215dc0bf39a8821ff804a0f01"
POOL = "0x882df4b0fb50a229c3b4124eb18c759911485bfb"
PLATFORM = "polygon_pos"


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200) -> None:
        self._body = body
        self.status = status

    def read(self, *_args: object) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *_exc: object) -> bool:
        return False


class FakeHTTP:
    """Stand-in for ``urlopen`` routing requests by URL path suffix."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[Any, int, BaseException | None, bytes | None]] = {}
        self.requests: list[urllib.request.Request] = []
        self.timeouts: list[float | None] = []

    def add(
        self,
        suffix: str,
        payload: Any = None,
        *,
        status: int = 200,
        error: BaseException | None = None,
        raw: bytes | None = None,
    ) -> None:
        self.routes[suffix] = (payload, status, error, raw)

    def add_fixture(self, suffix: str, name: str) -> None:
        self.add(suffix, json.loads((FIXTURES / name).read_text()))

    def __call__(self, req: urllib.request.Request, timeout: float | None = None) -> FakeResponse:
        self.requests.append(req)
        self.timeouts.append(timeout)
        url = req.full_url
        path = url.split("?", 1)[0]
        for suffix, (payload, status, error, raw) in self.routes.items():
            if not path.endswith(suffix):
                continue
            if error is not None:
                raise error
            if status >= 400:
                raise urllib.error.HTTPError(url, status, "error", None, None)  # type: ignore[arg-type]
            body = raw if raw is not None else json.dumps(payload).encode()
            return FakeResponse(body, status)
        raise urllib.error.URLError(f"no route for {url}")

    @property
    def urls(self) -> list[str]:
        return [r.full_url for r in self.requests]


@pytest.fixture()
def fake_http(monkeypatch: pytest.MonkeyPatch) -> FakeHTTP:
    http = FakeHTTP()
    monkeypatch.setattr("token_yield_lab.sources.base.urllib.request.urlopen", http)
    return http
