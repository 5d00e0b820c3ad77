"""共享 fixture — OMDb API 替身 + ProviderData"""

from __future__ import annotations

import json
import urllib.error
from pathlib import Path
from typing import Any

import pytest

from omdb_provider.core.models import ProviderData

SHAWSHANK: dict[str, Any] = {
    "Title": "The Shawshank Redemption",
    "Year": "1994",
    "imdbID": "tt0111161",
    "Ratings": [
        {"Source": "Internet Movie Database", "Value": "9.3/10"},
        {"Source": "Rotten Tomatoes", "Value": "91%"},
        {"Source": "Metacritic", "Value": "82/100"},
    ],
    "Response": "True",
}


class _FakeHTTPResponse:
    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> _FakeHTTPResponse:
        return self

    def __exit__(self, *exc: object) -> None:
        return None


class FakeOmdb:
    """替换 urllib.request.urlopen，记录请求 URL 并返回预设响应

    body:  原始响应体（优先于 payload）
    error: 设置后 urlopen 直接抛出该异常
    """

    def __init__(self) -> None:
        self.payload: Any = SHAWSHANK
        self.body: bytes | None = None
        self.error: Exception | None = None
        self.calls: list[str] = []

    def __call__(self, url: str, timeout: float | None = None) -> _FakeHTTPResponse:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        body = self.body if self.body is not None else json.dumps(self.payload).encode()
        return _FakeHTTPResponse(body)


@pytest.fixture()
def fake_omdb(monkeypatch: pytest.MonkeyPatch) -> FakeOmdb:
    fake = FakeOmdb()
    monkeypatch.setattr("urllib.request.urlopen", fake)
    return fake


@pytest.fixture()
def unreachable_omdb(fake_omdb: FakeOmdb) -> FakeOmdb:
    fake_omdb.error = urllib.error.URLError("connection refused")
    return fake_omdb


@pytest.fixture()
def provider_data(tmp_path: Path) -> ProviderData:
    return ProviderData(
        api_key="test-key",
        api_base_url="http://omdb.test",
        local_dir=str(tmp_path / "films"),
    )
