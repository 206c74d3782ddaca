"""Shared fixtures for the tempy.email client tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from tempy_email.models import Email


class FakeClock:
    """Replaces the poller's clock and sleep so timing is exact and instant."""

    def __init__(self) -> None:
        self.now = 0.0
        self.delays: list[float] = []

    def time_ms(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms

    async def wait(self, ms: float) -> None:
        self.delays.append(ms)
        self.now += ms


@pytest.fixture
def fake_clock(monkeypatch):
    clock = FakeClock()
    monkeypatch.setattr("tempy_email.polling._now_ms", clock.time_ms)
    monkeypatch.setattr("tempy_email.polling.wait", clock.wait)
    return clock


class ScriptedSource:
    """Message source returning a scripted list per call (last one repeats)."""

    def __init__(self, *batches: list[Email]) -> None:
        self.batches = list(batches) or [[]]
        self.calls = 0

    async def __call__(self) -> list[Email]:
        index = min(self.calls, len(self.batches) - 1)
        self.calls += 1
        return self.batches[index]


@pytest.fixture
def make_source():
    return ScriptedSource


@pytest.fixture
def make_email():
    def _make(id: str = "1", **fields: Any) -> Email:
        fields.setdefault("from_addr", "sender@example.com")
        fields.setdefault("subject", "Hello")
        fields.setdefault("body_text", "")
        return Email(id=id, **fields)

    return _make


class FakeHttp:
    """Stands in for aiohttp: queued responses are served in order, the last one repeats."""

    def __init__(self) -> None:
        self.responses: list[MagicMock] = []
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self.error: Exception | None = None
        self.served = 0
        self.session = MagicMock()
        self.session.request = MagicMock(side_effect=self._request)

    def queue(self, body: Any = None, status: int = 200, reason: str = "OK", raw: str | bytes | None = None) -> None:
        response = MagicMock()
        response.status = status
        response.reason = reason
        content = raw if raw is not None else ("" if body is None else json.dumps(body))
        if isinstance(content, str):
            content = content.encode("utf-8")
        response.read = AsyncMock(return_value=content)
        self.responses.append(response)

    def _request(self, method: str, url: str, **kwargs: Any) -> MagicMock:
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        response = self.responses[min(self.served, len(self.responses) - 1)]
        self.served += 1
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=response)
        context.__aexit__ = AsyncMock(return_value=None)
        return context


@pytest.fixture
def fake_http():
    http = FakeHttp()
    with patch("aiohttp.ClientSession", return_value=AsyncMock(
        __aenter__=AsyncMock(return_value=http.session),
        __aexit__=AsyncMock(return_value=None),
    )) as session_cls:
        http.session_cls = session_cls
        yield http
