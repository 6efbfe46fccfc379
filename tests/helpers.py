"""Test utilities for mocking the Notifica API over httpx.MockTransport."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

TEST_API_KEY = "nk_test_abc123"
TEST_BASE_URL = "https://api.test.local/v1"


@dataclass
class MockResponse:
    """A canned response. ``text`` wins over ``body`` when both are set."""

    status: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    text: str | None = None

    def to_httpx(self) -> httpx.Response:
        if self.text is not None:
            return httpx.Response(self.status, text=self.text, headers=self.headers)
        if self.body is None:
            return httpx.Response(self.status, headers=self.headers)
        return httpx.Response(self.status, json=self.body, headers=self.headers)


class MockApi:
    """Records requests and replays responses.

    With a list, responses are returned in sequence and the last one
    repeats once the list is exhausted. A callable receives the request
    and returns a MockResponse (or raises, to simulate network failures).
    ``delay`` holds every response back by that many seconds.
    """

    def __init__(
        self,
        responses: MockResponse | list[MockResponse] | Callable[[httpx.Request], MockResponse],
        *,
        delay: float = 0.0,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self.delay = delay
        self._handler = responses if callable(responses) else None
        if isinstance(responses, MockResponse):
            self._responses = [responses]
        elif isinstance(responses, list):
            self._responses = list(responses)
        else:
            self._responses = []
        self.transport = httpx.MockTransport(self._handle)

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self._handler is not None:
            return self._handler(request).to_httpx()
        index = min(len(self.requests), len(self._responses)) - 1
        return self._responses[index].to_httpx()

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def call_count(self) -> int:
        return len(self.requests)


class SleepRecorder:
    """Async stand-in for asyncio.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def body_of(request: httpx.Request) -> Any:
    """Decode a recorded request body, or None if it had no body."""
    if not request.content:
        return None
    return json.loads(request.content)


def envelope(data: Any) -> dict[str, Any]:
    """Wrap data in the standard ``{data: ...}`` envelope."""
    return {"data": data}


def paginated(data: list[Any], cursor: str | None = None, has_more: bool = False) -> dict[str, Any]:
    """Wrap items in the paginated envelope."""
    return {"data": data, "meta": {"cursor": cursor, "has_more": has_more}}


def error_body(
    code: str, message: str, details: dict[str, list[str]] | None = None
) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error}
