"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add tests directory to path so helpers can be imported
tests_dir = Path(__file__).parent
if str(tests_dir) not in sys.path:
    sys.path.insert(0, str(tests_dir))

from helpers import TEST_API_KEY, TEST_BASE_URL, MockApi, SleepRecorder  # noqa: E402

from notifica.client import NotificaClient  # noqa: E402
from notifica.config import ClientConfig  # noqa: E402
from notifica.sdk import Notifica  # noqa: E402


@pytest.fixture
def sleeper() -> SleepRecorder:
    """Records backoff sleeps instead of waiting."""
    return SleepRecorder()


@pytest.fixture
def make_client(sleeper: SleepRecorder) -> Callable[..., NotificaClient]:
    """Factory for request engines wired to a MockApi.

    Defaults mirror a test setup: no retries, 5s timeout, zero jitter.
    """

    def _make(api: MockApi, **overrides: Any) -> NotificaClient:
        settings: dict[str, Any] = {
            "api_key": TEST_API_KEY,
            "base_url": TEST_BASE_URL,
            "max_retries": 0,
            "timeout_ms": 5000,
        }
        settings.update(overrides)
        return NotificaClient(
            ClientConfig(**settings),
            transport=api.transport,
            sleep=sleeper,
            rand=lambda: 0.0,
        )

    return _make


@pytest.fixture
def make_notifica(make_client: Callable[..., NotificaClient]) -> Callable[..., Notifica]:
    """Factory for the top-level client wired to a MockApi."""

    def _make(api: MockApi, **overrides: Any) -> Notifica:
        return Notifica(client=make_client(api, **overrides))

    return _make
