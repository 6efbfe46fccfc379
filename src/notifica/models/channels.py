"""Channel configuration models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .common import Channel, NotificaModel


class ChannelConfiguration(NotificaModel):
    """Provider configuration for one delivery channel.

    Credentials are write-only and never returned by the API.
    """

    id: str
    channel: Channel
    provider: str
    settings: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TestChannelResult(NotificaModel):
    __test__ = False

    success: bool
    message: str = ""
