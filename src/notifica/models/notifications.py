"""Notification and delivery attempt models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .common import Channel, NotificaModel, NotificationStatus


class Notification(NotificaModel):
    """A notification queued for asynchronous delivery."""

    id: str
    channel: Channel
    recipient: str
    status: NotificationStatus
    template_id: str | None = None
    metadata: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MessageAttempt(NotificaModel):
    """One provider delivery attempt for a notification."""

    id: str
    attempt_number: int = Field(ge=1)
    status: str
    provider_response: dict[str, Any] | None = None
    created_at: datetime | None = None
