"""Inbox models, for the in-app feed and its embeddable widget."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from .common import NotificaModel


class InboxNotification(NotificaModel):
    """One entry in a subscriber's inbox feed."""

    id: str
    title: str | None = None
    body: str | None = None
    action_url: str | None = None
    image_url: str | None = None
    category: str | None = None
    read: bool = False
    metadata: dict[str, Any] | None = None
    sent_at: datetime | None = None
    created_at: datetime | None = None


class MarkInboxReadResult(NotificaModel):
    success: bool
    notification_id: str | None = None


class MarkInboxReadAllResult(NotificaModel):
    success: bool
    marked_count: int = 0


class InboxEmbedSettings(NotificaModel):
    """Appearance and access settings of the embeddable inbox widget."""

    enabled: bool = False
    theme: Literal["light", "dark", "auto"] = "auto"
    position: str = "bottom-right"
    title: str | None = None
    primary_color: str | None = None
    background_color: str | None = None
    unread_badge_text: str | None = None
    show_sender_avatar: bool = True
    show_timestamp: bool = True
    date_format: Literal["relative", "absolute", "both"] = "relative"
    max_notifications: int = 50
    empty_state_text: str | None = None
    custom_logo_url: str | None = None
    custom_css: str | None = None
    embed_key: str | None = None
    allowed_domains: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RotatedEmbedKey(NotificaModel):
    """A fresh embed key. The previous key keeps working until ``old_key_expires_at``."""

    embed_key: str
    old_key_expires_at: datetime | None = None
