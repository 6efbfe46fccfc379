"""Subscriber, preference and in-app notification models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .common import NotificaModel


class Subscriber(NotificaModel):
    """A notification recipient identified by the caller's external id."""

    id: str
    external_id: str
    email: str | None = None
    phone: str | None = None
    name: str | None = None
    locale: str | None = None
    timezone: str | None = None
    custom_properties: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NotificationPreference(NotificaModel):
    category: str
    channel: str
    enabled: bool


class SubscriberPreferences(NotificaModel):
    preferences: list[NotificationPreference] = Field(default_factory=list)


class BulkImportResult(NotificaModel):
    imported: int = Field(ge=0)
    subscribers: list[Subscriber] = Field(default_factory=list)


class InAppNotification(NotificaModel):
    """A message shown in the subscriber's in-app inbox."""

    id: str
    title: str | None = None
    body: str | None = None
    action_url: str | None = None
    read: bool = False
    created_at: datetime | None = None


class UnreadCount(NotificaModel):
    count: int = Field(ge=0)
