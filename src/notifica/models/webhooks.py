"""Outbound webhook models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import NotificaModel


class Webhook(NotificaModel):
    """A registered webhook endpoint.

    ``signing_secret`` is only returned once, when the webhook is created.
    """

    id: str
    url: str
    events: list[str] = Field(default_factory=list)
    active: bool = True
    signing_secret: str | None = Field(default=None, repr=False)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class WebhookDelivery(NotificaModel):
    """One delivery of an event to a webhook endpoint."""

    id: str
    event: str
    status: str
    status_code: int | None = None
    response_body: str | None = None
    created_at: datetime | None = None
