"""API key models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import ApiKeyType, Environment, NotificaModel


class ApiKey(NotificaModel):
    """An API key. ``raw_key`` is only present in the create response."""

    id: str
    key_type: ApiKeyType
    label: str
    prefix: str
    environment: Environment
    raw_key: str | None = Field(default=None, repr=False)
    created_at: datetime | None = None
