"""Audit log models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from .common import NotificaModel

AuditActorType = Literal["user", "api_key", "system"]

AuditResourceType = Literal["api_key", "team_member", "subscription", "domain", "webhook"]


class AuditActor(NotificaModel):
    """Who performed an audited action. ``id`` is None for system actions."""

    type: AuditActorType
    id: str | None = None
    name: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None


class AuditLog(NotificaModel):
    """One audited change, e.g. ``api_key.rotated`` or ``domain.verified``.

    ``action`` is kept as a plain string so new action names don't fail
    validation.
    """

    id: str
    action: str
    resource_type: str
    resource_id: str
    actor: AuditActor
    organization_id: str | None = None
    metadata: dict[str, Any] | None = None
    previous_state: dict[str, Any] | None = None
    new_state: dict[str, Any] | None = None
    created_at: datetime | None = None
