"""Audit log resource. Requires an admin key."""

from __future__ import annotations

from notifica.config import RequestOptions
from notifica.models import AuditActorType, AuditLog, AuditResourceType, Page
from notifica.pagination import Paginator

from .base import Resource

AUDIT_LOGS_PATH = "/internal/audit-logs"


class Audit(Resource):
    """Read-only access to the organization's audit trail.

    Example:
        ```python
        async for entry in notifica.audit.list_all(resource_type="api_key"):
            print(entry.action, entry.actor.name)
        ```
    """

    async def list(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        action: str | None = None,
        resource_type: AuditResourceType | None = None,
        resource_id: str | None = None,
        actor_type: AuditActorType | None = None,
        actor_id: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        options: RequestOptions | None = None,
    ) -> Page[AuditLog]:
        query = {
            "limit": limit,
            "cursor": cursor,
            "action": action,
            "resource_type": resource_type,
            "resource_id": resource_id,
            "actor_type": actor_type,
            "actor_id": actor_id,
            "start_date": start_date,
            "end_date": end_date,
        }
        return await self._client.list(AUDIT_LOGS_PATH, query, options, item_type=AuditLog)

    def list_all(
        self,
        *,
        limit: int | None = None,
        action: str | None = None,
        resource_type: AuditResourceType | None = None,
        resource_id: str | None = None,
        actor_type: AuditActorType | None = None,
        actor_id: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> Paginator[AuditLog]:
        query = {
            "limit": limit,
            "action": action,
            "resource_type": resource_type,
            "resource_id": resource_id,
            "actor_type": actor_type,
            "actor_id": actor_id,
            "start_date": start_date,
            "end_date": end_date,
        }
        return self._client.paginate(AUDIT_LOGS_PATH, query, item_type=AuditLog)

    async def get(self, audit_log_id: str, options: RequestOptions | None = None) -> AuditLog:
        return await self._client.get_one(
            f"{AUDIT_LOGS_PATH}/{audit_log_id}", options, item_type=AuditLog
        )
