"""Inbox resource: the subscriber-facing notification feed."""

from __future__ import annotations

from notifica.config import RequestOptions
from notifica.models import (
    InboxNotification,
    MarkInboxReadAllResult,
    MarkInboxReadResult,
    Page,
    UnreadCount,
)

from .base import Resource, unwrap


class Inbox(Resource):
    """Read and acknowledge inbox notifications on behalf of a subscriber."""

    async def list_notifications(
        self,
        subscriber_id: str,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        unread_only: bool | None = None,
        category: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        options: RequestOptions | None = None,
    ) -> Page[InboxNotification]:
        query = {
            "subscriber_id": subscriber_id,
            "limit": limit,
            "cursor": cursor,
            "unread_only": unread_only,
            "category": category,
            "start_date": start_date,
            "end_date": end_date,
        }
        return await self._client.list(
            "/inbox/notifications", query, options, item_type=InboxNotification
        )

    async def get_unread_count(
        self, subscriber_id: str, options: RequestOptions | None = None
    ) -> int:
        response = await self._client.get(
            "/inbox/notifications/unread-count", {"subscriber_id": subscriber_id}, options
        )
        return unwrap(response, UnreadCount).count

    async def mark_read(
        self, notification_id: str, options: RequestOptions | None = None
    ) -> MarkInboxReadResult:
        response = await self._client.post(
            f"/inbox/notifications/{notification_id}/read", None, options
        )
        return unwrap(response, MarkInboxReadResult)

    async def mark_all_read(
        self, subscriber_id: str, options: RequestOptions | None = None
    ) -> MarkInboxReadAllResult:
        response = await self._client.post(
            "/inbox/notifications/read-all", {"subscriber_id": subscriber_id}, options
        )
        return unwrap(response, MarkInboxReadAllResult)
