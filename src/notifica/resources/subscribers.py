"""Subscribers resource."""

from __future__ import annotations

import builtins

from notifica.config import RequestOptions
from notifica.models import (
    BulkImportResult,
    InAppNotification,
    Page,
    Subscriber,
    SubscriberPreferences,
    UnreadCount,
)
from notifica.pagination import Paginator

from .base import Body, Resource, to_body, unwrap, unwrap_list


class Subscribers(Resource):
    """Subscribers, their preferences and their in-app inbox."""

    async def create(self, params: Body, options: RequestOptions | None = None) -> Subscriber:
        response = await self._client.post("/subscribers", to_body(params), options)
        return unwrap(response, Subscriber)

    async def list(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        search: str | None = None,
        offset: int | None = None,
        options: RequestOptions | None = None,
    ) -> Page[Subscriber]:
        query = {"limit": limit, "cursor": cursor, "search": search, "offset": offset}
        return await self._client.list("/subscribers", query, options, item_type=Subscriber)

    def list_all(
        self, *, limit: int | None = None, search: str | None = None
    ) -> Paginator[Subscriber]:
        query = {"limit": limit, "search": search}
        return self._client.paginate("/subscribers", query, item_type=Subscriber)

    async def get(self, subscriber_id: str, options: RequestOptions | None = None) -> Subscriber:
        return await self._client.get_one(
            f"/subscribers/{subscriber_id}", options, item_type=Subscriber
        )

    async def update(
        self, subscriber_id: str, params: Body, options: RequestOptions | None = None
    ) -> Subscriber:
        response = await self._client.put(f"/subscribers/{subscriber_id}", to_body(params), options)
        return unwrap(response, Subscriber)

    async def delete(self, subscriber_id: str, options: RequestOptions | None = None) -> None:
        await self._client.delete(f"/subscribers/{subscriber_id}", options)

    # Preferences

    async def get_preferences(
        self, subscriber_id: str, options: RequestOptions | None = None
    ) -> SubscriberPreferences:
        return await self._client.get_one(
            f"/subscribers/{subscriber_id}/preferences", options, item_type=SubscriberPreferences
        )

    async def update_preferences(
        self, subscriber_id: str, params: Body, options: RequestOptions | None = None
    ) -> SubscriberPreferences:
        response = await self._client.put(
            f"/subscribers/{subscriber_id}/preferences", to_body(params), options
        )
        return unwrap(response, SubscriberPreferences)

    async def bulk_import(
        self, params: Body, options: RequestOptions | None = None
    ) -> BulkImportResult:
        """Create or update many subscribers in one call."""
        response = await self._client.post("/subscribers/import", to_body(params), options)
        return unwrap(response, BulkImportResult)

    # In-app inbox

    async def list_notifications(
        self,
        subscriber_id: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        unread_only: bool | None = None,
        options: RequestOptions | None = None,
    ) -> builtins.list[InAppNotification]:
        query = {"limit": limit, "offset": offset, "unread_only": unread_only}
        response = await self._client.get(
            f"/subscribers/{subscriber_id}/notifications", query, options
        )
        return unwrap_list(response, InAppNotification)

    async def mark_read(
        self, subscriber_id: str, notification_id: str, options: RequestOptions | None = None
    ) -> None:
        await self._client.post(
            f"/subscribers/{subscriber_id}/notifications/{notification_id}/read", None, options
        )

    async def mark_all_read(
        self, subscriber_id: str, options: RequestOptions | None = None
    ) -> None:
        await self._client.post(
            f"/subscribers/{subscriber_id}/notifications/read-all", None, options
        )

    async def get_unread_count(
        self, subscriber_id: str, options: RequestOptions | None = None
    ) -> int:
        response = await self._client.get(
            f"/subscribers/{subscriber_id}/notifications/unread-count", None, options
        )
        return unwrap(response, UnreadCount).count
