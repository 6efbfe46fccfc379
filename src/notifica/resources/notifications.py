"""Notifications resource."""

from __future__ import annotations

import builtins

from notifica.config import RequestOptions
from notifica.models import Channel, MessageAttempt, Notification, NotificationStatus, Page
from notifica.pagination import Paginator

from .base import Body, Resource, to_body, unwrap, unwrap_list


class Notifications(Resource):
    """Send notifications and inspect their delivery."""

    async def send(self, params: Body, options: RequestOptions | None = None) -> Notification:
        """Queue a notification for asynchronous delivery.

        Example:
            ```python
            notification = await notifica.notifications.send({
                "channel": "whatsapp",
                "to": "+5511999999999",
                "template": "welcome",
                "data": {"name": "João"},
            })
            ```
        """
        response = await self._client.post("/notifications", to_body(params), options)
        return unwrap(response, Notification)

    async def list(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        status: NotificationStatus | None = None,
        channel: Channel | None = None,
        options: RequestOptions | None = None,
    ) -> Page[Notification]:
        query = {"limit": limit, "cursor": cursor, "status": status, "channel": channel}
        return await self._client.list("/notifications", query, options, item_type=Notification)

    def list_all(
        self,
        *,
        limit: int | None = None,
        status: NotificationStatus | None = None,
        channel: Channel | None = None,
    ) -> Paginator[Notification]:
        """Iterate over every notification matching the filters."""
        query = {"limit": limit, "status": status, "channel": channel}
        return self._client.paginate("/notifications", query, item_type=Notification)

    async def get(
        self, notification_id: str, options: RequestOptions | None = None
    ) -> Notification:
        return await self._client.get_one(
            f"/notifications/{notification_id}", options, item_type=Notification
        )

    async def list_attempts(
        self, notification_id: str, options: RequestOptions | None = None
    ) -> builtins.list[MessageAttempt]:
        """List provider delivery attempts for a notification."""
        response = await self._client.get(
            f"/notifications/{notification_id}/attempts", None, options
        )
        return unwrap_list(response, MessageAttempt)
