"""Inbox embed resource: settings of the embeddable inbox widget."""

from __future__ import annotations

from notifica.config import RequestOptions
from notifica.models import InboxEmbedSettings, RotatedEmbedKey

from .base import Body, Resource, to_body, unwrap


class InboxEmbed(Resource):
    async def get_settings(self, options: RequestOptions | None = None) -> InboxEmbedSettings:
        return await self._client.get_one(
            "/inbox-embed/settings", options, item_type=InboxEmbedSettings
        )

    async def update_settings(
        self, params: Body, options: RequestOptions | None = None
    ) -> InboxEmbedSettings:
        response = await self._client.put("/inbox-embed/settings", to_body(params), options)
        return unwrap(response, InboxEmbedSettings)

    async def rotate_key(self, options: RequestOptions | None = None) -> RotatedEmbedKey:
        """Issue a new embed key; the old one keeps working for a grace period."""
        response = await self._client.post("/inbox-embed/keys/rotate", None, options)
        return unwrap(response, RotatedEmbedKey)
