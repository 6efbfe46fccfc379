"""Channels resource."""

from __future__ import annotations

import builtins

from notifica.config import RequestOptions
from notifica.models import Channel, ChannelConfiguration, TestChannelResult

from .base import Body, Resource, to_body, unwrap, unwrap_list


class Channels(Resource):
    """Provider configuration per delivery channel."""

    async def create(
        self, params: Body, options: RequestOptions | None = None
    ) -> ChannelConfiguration:
        response = await self._client.post("/channels", to_body(params), options)
        return unwrap(response, ChannelConfiguration)

    async def list(
        self, options: RequestOptions | None = None
    ) -> builtins.list[ChannelConfiguration]:
        response = await self._client.get("/channels", None, options)
        return unwrap_list(response, ChannelConfiguration)

    async def get(
        self, channel: Channel, options: RequestOptions | None = None
    ) -> ChannelConfiguration:
        return await self._client.get_one(
            f"/channels/{channel}", options, item_type=ChannelConfiguration
        )

    async def update(
        self, channel: Channel, params: Body, options: RequestOptions | None = None
    ) -> ChannelConfiguration:
        response = await self._client.put(f"/channels/{channel}", to_body(params), options)
        return unwrap(response, ChannelConfiguration)

    async def delete(self, channel: Channel, options: RequestOptions | None = None) -> None:
        await self._client.delete(f"/channels/{channel}", options)

    async def test(
        self, channel: Channel, options: RequestOptions | None = None
    ) -> TestChannelResult:
        """Send a test message through the configured provider."""
        response = await self._client.post(f"/channels/{channel}/test", None, options)
        return unwrap(response, TestChannelResult)
