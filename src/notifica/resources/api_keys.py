"""API keys resource."""

from __future__ import annotations

import builtins

from notifica.config import RequestOptions
from notifica.models import ApiKey

from .base import Body, Resource, to_body, unwrap, unwrap_list


class ApiKeys(Resource):
    async def create(self, params: Body, options: RequestOptions | None = None) -> ApiKey:
        """Create a key. The full key is only returned here, as ``raw_key``."""
        response = await self._client.post("/api-keys", to_body(params), options)
        return unwrap(response, ApiKey)

    async def list(self, options: RequestOptions | None = None) -> builtins.list[ApiKey]:
        response = await self._client.get("/api-keys", None, options)
        return unwrap_list(response, ApiKey)

    async def revoke(self, api_key_id: str, options: RequestOptions | None = None) -> None:
        await self._client.delete(f"/api-keys/{api_key_id}", options)
