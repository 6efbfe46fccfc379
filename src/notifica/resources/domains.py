"""Domains resource."""

from __future__ import annotations

import builtins

from notifica.config import RequestOptions
from notifica.models import Domain, DomainAlert, DomainHealth, Page

from .base import Body, Resource, to_body, unwrap, unwrap_list


class Domains(Resource):
    """Email sending domains, DNS verification and health checks."""

    async def create(self, params: Body, options: RequestOptions | None = None) -> Domain:
        response = await self._client.post("/domains", to_body(params), options)
        return unwrap(response, Domain)

    async def list(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        options: RequestOptions | None = None,
    ) -> Page[Domain]:
        query = {"limit": limit, "cursor": cursor}
        return await self._client.list("/domains", query, options, item_type=Domain)

    async def get(self, domain_id: str, options: RequestOptions | None = None) -> Domain:
        return await self._client.get_one(f"/domains/{domain_id}", options, item_type=Domain)

    async def verify(self, domain_id: str, options: RequestOptions | None = None) -> Domain:
        """Ask the API to re-check the domain's DNS records."""
        response = await self._client.post(f"/domains/{domain_id}/verify", None, options)
        return unwrap(response, Domain)

    async def delete(self, domain_id: str, options: RequestOptions | None = None) -> None:
        await self._client.delete(f"/domains/{domain_id}", options)

    # Health

    async def get_health(
        self, domain_id: str, options: RequestOptions | None = None
    ) -> DomainHealth:
        return await self._client.get_one(
            f"/domains/{domain_id}/health", options, item_type=DomainHealth
        )

    async def check_health(
        self, domain_id: str, options: RequestOptions | None = None
    ) -> DomainHealth:
        response = await self._client.post(f"/domains/{domain_id}/health/check", None, options)
        return unwrap(response, DomainHealth)

    async def list_alerts(
        self, options: RequestOptions | None = None
    ) -> builtins.list[DomainAlert]:
        response = await self._client.get("/domains/alerts", None, options)
        return unwrap_list(response, DomainAlert)
