"""Webhooks resource."""

from __future__ import annotations

import builtins

from notifica.config import RequestOptions
from notifica.models import Page, Webhook, WebhookDelivery
from notifica.webhooks.signature import Payload, verify_signature, verify_signature_or_raise

from .base import Body, Resource, to_body, unwrap, unwrap_list


class Webhooks(Resource):
    """Webhook endpoints and inbound signature verification."""

    async def create(self, params: Body, options: RequestOptions | None = None) -> Webhook:
        """Register a webhook endpoint.

        The returned ``signing_secret`` is only shown once. Store it.

        Example:
            ```python
            webhook = await notifica.webhooks.create({
                "url": "https://example.com/webhooks/notifica",
                "events": ["notification.delivered", "notification.failed"],
            })
            save_secret(webhook.signing_secret)
            ```
        """
        response = await self._client.post("/webhooks", to_body(params), options)
        return unwrap(response, Webhook)

    async def list(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        options: RequestOptions | None = None,
    ) -> Page[Webhook]:
        query = {"limit": limit, "cursor": cursor}
        return await self._client.list("/webhooks", query, options, item_type=Webhook)

    async def get(self, webhook_id: str, options: RequestOptions | None = None) -> Webhook:
        return await self._client.get_one(f"/webhooks/{webhook_id}", options, item_type=Webhook)

    async def update(
        self, webhook_id: str, params: Body, options: RequestOptions | None = None
    ) -> Webhook:
        response = await self._client.put(f"/webhooks/{webhook_id}", to_body(params), options)
        return unwrap(response, Webhook)

    async def delete(self, webhook_id: str, options: RequestOptions | None = None) -> None:
        await self._client.delete(f"/webhooks/{webhook_id}", options)

    async def test(self, webhook_id: str, options: RequestOptions | None = None) -> None:
        """Ask the API to send a test event to the endpoint."""
        await self._client.post(f"/webhooks/{webhook_id}/test", None, options)

    async def list_deliveries(
        self,
        webhook_id: str,
        *,
        limit: int | None = None,
        options: RequestOptions | None = None,
    ) -> builtins.list[WebhookDelivery]:
        response = await self._client.get(
            f"/webhooks/{webhook_id}/deliveries", {"limit": limit}, options
        )
        return unwrap_list(response, WebhookDelivery)

    # Signature verification

    def verify(self, payload: Payload, signature: str, secret: str) -> bool:
        """Check the X-Notifica-Signature of an inbound webhook.

        Args:
            payload: Raw request body (text or bytes), before JSON parsing.
            signature: Value of the X-Notifica-Signature header.
            secret: The webhook's signing secret.

        Returns:
            True if the signature is valid. Never raises.
        """
        return verify_signature(payload, signature, secret)

    def verify_or_raise(self, payload: Payload, signature: str, secret: str) -> None:
        """Like :meth:`verify`, but raise NotificaError on a bad signature."""
        verify_signature_or_raise(payload, signature, secret)
