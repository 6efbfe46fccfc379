"""Top-level Notifica client.

Example:
    ```python
    from notifica import Notifica

    async with Notifica("nk_live_...") as notifica:
        await notifica.notifications.send({
            "channel": "whatsapp",
            "to": "+5511999999999",
            "template": "welcome",
            "data": {"name": "João"},
        })

        await notifica.workflows.trigger(
            "welcome-flow",
            {"recipient": "+5511999999999", "data": {"name": "João"}},
        )
    ```
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .client import NotificaClient
from .config import ClientConfig, Settings
from .logging import configure_logging
from .resources import (
    Analytics,
    ApiKeys,
    Audit,
    Billing,
    Channels,
    Domains,
    Inbox,
    InboxEmbed,
    Notifications,
    Sms,
    Subscribers,
    Templates,
    Webhooks,
    Workflows,
)

logger = logging.getLogger(__name__)


class Notifica:
    """Entry point wiring every API resource to one shared request engine.

    Args:
        api_key: API key. Shortcut for ``config=ClientConfig(api_key=...)``.
        config: Full client configuration.
        client: Pre-built request engine (takes precedence over the above).
        transport: httpx transport override, mostly for tests.
        **overrides: ClientConfig fields, e.g. ``max_retries=5``.

    Raises:
        ConfigurationError: If no API key is available.

    Example:
        ```python
        # Just the key
        notifica = Notifica("nk_live_...")

        # Full configuration
        notifica = Notifica(
            "nk_live_...",
            base_url="https://api.usenotifica.com.br/v1",
            timeout_ms=15_000,
            max_retries=5,
        )
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: ClientConfig | None = None,
        client: NotificaClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides: Any,
    ) -> None:
        if client is None:
            client = NotificaClient(
                self._resolve_config(api_key, config, overrides), transport=transport
            )
        self.client = client

        self.notifications = Notifications(client)
        self.templates = Templates(client)
        self.workflows = Workflows(client)
        self.subscribers = Subscribers(client)
        self.channels = Channels(client)
        self.domains = Domains(client)
        self.webhooks = Webhooks(client)
        self.api_keys = ApiKeys(client)
        self.analytics = Analytics(client)
        self.audit = Audit(client)
        self.billing = Billing(client)
        self.sms = Sms(client)
        self.inbox = Inbox(client)
        self.inbox_embed = InboxEmbed(client)

    @staticmethod
    def _resolve_config(
        api_key: str | None, config: ClientConfig | None, overrides: dict[str, Any]
    ) -> ClientConfig:
        if config is None:
            return ClientConfig(api_key=api_key or "", **overrides)
        if api_key is None and not overrides:
            return config
        merged = config.model_dump()
        merged.update(overrides)
        if api_key is not None:
            merged["api_key"] = api_key
        return ClientConfig(**merged)

    @classmethod
    def from_env(
        cls,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **settings_overrides: Any,
    ) -> Notifica:
        """Build a client from NOTIFICA_* environment variables (and .env).

        Configures SDK logging when NOTIFICA_LOG_LEVEL is set.
        """
        settings = Settings(**settings_overrides)
        if settings.log_level:
            configure_logging(level=settings.log_level, format=settings.log_format)
        logger.debug("Creating Notifica client from environment")
        return cls(config=settings.to_client_config(), transport=transport)

    async def __aenter__(self) -> Notifica:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the shared HTTP connection pool."""
        await self.client.aclose()
