"""Configuration management for the Notifica SDK."""

from __future__ import annotations

import asyncio
import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://app.usenotifica.com.br/v1"
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_MAX_RETRIES = 3


class ClientConfig(BaseModel):
    """Immutable settings owned by a single request engine.

    Attributes:
        api_key: Bearer credential (nk_live_..., nk_test_..., pk_live_..., pk_test_...).
        base_url: API origin, trailing slashes stripped.
        timeout_ms: Default per-request deadline in milliseconds.
        max_retries: Retries after the first attempt on 429/5xx/transport errors.
        auto_idempotency: Generate an Idempotency-Key for POSTs without one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str = Field(repr=False, description="API key sent as a bearer token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Request timeout (ms)")
    max_retries: int = Field(
        default=DEFAULT_MAX_RETRIES,
        ge=0,
        description="Maximum retries on 429, 5xx, timeouts and network errors",
    )
    auto_idempotency: bool = Field(
        default=True,
        description="Generate an idempotency key automatically for POST requests",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slashes(cls, value: str) -> str:
        return value.rstrip("/")


class RequestOptions(BaseModel):
    """Per-call overrides. Lives only for the duration of one call.

    Attributes:
        idempotency_key: Key to send instead of an auto-generated one (POST only).
        timeout_ms: Deadline for this call, overriding the client default.
        cancel_event: Setting this event aborts the in-flight call.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    idempotency_key: str | None = None
    timeout_ms: int | None = Field(default=None, gt=0)
    cancel_event: asyncio.Event | None = None


class Settings(BaseSettings):
    """SDK configuration loaded from environment variables.

    All settings can be provided via environment variables with the
    NOTIFICA_ prefix. For example:
        NOTIFICA_API_KEY=nk_live_...
        NOTIFICA_MAX_RETRIES=5
        NOTIFICA_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="NOTIFICA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = Field(default=None, repr=False, description="Notifica API key")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Request timeout (ms)")
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0, description="Maximum retries")
    auto_idempotency: bool = Field(default=True, description="Auto idempotency keys for POST")

    # Logging
    log_level: str | None = Field(
        default=None,
        description="Configure SDK logging at this level (unset leaves logging alone)",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format: json for production, text for development",
    )

    def to_client_config(self) -> ClientConfig:
        """Build the immutable client config.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        if not self.api_key:
            raise ConfigurationError(
                "API key is required. Set NOTIFICA_API_KEY or pass it to Notifica(...)"
            )
        logger.debug("Loaded client config from settings (base_url=%s)", self.base_url)
        return ClientConfig(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout_ms=self.timeout_ms,
            max_retries=self.max_retries,
            auto_idempotency=self.auto_idempotency,
        )
