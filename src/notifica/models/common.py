"""Shared wire types: envelopes, pagination and common literals."""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

Channel = Literal["email", "whatsapp", "sms", "in_app", "push"]

NotificationStatus = Literal[
    "pending",
    "processing",
    "delivered",
    "failed",
    "bounced",
    "rejected",
]

TemplateStatus = Literal["draft", "active"]

Environment = Literal["production", "sandbox"]

ApiKeyType = Literal["secret", "public"]

DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100


class NotificaModel(BaseModel):
    """Base for API objects.

    Unknown fields are kept so newer API versions don't break older SDKs.
    """

    model_config = ConfigDict(extra="allow")


class PaginationMeta(BaseModel):
    """Cursor state attached to every list response.

    ``has_more`` is the sole termination signal: a cursor with
    ``has_more=False`` does not point to another page.
    """

    model_config = ConfigDict(extra="allow")

    cursor: str | None = Field(default=None, description="Opaque cursor for the next page")
    has_more: bool = Field(default=False, description="Whether another page exists")


class Page(BaseModel, Generic[T]):
    """One page of a cursor-paginated listing: ``{data: [...], meta: {...}}``."""

    model_config = ConfigDict(extra="allow")

    data: list[T] = Field(default_factory=list)
    meta: PaginationMeta = Field(default_factory=PaginationMeta)


class ApiErrorDetail(BaseModel):
    """Body of the ``error`` key in an error response.

    Each field is read on its own: a malformed ``details`` does not cost
    the caller a well-formed ``code`` or ``message``.
    """

    model_config = ConfigDict(extra="allow")

    code: str | None = None
    message: str | None = None
    details: dict[str, list[str]] | None = None

    @field_validator("code", "message", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("details", mode="before")
    @classmethod
    def _normalize_details(cls, value: Any) -> dict[str, list[str]] | None:
        if not isinstance(value, dict):
            return None
        normalized: dict[str, list[str]] = {}
        for field, messages in value.items():
            if isinstance(messages, list):
                normalized[str(field)] = [str(message) for message in messages]
            elif messages is not None:
                normalized[str(field)] = [str(messages)]
        return normalized


class ApiErrorBody(BaseModel):
    """Error envelope: ``{error: {code, message, details?}}``."""

    model_config = ConfigDict(extra="allow")

    error: ApiErrorDetail | None = None

    @field_validator("error", mode="before")
    @classmethod
    def _object_or_none(cls, value: Any) -> Any:
        # e.g. {"error": "just a string"} carries nothing usable
        return value if isinstance(value, dict) else None
