"""Template models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .common import Channel, NotificaModel, TemplateStatus


class Template(NotificaModel):
    """A message template rendered per channel."""

    id: str
    slug: str
    name: str
    channel: Channel
    content: str
    variables: list[str] = Field(default_factory=list)
    variants: dict[str, str] | None = None
    language: str | None = None
    status: TemplateStatus = "draft"
    metadata: dict[str, Any] | None = None
    provider_template_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ValidationResult(NotificaModel):
    """Outcome of validating template content."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    variables: list[str] | None = None


class PreviewResult(NotificaModel):
    """Rendered preview of a template, per variant."""

    rendered: dict[str, str] = Field(default_factory=dict)
    variables: list[str] = Field(default_factory=list)
    validation: ValidationResult | None = None
