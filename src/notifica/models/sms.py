"""SMS provider, compliance and consent models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from .common import NotificaModel

SmsProviderType = Literal["twilio", "zenvia", "custom"]

SmsConsentStatus = Literal["opted_in", "opted_out", "pending"]

SmsComplianceAction = Literal["blocked", "allowed", "opt_out", "opt_in"]


class SmsProvider(NotificaModel):
    """A configured SMS provider. Credentials come back masked in ``config_mask``."""

    id: str
    type: SmsProviderType
    name: str
    config_mask: str | None = None
    active: bool = False
    is_default: bool = False
    allowed_regions: list[str] | None = None
    rate_limit_per_minute: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SmsProviderValidation(NotificaModel):
    valid: bool
    message: str | None = None
    errors: dict[str, list[str]] | None = None


class SmsProviderTestResult(NotificaModel):
    success: bool
    message: str | None = None
    message_id: str | None = None


class SmsComplianceSettings(NotificaModel):
    """Sending windows and opt-out handling.

    ``allowed_weekdays`` uses 0 for Sunday. Hours are "HH:MM" strings.
    """

    allowed_hours_start: str | None = None
    allowed_hours_end: str | None = None
    allowed_weekdays: list[int] | None = None
    respect_national_holidays: bool = False
    custom_holidays: list[str] | None = None
    opt_out_message: str | None = None
    opt_out_keywords: list[str] | None = None
    opt_out_cooldown_hours: int | None = None
    opt_in_confirmation_message: str | None = None


class SmsComplianceAnalytics(NotificaModel):
    period_start: datetime | None = None
    period_end: datetime | None = None
    total_messages: int = 0
    messages_blocked_by_compliance: int = 0
    opt_outs_received: int = 0
    opt_ins_received: int = 0
    violations_by_type: dict[str, int] = Field(default_factory=dict)


class SmsComplianceLog(NotificaModel):
    id: str
    message_id: str | None = None
    phone: str
    action: SmsComplianceAction
    reason: str | None = None
    created_at: datetime | None = None


class SmsConsent(NotificaModel):
    """Consent state for one phone number."""

    phone: str
    status: SmsConsentStatus
    source: str | None = None
    metadata: dict[str, Any] | None = None
    opted_in_at: datetime | None = None
    opted_out_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SmsConsentSummary(NotificaModel):
    total: int = 0
    opted_in: int = 0
    opted_out: int = 0
    pending: int = 0
    by_source: dict[str, int] = Field(default_factory=dict)


class SmsConsentImportError(NotificaModel):
    phone: str
    error: str


class SmsConsentImportResult(NotificaModel):
    imported: int
    errors: list[SmsConsentImportError] = Field(default_factory=list)
