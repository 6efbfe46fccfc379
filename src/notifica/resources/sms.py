"""SMS resource: providers, compliance rules and consent records."""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING
from urllib.parse import quote

from notifica.config import RequestOptions
from notifica.models import (
    Page,
    SmsComplianceAction,
    SmsComplianceAnalytics,
    SmsComplianceLog,
    SmsComplianceSettings,
    SmsConsent,
    SmsConsentImportResult,
    SmsConsentStatus,
    SmsConsentSummary,
    SmsProvider,
    SmsProviderTestResult,
    SmsProviderValidation,
)

from .base import Body, Resource, to_body, unwrap, unwrap_list

if TYPE_CHECKING:
    from notifica.client import NotificaClient


def consent_path(phone: str) -> str:
    """Path of one consent record. ``+`` and other reserved characters are escaped."""
    return f"/channels/sms/consents/{quote(phone, safe='')}"


class SmsProviders(Resource):
    async def list(self, options: RequestOptions | None = None) -> builtins.list[SmsProvider]:
        response = await self._client.get("/channels/sms/providers", None, options)
        return unwrap_list(response, SmsProvider)

    async def create(self, params: Body, options: RequestOptions | None = None) -> SmsProvider:
        response = await self._client.post("/channels/sms/providers", to_body(params), options)
        return unwrap(response, SmsProvider)

    async def get(self, provider_id: str, options: RequestOptions | None = None) -> SmsProvider:
        return await self._client.get_one(
            f"/channels/sms/providers/{provider_id}", options, item_type=SmsProvider
        )

    async def update(
        self, provider_id: str, params: Body, options: RequestOptions | None = None
    ) -> SmsProvider:
        """Partially update a provider; omitted fields keep their value."""
        response = await self._client.patch(
            f"/channels/sms/providers/{provider_id}", to_body(params), options
        )
        return unwrap(response, SmsProvider)

    async def activate(
        self, provider_id: str, options: RequestOptions | None = None
    ) -> SmsProvider:
        response = await self._client.post(
            f"/channels/sms/providers/{provider_id}/activate", None, options
        )
        return unwrap(response, SmsProvider)

    async def delete(self, provider_id: str, options: RequestOptions | None = None) -> None:
        await self._client.delete(f"/channels/sms/providers/{provider_id}", options)

    async def validate(
        self, params: Body, options: RequestOptions | None = None
    ) -> SmsProviderValidation:
        """Check provider credentials without saving them."""
        response = await self._client.post(
            "/channels/sms/providers/validate", to_body(params), options
        )
        return unwrap(response, SmsProviderValidation)

    async def test(
        self, params: Body, options: RequestOptions | None = None
    ) -> SmsProviderTestResult:
        """Send a real test SMS through a saved or inline provider config."""
        response = await self._client.post("/channels/sms/providers/test", to_body(params), options)
        return unwrap(response, SmsProviderTestResult)


class SmsCompliance(Resource):
    """Sending windows, holiday rules and opt-out keywords."""

    async def get(self, options: RequestOptions | None = None) -> SmsComplianceSettings:
        return await self._client.get_one(
            "/channels/sms/compliance", options, item_type=SmsComplianceSettings
        )

    async def update(
        self, params: Body, options: RequestOptions | None = None
    ) -> SmsComplianceSettings:
        response = await self._client.patch("/channels/sms/compliance", to_body(params), options)
        return unwrap(response, SmsComplianceSettings)

    async def analytics(self, options: RequestOptions | None = None) -> SmsComplianceAnalytics:
        return await self._client.get_one(
            "/channels/sms/compliance/analytics", options, item_type=SmsComplianceAnalytics
        )

    async def logs(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        phone: str | None = None,
        action: SmsComplianceAction | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        options: RequestOptions | None = None,
    ) -> Page[SmsComplianceLog]:
        query = {
            "limit": limit,
            "cursor": cursor,
            "phone": phone,
            "action": action,
            "start_date": start_date,
            "end_date": end_date,
        }
        return await self._client.list(
            "/channels/sms/compliance/logs", query, options, item_type=SmsComplianceLog
        )


class SmsConsents(Resource):
    """Per-number opt-in state, keyed by the E.164 phone number."""

    async def list(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        phone: str | None = None,
        status: SmsConsentStatus | None = None,
        source: str | None = None,
        options: RequestOptions | None = None,
    ) -> Page[SmsConsent]:
        query = {
            "limit": limit,
            "cursor": cursor,
            "phone": phone,
            "status": status,
            "source": source,
        }
        return await self._client.list(
            "/channels/sms/consents", query, options, item_type=SmsConsent
        )

    async def summary(self, options: RequestOptions | None = None) -> SmsConsentSummary:
        return await self._client.get_one(
            "/channels/sms/consents/summary", options, item_type=SmsConsentSummary
        )

    async def get(self, phone: str, options: RequestOptions | None = None) -> SmsConsent:
        return await self._client.get_one(consent_path(phone), options, item_type=SmsConsent)

    async def revoke(self, phone: str, options: RequestOptions | None = None) -> None:
        await self._client.delete(consent_path(phone), options)

    async def create(self, params: Body, options: RequestOptions | None = None) -> SmsConsent:
        response = await self._client.post("/channels/sms/consents", to_body(params), options)
        return unwrap(response, SmsConsent)

    async def bulk_import(
        self, params: Body, options: RequestOptions | None = None
    ) -> SmsConsentImportResult:
        """Record many consents at once: ``{"consents": [{"phone": ...}, ...]}``."""
        response = await self._client.post(
            "/channels/sms/consents/import", to_body(params), options
        )
        return unwrap(response, SmsConsentImportResult)


class Sms(Resource):
    """Groups the SMS sub-resources.

    Example:
        ```python
        await notifica.sms.compliance.update({"allowed_hours_start": "08:00"})
        consent = await notifica.sms.consents.get("+5511999998888")
        ```
    """

    def __init__(self, client: NotificaClient) -> None:
        super().__init__(client)
        self.providers = SmsProviders(client)
        self.compliance = SmsCompliance(client)
        self.consents = SmsConsents(client)
