"""Billing resource: plans, subscription, usage, invoices and payment methods."""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING

from notifica.config import RequestOptions
from notifica.models import (
    BillingPlan,
    BillingSettings,
    BillingUsage,
    Invoice,
    InvoiceStatus,
    Page,
    PaymentMethod,
    ProrationResult,
    Subscription,
)
from notifica.pagination import Paginator

from .base import Body, Resource, to_body, unwrap, unwrap_list

if TYPE_CHECKING:
    from notifica.client import NotificaClient


class BillingPlans(Resource):
    async def list(self, options: RequestOptions | None = None) -> builtins.list[BillingPlan]:
        response = await self._client.get("/billing/plans", None, options)
        return unwrap_list(response, BillingPlan)

    async def get(self, name: str, options: RequestOptions | None = None) -> BillingPlan:
        return await self._client.get_one(f"/billing/plans/{name}", options, item_type=BillingPlan)


class BillingSettingsResource(Resource):
    async def get(self, options: RequestOptions | None = None) -> BillingSettings:
        return await self._client.get_one("/billing/settings", options, item_type=BillingSettings)


class BillingSubscription(Resource):
    """The organization's subscription lifecycle."""

    async def get(self, options: RequestOptions | None = None) -> Subscription:
        return await self._client.get_one("/billing/subscription", options, item_type=Subscription)

    async def subscribe(self, params: Body, options: RequestOptions | None = None) -> Subscription:
        response = await self._client.post("/billing/subscribe", to_body(params), options)
        return unwrap(response, Subscription)

    async def change_plan(
        self, params: Body, options: RequestOptions | None = None
    ) -> Subscription:
        response = await self._client.post("/billing/change-plan", to_body(params), options)
        return unwrap(response, Subscription)

    async def cancel(
        self, params: Body | None = None, options: RequestOptions | None = None
    ) -> Subscription:
        """Cancel, immediately or with ``{"at_period_end": True}``."""
        response = await self._client.post("/billing/cancel", to_body(params), options)
        return unwrap(response, Subscription)

    async def calculate_proration(
        self, params: Body, options: RequestOptions | None = None
    ) -> ProrationResult:
        """Preview the cost of switching to another plan without changing anything."""
        response = await self._client.post(
            "/billing/calculate-proration", to_body(params), options
        )
        return unwrap(response, ProrationResult)

    async def reactivate(
        self, params: Body | None = None, options: RequestOptions | None = None
    ) -> Subscription:
        response = await self._client.post("/billing/reactivate", to_body(params), options)
        return unwrap(response, Subscription)


class BillingUsageResource(Resource):
    async def get(self, options: RequestOptions | None = None) -> BillingUsage:
        return await self._client.get_one("/billing/usage", options, item_type=BillingUsage)


class BillingInvoices(Resource):
    async def list(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        status: InvoiceStatus | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        options: RequestOptions | None = None,
    ) -> Page[Invoice]:
        query = {
            "limit": limit,
            "cursor": cursor,
            "status": status,
            "start_date": start_date,
            "end_date": end_date,
        }
        return await self._client.list("/billing/invoices", query, options, item_type=Invoice)

    def list_all(
        self,
        *,
        limit: int | None = None,
        status: InvoiceStatus | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> Paginator[Invoice]:
        query = {"limit": limit, "status": status, "start_date": start_date, "end_date": end_date}
        return self._client.paginate("/billing/invoices", query, item_type=Invoice)

    async def get(self, invoice_id: str, options: RequestOptions | None = None) -> Invoice:
        return await self._client.get_one(
            f"/billing/invoices/{invoice_id}", options, item_type=Invoice
        )


class BillingPaymentMethods(Resource):
    async def list(self, options: RequestOptions | None = None) -> builtins.list[PaymentMethod]:
        response = await self._client.get("/billing/payment-methods", None, options)
        return unwrap_list(response, PaymentMethod)

    async def create(self, params: Body, options: RequestOptions | None = None) -> PaymentMethod:
        """Register a card (by gateway token), PIX key or boleto."""
        response = await self._client.post("/billing/payment-methods", to_body(params), options)
        return unwrap(response, PaymentMethod)

    async def get(
        self, payment_method_id: str, options: RequestOptions | None = None
    ) -> PaymentMethod:
        return await self._client.get_one(
            f"/billing/payment-methods/{payment_method_id}", options, item_type=PaymentMethod
        )

    async def update(
        self, payment_method_id: str, params: Body, options: RequestOptions | None = None
    ) -> PaymentMethod:
        response = await self._client.put(
            f"/billing/payment-methods/{payment_method_id}", to_body(params), options
        )
        return unwrap(response, PaymentMethod)

    async def delete(self, payment_method_id: str, options: RequestOptions | None = None) -> None:
        await self._client.delete(f"/billing/payment-methods/{payment_method_id}", options)

    async def set_default(
        self, payment_method_id: str, options: RequestOptions | None = None
    ) -> PaymentMethod:
        response = await self._client.post(
            f"/billing/payment-methods/{payment_method_id}/set-default", None, options
        )
        return unwrap(response, PaymentMethod)


class Billing(Resource):
    """Groups the billing sub-resources.

    Example:
        ```python
        usage = await notifica.billing.usage.get()
        await notifica.billing.subscription.change_plan({"plan_name": "business"})
        ```
    """

    def __init__(self, client: NotificaClient) -> None:
        super().__init__(client)
        self.plans = BillingPlans(client)
        self.settings = BillingSettingsResource(client)
        self.subscription = BillingSubscription(client)
        self.usage = BillingUsageResource(client)
        self.invoices = BillingInvoices(client)
        self.payment_methods = BillingPaymentMethods(client)
