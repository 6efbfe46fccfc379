"""Billing models: plans, subscription, usage, invoices and payment methods."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from .common import NotificaModel

SubscriptionStatus = Literal["trial", "active", "past_due", "canceled", "paused", "expired"]

SubscriptionPeriod = Literal["monthly", "yearly"]

InvoiceStatus = Literal["pending", "paid", "overdue", "canceled", "refunded", "processing"]

PaymentMethodType = Literal["credit_card", "pix", "boleto"]


class BillingQuotas(NotificaModel):
    """Monthly limits of a plan. None means unlimited."""

    notifications_per_month: int | None = None
    emails_per_month: int | None = None
    sms_per_month: int | None = None
    whatsapp_per_month: int | None = None
    subscribers_limit: int | None = None
    templates_limit: int | None = None
    workflows_limit: int | None = None
    team_members_limit: int | None = None


class BillingPlan(NotificaModel):
    """A subscribable plan. Prices are in cents."""

    name: str
    display_name: str | None = None
    description: str | None = None
    monthly_price_cents: int = 0
    yearly_price_cents: int = 0
    trial_days: int = 0
    quotas: BillingQuotas = Field(default_factory=BillingQuotas)
    features: dict[str, bool] = Field(default_factory=dict)
    available: bool = True
    sort_order: int = 0


class BillingAddress(NotificaModel):
    street: str
    number: str
    complement: str | None = None
    neighborhood: str | None = None
    city: str
    state: str
    zip_code: str
    country: str


class BillingTaxInfo(NotificaModel):
    person_type: Literal["individual", "company"]
    document: str
    legal_name: str
    billing_email: str
    address: BillingAddress | None = None


class BillingSettings(NotificaModel):
    """Organization billing preferences."""

    gateway: str | None = None
    currency: str = "BRL"
    timezone: str | None = None
    due_day: int | None = None
    tax_info: BillingTaxInfo | None = None


class Subscription(NotificaModel):
    """The organization's current subscription."""

    id: str
    plan_name: str
    status: SubscriptionStatus
    period: SubscriptionPeriod = "monthly"
    starts_at: datetime | None = None
    current_period_ends_at: datetime | None = None
    ends_at: datetime | None = None
    trial_days_remaining: int | None = None
    in_trial: bool = False
    auto_renew: bool = True
    current_price_cents: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProrationResult(NotificaModel):
    """Cost of switching plans mid-period, in cents."""

    current_plan_credit_cents: int
    new_plan_debit_cents: int
    proration_amount_cents: int
    next_billing_date: datetime | None = None


class BillingUsage(NotificaModel):
    """Consumption in the current billing period.

    ``percentages`` maps each metric to its share of the quota, or None
    when the quota is unlimited.
    """

    period_start: datetime
    period_end: datetime
    current: dict[str, int] = Field(default_factory=dict)
    quotas: BillingQuotas = Field(default_factory=BillingQuotas)
    percentages: dict[str, float | None] = Field(default_factory=dict)


class Invoice(NotificaModel):
    id: str
    subscription_id: str | None = None
    status: InvoiceStatus
    amount_cents: int
    amount_paid_cents: int = 0
    currency: str = "BRL"
    description: str | None = None
    payment_method: PaymentMethodType | None = None
    due_date: datetime | None = None
    paid_at: datetime | None = None
    boleto_url: str | None = None
    boleto_line: str | None = None
    boleto_pdf_url: str | None = None
    pix_code: str | None = None
    pix_qr_code: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PaymentMethodCard(NotificaModel):
    """Masked card details; the full number is never returned."""

    brand: str
    last_four: str
    exp_month: int
    exp_year: int
    holder_name: str | None = None


class PaymentMethod(NotificaModel):
    id: str
    type: PaymentMethodType
    is_default: bool = False
    card: PaymentMethodCard | None = None
    pix_key: str | None = None
    pix_key_type: str | None = None
    nickname: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
