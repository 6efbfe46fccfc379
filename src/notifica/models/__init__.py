"""Wire models for the Notifica API."""

from .analytics import (
    AnalyticsOverview,
    AnalyticsPeriod,
    ChannelAnalytics,
    Granularity,
    TemplateAnalytics,
    TimeseriesPoint,
)
from .api_keys import ApiKey
from .audit import AuditActor, AuditActorType, AuditLog, AuditResourceType
from .billing import (
    BillingAddress,
    BillingPlan,
    BillingQuotas,
    BillingSettings,
    BillingTaxInfo,
    BillingUsage,
    Invoice,
    InvoiceStatus,
    PaymentMethod,
    PaymentMethodCard,
    PaymentMethodType,
    ProrationResult,
    Subscription,
    SubscriptionPeriod,
    SubscriptionStatus,
)
from .channels import ChannelConfiguration, TestChannelResult
from .common import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    ApiErrorBody,
    ApiErrorDetail,
    ApiKeyType,
    Channel,
    Environment,
    NotificaModel,
    NotificationStatus,
    Page,
    PaginationMeta,
    TemplateStatus,
)
from .domains import DnsRecord, Domain, DomainAlert, DomainDnsRecords, DomainHealth, DomainStatus
from .inbox import (
    InboxEmbedSettings,
    InboxNotification,
    MarkInboxReadAllResult,
    MarkInboxReadResult,
    RotatedEmbedKey,
)
from .notifications import MessageAttempt, Notification
from .sms import (
    SmsComplianceAction,
    SmsComplianceAnalytics,
    SmsComplianceLog,
    SmsComplianceSettings,
    SmsConsent,
    SmsConsentImportError,
    SmsConsentImportResult,
    SmsConsentStatus,
    SmsConsentSummary,
    SmsProvider,
    SmsProviderTestResult,
    SmsProviderType,
    SmsProviderValidation,
)
from .subscribers import (
    BulkImportResult,
    InAppNotification,
    NotificationPreference,
    Subscriber,
    SubscriberPreferences,
    UnreadCount,
)
from .templates import PreviewResult, Template, ValidationResult
from .webhooks import Webhook, WebhookDelivery
from .workflows import StepResult, Workflow, WorkflowRun, WorkflowRunStatus

__all__ = [
    # Common
    "DEFAULT_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
    "ApiErrorBody",
    "ApiErrorDetail",
    "ApiKeyType",
    "Channel",
    "Environment",
    "NotificaModel",
    "NotificationStatus",
    "Page",
    "PaginationMeta",
    "TemplateStatus",
    # Analytics
    "AnalyticsOverview",
    "AnalyticsPeriod",
    "ChannelAnalytics",
    "Granularity",
    "TemplateAnalytics",
    "TimeseriesPoint",
    # API keys
    "ApiKey",
    # Audit
    "AuditActor",
    "AuditActorType",
    "AuditLog",
    "AuditResourceType",
    # Billing
    "BillingAddress",
    "BillingPlan",
    "BillingQuotas",
    "BillingSettings",
    "BillingTaxInfo",
    "BillingUsage",
    "Invoice",
    "InvoiceStatus",
    "PaymentMethod",
    "PaymentMethodCard",
    "PaymentMethodType",
    "ProrationResult",
    "Subscription",
    "SubscriptionPeriod",
    "SubscriptionStatus",
    # Channels
    "ChannelConfiguration",
    "TestChannelResult",
    # Domains
    "DnsRecord",
    "Domain",
    "DomainAlert",
    "DomainDnsRecords",
    "DomainHealth",
    "DomainStatus",
    # Inbox
    "InboxEmbedSettings",
    "InboxNotification",
    "MarkInboxReadAllResult",
    "MarkInboxReadResult",
    "RotatedEmbedKey",
    # Notifications
    "MessageAttempt",
    "Notification",
    # SMS
    "SmsComplianceAction",
    "SmsComplianceAnalytics",
    "SmsComplianceLog",
    "SmsComplianceSettings",
    "SmsConsent",
    "SmsConsentImportError",
    "SmsConsentImportResult",
    "SmsConsentStatus",
    "SmsConsentSummary",
    "SmsProvider",
    "SmsProviderTestResult",
    "SmsProviderType",
    "SmsProviderValidation",
    # Subscribers
    "BulkImportResult",
    "InAppNotification",
    "NotificationPreference",
    "Subscriber",
    "SubscriberPreferences",
    "UnreadCount",
    # Templates
    "PreviewResult",
    "Template",
    "ValidationResult",
    # Webhooks
    "Webhook",
    "WebhookDelivery",
    # Workflows
    "StepResult",
    "Workflow",
    "WorkflowRun",
    "WorkflowRunStatus",
]
