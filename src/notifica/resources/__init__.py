"""API resources, each a thin wrapper over the shared request engine."""

from .analytics import Analytics
from .api_keys import ApiKeys
from .audit import Audit
from .base import Resource
from .billing import (
    Billing,
    BillingInvoices,
    BillingPaymentMethods,
    BillingPlans,
    BillingSettingsResource,
    BillingSubscription,
    BillingUsageResource,
)
from .channels import Channels
from .domains import Domains
from .inbox import Inbox
from .inbox_embed import InboxEmbed
from .notifications import Notifications
from .sms import Sms, SmsCompliance, SmsConsents, SmsProviders
from .subscribers import Subscribers
from .templates import Templates
from .webhooks import Webhooks
from .workflows import Workflows

__all__ = [
    "Analytics",
    "ApiKeys",
    "Audit",
    "Billing",
    "BillingInvoices",
    "BillingPaymentMethods",
    "BillingPlans",
    "BillingSettingsResource",
    "BillingSubscription",
    "BillingUsageResource",
    "Channels",
    "Domains",
    "Inbox",
    "InboxEmbed",
    "Notifications",
    "Resource",
    "Sms",
    "SmsCompliance",
    "SmsConsents",
    "SmsProviders",
    "Subscribers",
    "Templates",
    "Webhooks",
    "Workflows",
]
