"""Notifica: the official Python SDK for the Notifica notification API.

Turns the REST API into typed async method calls with retries,
idempotent POSTs, lazy cursor pagination, typed errors and webhook
signature verification.

Quick Start:
    from notifica import Notifica

    async with Notifica("nk_live_...") as notifica:
        notification = await notifica.notifications.send({
            "channel": "email",
            "to": "ana@example.com",
            "template": "welcome",
        })

        async for template in notifica.templates.list_all(channel="email"):
            print(template.slug)
"""

import logging as _logging

from ._version import __version__

# Client
from .client import NotificaClient

# Configuration
from .config import ClientConfig, RequestOptions, Settings

# Exceptions
from .exceptions import (
    ApiError,
    ConfigurationError,
    ErrorKind,
    NotificaError,
    RateLimitError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)

# Logging
from .logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

# Models
from .models import Page, PaginationMeta
from .pagination import Paginator
from .sdk import Notifica

# Webhooks
from .webhooks import (
    SIGNATURE_HEADER,
    compute_signature,
    verify_signature,
    verify_signature_or_raise,
)

_logging.getLogger("notifica").addHandler(_logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Client
    "Notifica",
    "NotificaClient",
    "Paginator",
    # Configuration
    "ClientConfig",
    "RequestOptions",
    "Settings",
    # Exceptions
    "ApiError",
    "ConfigurationError",
    "ErrorKind",
    "NotificaError",
    "RateLimitError",
    "RequestTimeoutError",
    "TransportError",
    "ValidationError",
    # Logging
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "unbind_context",
    # Models
    "Page",
    "PaginationMeta",
    # Webhooks
    "SIGNATURE_HEADER",
    "compute_signature",
    "verify_signature",
    "verify_signature_or_raise",
]
