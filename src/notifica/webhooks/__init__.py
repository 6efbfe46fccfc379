"""Inbound webhook verification for Notifica.

Example:
    ```python
    from notifica.webhooks import SIGNATURE_HEADER, verify_signature_or_raise

    verify_signature_or_raise(raw_body, headers[SIGNATURE_HEADER], signing_secret)
    ```
"""

from .signature import (
    SIGNATURE_HEADER,
    compute_signature,
    timing_safe_equal,
    verify_signature,
    verify_signature_or_raise,
)

__all__ = [
    "SIGNATURE_HEADER",
    "compute_signature",
    "timing_safe_equal",
    "verify_signature",
    "verify_signature_or_raise",
]
