"""HMAC-SHA256 verification for inbound Notifica webhooks.

Notifica signs each webhook body with the endpoint's signing secret and
sends the lowercase hex digest in the ``X-Notifica-Signature`` header.
Verify against the raw request body, before any JSON parsing.
"""

from __future__ import annotations

import hashlib
import hmac
import logging

from notifica.exceptions import NotificaError

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Notifica-Signature"

Payload = str | bytes | bytearray | memoryview


def _payload_bytes(payload: Payload) -> bytes:
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return bytes(payload)


def compute_signature(payload: Payload, secret: str) -> str:
    """Compute the HMAC-SHA256 signature of a webhook payload.

    Args:
        payload: Raw request body, as text or bytes.
        secret: The webhook's signing secret.

    Returns:
        Lowercase hex digest.
    """
    return hmac.new(
        key=secret.encode("utf-8"),
        msg=_payload_bytes(payload),
        digestmod=hashlib.sha256,
    ).hexdigest()


def timing_safe_equal(a: str, b: str) -> bool:
    """Compare two strings in time independent of where they differ.

    Lengths are not treated as secret: unequal lengths return False at once.
    For equal lengths every position is visited.
    """
    if len(a) != len(b):
        return False

    result = 0
    for x, y in zip(a, b):
        result |= ord(x) ^ ord(y)
    return result == 0


def verify_signature(payload: Payload, signature: str, secret: str) -> bool:
    """Verify the HMAC-SHA256 signature of a webhook payload.

    Never raises: malformed input yields False.

    Args:
        payload: Raw request body, as text or bytes.
        signature: Value of the X-Notifica-Signature header.
        secret: The webhook's signing secret.

    Returns:
        True if the signature is valid, False otherwise.

    Example:
        ```python
        from notifica.webhooks import SIGNATURE_HEADER, verify_signature

        body = await request.body()
        if not verify_signature(body, request.headers[SIGNATURE_HEADER], secret):
            return Response(status_code=401)
        ```
    """
    if not payload or not signature or not secret:
        return False

    try:
        expected = compute_signature(payload, secret)
        return timing_safe_equal(expected, signature)
    except Exception:  # noqa: BLE001
        logger.debug("Webhook signature verification failed", exc_info=True)
        return False


def verify_signature_or_raise(payload: Payload, signature: str, secret: str) -> None:
    """Fail-fast variant of :func:`verify_signature`.

    Raises:
        NotificaError: If the signature is invalid.
    """
    if not verify_signature(payload, signature, secret):
        raise NotificaError("Invalid webhook signature")
