"""Notifica exception hierarchy.

Every error raised by the SDK inherits from NotificaError, so callers can
catch all of them with a single except clause. Each class also carries a
``kind`` discriminant for callers that prefer matching on a value over
``isinstance`` chains:

    ```python
    try:
        await notifica.notifications.send({...})
    except NotificaError as exc:
        match exc.kind:
            case ErrorKind.VALIDATION:
                ...
            case ErrorKind.RATE_LIMIT:
                ...
    ```
"""

from __future__ import annotations

from enum import Enum

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class ErrorKind(str, Enum):
    """Discriminant shared by every Notifica exception."""

    ERROR = "error"
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    API = "api"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"


class NotificaError(Exception):
    """Base exception for all Notifica errors.

    Raised directly for programmer errors and local failures such as a
    cancelled request or an invalid webhook signature.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
    """

    kind: ErrorKind = ErrorKind.ERROR
    code: str = "notifica_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        """Whether the request engine may retry after this error."""
        return False

    def to_dict(self) -> dict[str, object]:
        """Convert exception to the API error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }


class ConfigurationError(NotificaError):
    """Configuration error.

    Raised at construction time when the API key is missing or empty.
    """

    kind = ErrorKind.CONFIGURATION
    code: str = "configuration_error"


class TransportError(NotificaError):
    """The HTTP call failed before a usable response was received.

    Wraps connection errors and any other unexpected exception raised
    during an attempt. The original exception is chained as ``__cause__``.
    """

    kind = ErrorKind.TRANSPORT
    code: str = "transport_error"

    @property
    def retryable(self) -> bool:
        return True


class RequestTimeoutError(NotificaError):
    """The request exceeded its deadline.

    Attributes:
        timeout_ms: The deadline that expired, in milliseconds.
    """

    kind = ErrorKind.TIMEOUT
    code: str = "timeout"

    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(f"Request timed out after {timeout_ms}ms")

    @property
    def retryable(self) -> bool:
        return True

    def to_dict(self) -> dict[str, object]:
        return {
            "error": {
                "code": self.code,
                "timeout_ms": self.timeout_ms,
                "message": self.message,
            }
        }


class ApiError(NotificaError):
    """Error response returned by the Notifica API.

    Attributes:
        status: HTTP status code.
        code: Error code from the response body (e.g. "not_found").
        details: Field-level validation messages.
        request_id: Value of the x-request-id response header, if any.
    """

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status: int,
        code: str,
        details: dict[str, list[str]] | None = None,
        request_id: str | None = None,
    ) -> None:
        self.status = status
        self.code = code
        self.details = details or {}
        self.request_id = request_id
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        return self.status in RETRYABLE_STATUS_CODES

    def to_dict(self) -> dict[str, object]:
        return {
            "error": {
                "code": self.code,
                "status": self.status,
                "message": self.message,
                "details": self.details,
                "request_id": self.request_id,
            }
        }


class ValidationError(ApiError):
    """The API rejected the request payload (HTTP 422). Never retried."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        details: dict[str, list[str]] | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message, 422, "validation_failed", details, request_id)


class RateLimitError(ApiError):
    """Rate limit exceeded (HTTP 429).

    Attributes:
        retry_after: Seconds until the client can retry, or None if the
            server gave no hint.
    """

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str,
        retry_after: float | None = None,
        request_id: str | None = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(message, 429, "rate_limit_exceeded", {}, request_id)

    def to_dict(self) -> dict[str, object]:
        result = super().to_dict()
        result["error"]["retry_after"] = self.retry_after  # type: ignore[index]
        return result
