"""Resilient request engine for the Notifica API.

Every resource method goes through :class:`NotificaClient`, which adds
authentication and idempotency headers, enforces a per-request deadline,
classifies error responses and retries transient failures with backoff.

Example:
    ```python
    from notifica.client import NotificaClient
    from notifica.config import ClientConfig

    async with NotificaClient(ClientConfig(api_key="nk_test_...")) as client:
        page = await client.list("/notifications", {"channel": "email"})
        async for item in client.paginate("/templates"):
            print(item["slug"])
    ```
"""

from __future__ import annotations

import asyncio
import functools
import json
import logging
import random
import uuid
from collections.abc import Awaitable, Callable, Mapping
from datetime import UTC, datetime
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PayloadValidationError
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt

from ._version import __version__
from .config import ClientConfig, RequestOptions
from .exceptions import (
    ApiError,
    ConfigurationError,
    NotificaError,
    RateLimitError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)
from .models.common import ApiErrorBody, ApiErrorDetail, Page
from .pagination import Paginator
from .retry import is_retryable, log_retry, parse_retry_after, wait_backoff

logger = logging.getLogger(__name__)

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)

USER_AGENT = f"notifica-python/{__version__}"
REQUEST_ID_HEADER = "x-request-id"
IDEMPOTENCY_HEADER = "Idempotency-Key"
SERVER_ERROR_STATUS_CODES = frozenset({500, 502, 503, 504})

_NO_OPTIONS = RequestOptions()


def _utcnow() -> datetime:
    return datetime.now(UTC)


def generate_idempotency_key() -> str:
    """Return a fresh random idempotency key."""
    return str(uuid.uuid4())


def envelope_data(response: Any) -> Any:
    """Return ``T`` from a ``{data: T}`` success envelope.

    Raises:
        TransportError: If the body is empty (e.g. 204) or has no ``data`` member.
    """
    if not isinstance(response, Mapping) or "data" not in response:
        raise TransportError("Request failed: response has no 'data' envelope")
    return response["data"]


def validate_data(response: Any, adapter: TypeAdapter[T]) -> T:
    """Validate the ``data`` member of a success envelope with ``adapter``."""
    data = envelope_data(response)
    try:
        return adapter.validate_python(data)
    except PayloadValidationError as exc:
        raise _unexpected_shape(exc) from exc


def _unexpected_shape(exc: PayloadValidationError) -> TransportError:
    return TransportError(
        f"Request failed: unexpected response shape ({exc.error_count()} invalid fields)"
    )


class NotificaClient:
    """Async HTTP client with retries, deadlines and error classification.

    The engine holds no mutable state across calls beyond the shared
    connection pool, so one instance can serve many concurrent requests.

    Args:
        config: Immutable client configuration.
        transport: httpx transport override (e.g. ``httpx.MockTransport``).
        sleep: Async sleep used between retries, in seconds.
        rand: Uniform [0, 1) source for backoff jitter.
        clock: Returns the current aware datetime, for HTTP-date Retry-After.

    Raises:
        ConfigurationError: If the API key is empty.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rand: Callable[[], float] = random.random,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not config.api_key:
            raise ConfigurationError('API key is required. Pass it via: Notifica("nk_live_...")')

        self._config = config
        self._http = httpx.AsyncClient(transport=transport, timeout=None)
        self._sleep = sleep
        self._rand = rand
        self._clock = clock

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> NotificaClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    # HTTP verbs

    async def get(
        self,
        path: str,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self.request("GET", path, query=query, options=options)

    async def post(
        self, path: str, body: Any = None, options: RequestOptions | None = None
    ) -> Any:
        return await self.request("POST", path, body=body, options=options)

    async def put(self, path: str, body: Any = None, options: RequestOptions | None = None) -> Any:
        return await self.request("PUT", path, body=body, options=options)

    async def patch(
        self, path: str, body: Any = None, options: RequestOptions | None = None
    ) -> Any:
        return await self.request("PATCH", path, body=body, options=options)

    async def delete(self, path: str, options: RequestOptions | None = None) -> Any:
        return await self.request("DELETE", path, options=options)

    # Pagination helpers

    async def list(
        self,
        path: str,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        *,
        item_type: type[ModelT] | None = None,
    ) -> Page[Any]:
        """Fetch a single page. Use ``page.meta.cursor`` to request the next one.

        Args:
            path: Listing path, e.g. "/notifications".
            query: Filters plus ``limit``/``cursor``.
            options: Per-call overrides.
            item_type: Model to validate each item into; raw dicts if omitted.
        """
        response = await self.get(path, query, options)
        page_type = Page[item_type] if item_type is not None else Page[dict[str, Any]]
        try:
            return page_type.model_validate(response or {})
        except PayloadValidationError as exc:
            raise _unexpected_shape(exc) from exc

    def paginate(
        self,
        path: str,
        query: Mapping[str, Any] | None = None,
        *,
        item_type: type[ModelT] | None = None,
        options: RequestOptions | None = None,
    ) -> Paginator[Any]:
        """Lazily iterate every item across all pages.

        Example:
            ```python
            async for notification in client.paginate("/notifications", {"limit": 100}):
                print(notification["id"])
            ```
        """
        return Paginator(self, path, query, item_type=item_type, options=options)

    async def get_one(
        self,
        path: str,
        options: RequestOptions | None = None,
        *,
        item_type: type[ModelT] | None = None,
    ) -> Any:
        """GET a ``{data: T}`` envelope and return ``T``.

        Raises:
            TransportError: If the response carries no ``data`` envelope or
                does not match ``item_type``.
        """
        response = await self.get(path, None, options)
        if item_type is None:
            return envelope_data(response)
        return validate_data(response, TypeAdapter(item_type))

    # Engine

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Issue a request, retrying transient failures.

        Args:
            method: GET, POST, PUT, PATCH or DELETE.
            path: Path relative to the base URL, starting with "/".
            body: JSON-serializable body; None sends no body.
            query: Query parameters; None values are omitted.
            options: Per-call overrides.

        Returns:
            The decoded JSON body, or None for 204 responses.

        Raises:
            ValidationError: On 422 responses.
            RateLimitError: On 429 once retries are exhausted.
            ApiError: On other non-2xx responses.
            RequestTimeoutError: When the deadline expires on the last attempt.
            TransportError: On network failures on the last attempt.
            NotificaError: When the request is cancelled via ``cancel_event``.
        """
        method = method.upper()
        options = options or _NO_OPTIONS
        url = f"{self._config.base_url}{path}"
        params = self._build_query(query)
        headers = self._build_headers(method, options)
        content = json.dumps(body, separators=(",", ":")) if body is not None else None
        timeout_ms = options.timeout_ms or self._config.timeout_ms
        cancel_event = options.cancel_event

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._config.max_retries + 1),
            wait=wait_backoff(self._rand),
            retry=retry_if_exception(is_retryable),
            sleep=functools.partial(self._pause, cancel_event=cancel_event),
            before_sleep=log_retry(method, path),
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                return await self._attempt(
                    method, url, params, content, headers, timeout_ms, cancel_event
                )

        raise NotificaError("Request failed after max retries")

    async def _attempt(
        self,
        method: str,
        url: str,
        params: dict[str, Any],
        content: str | None,
        headers: dict[str, str],
        timeout_ms: int,
        cancel_event: asyncio.Event | None,
    ) -> Any:
        if cancel_event is not None and cancel_event.is_set():
            raise NotificaError("Request aborted")

        request = self._http.build_request(
            method, url, params=params, content=content, headers=headers
        )
        deadline = asyncio.timeout(timeout_ms / 1000)
        try:
            async with deadline:
                if cancel_event is None:
                    response = await self._http.send(request)
                else:
                    response = await self._until_cancelled(self._http.send(request), cancel_event)
        except NotificaError:
            raise
        except TimeoutError as exc:
            if deadline.expired():
                raise RequestTimeoutError(timeout_ms) from None
            raise TransportError(f"Request failed: {str(exc) or type(exc).__name__}") from exc
        except Exception as exc:
            raise TransportError(f"Request failed: {str(exc) or type(exc).__name__}") from exc

        logger.debug(
            "Notifica request completed",
            extra={"method": method, "url": str(request.url), "status": response.status_code},
        )
        return self._handle_response(response)

    @staticmethod
    async def _until_cancelled(operation: Awaitable[T], cancel_event: asyncio.Event) -> T:
        """Await ``operation`` unless ``cancel_event`` fires first."""
        task = asyncio.ensure_future(operation)
        waiter = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not task.done():
                task.cancel()
                await asyncio.wait({task})

        if not task.cancelled():
            return task.result()
        raise NotificaError("Request aborted")

    async def _pause(self, seconds: float, cancel_event: asyncio.Event | None = None) -> None:
        """Backoff sleep; cancelling the request also interrupts the wait."""
        if cancel_event is None:
            await self._sleep(seconds)
            return
        if cancel_event.is_set():
            raise NotificaError("Request aborted")
        await self._until_cancelled(self._sleep(seconds), cancel_event)

    def _handle_response(self, response: httpx.Response) -> Any:
        if response.is_success:
            if response.status_code == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise TransportError(f"Request failed: invalid JSON response ({exc})") from exc

        raise self._classify_error(response)

    def _classify_error(self, response: httpx.Response) -> ApiError:
        """Map a non-2xx response onto the error taxonomy."""
        status = response.status_code
        error = self._parse_error_body(response)
        message = error.message if error and error.message else None
        code = error.code if error and error.code else None
        details = (error.details if error else None) or {}
        request_id = response.headers.get(REQUEST_ID_HEADER)

        if status == 429:
            retry_after = parse_retry_after(response.headers.get("retry-after"), self._clock())
            return RateLimitError(message or "Rate limit exceeded", retry_after, request_id)

        if status in SERVER_ERROR_STATUS_CODES:
            return ApiError(
                message or f"Server error ({status})",
                status,
                code or "server_error",
                details,
                request_id,
            )

        if status == 422:
            return ValidationError(message or "Validation failed", details, request_id)

        return ApiError(
            message or f"API error ({status})",
            status,
            code or "api_error",
            details,
            request_id,
        )

    @staticmethod
    def _parse_error_body(response: httpx.Response) -> ApiErrorDetail | None:
        # Non-JSON or non-object bodies degrade to None; fields are parsed leniently
        try:
            return ApiErrorBody.model_validate(response.json()).error
        except ValueError:
            return None

    @staticmethod
    def _build_query(query: Mapping[str, Any] | None) -> dict[str, Any]:
        if not query:
            return {}
        return {key: value for key, value in query.items() if value is not None}

    def _build_headers(self, method: str, options: RequestOptions) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }

        if method == "POST":
            if options.idempotency_key:
                headers[IDEMPOTENCY_HEADER] = options.idempotency_key
            elif self._config.auto_idempotency:
                headers[IDEMPOTENCY_HEADER] = generate_idempotency_key()

        return headers
