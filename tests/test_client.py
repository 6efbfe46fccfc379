"""Tests for the request engine: headers, retries, deadlines and errors."""

from __future__ import annotations

import asyncio
import uuid
from datetime import UTC, datetime

import httpx
import pytest
from helpers import (
    TEST_API_KEY,
    TEST_BASE_URL,
    MockApi,
    MockResponse,
    body_of,
    envelope,
    error_body,
)

from notifica.client import USER_AGENT, NotificaClient
from notifica.config import ClientConfig, RequestOptions
from notifica.exceptions import (
    ApiError,
    ConfigurationError,
    NotificaError,
    RateLimitError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)
from notifica.models import UnreadCount

OK = MockResponse(200, envelope({"id": "ntf_1"}))


class TestConstruction:
    """Tests for engine construction."""

    def test_empty_api_key_rejected(self):
        with pytest.raises(ConfigurationError, match="API key is required"):
            NotificaClient(ClientConfig(api_key=""))

    def test_exposes_config(self, make_client):
        client = make_client(MockApi(OK), max_retries=2)
        assert client.config.max_retries == 2
        assert client.config.api_key == TEST_API_KEY

    @pytest.mark.asyncio
    async def test_async_context_manager_closes(self, make_client):
        async with make_client(MockApi(OK)) as client:
            await client.get("/notifications/ntf_1")
        assert client._http.is_closed


class TestRequestShape:
    """Tests for URL, query, headers and body encoding."""

    @pytest.mark.asyncio
    async def test_url_joins_base_and_path(self, make_client):
        api = MockApi(OK)
        await make_client(api).get("/notifications/ntf_1")
        assert str(api.last_request.url) == f"{TEST_BASE_URL}/notifications/ntf_1"

    @pytest.mark.asyncio
    async def test_trailing_slash_base_url(self, make_client):
        api = MockApi(OK)
        await make_client(api, base_url="https://api.test.local/v1/").get("/templates")
        assert str(api.last_request.url) == "https://api.test.local/v1/templates"

    @pytest.mark.asyncio
    async def test_query_omits_none_values(self, make_client):
        api = MockApi(OK)
        await make_client(api).get(
            "/subscribers/sub_1/notifications",
            {"limit": 10, "offset": None, "unread_only": True, "search": "ana"},
        )
        params = api.last_request.url.params
        assert params["limit"] == "10"
        assert params["unread_only"] == "true"
        assert params["search"] == "ana"
        assert "offset" not in params

    @pytest.mark.asyncio
    async def test_standard_headers(self, make_client):
        api = MockApi(OK)
        await make_client(api).get("/notifications")
        headers = api.last_request.headers
        assert headers["authorization"] == f"Bearer {TEST_API_KEY}"
        assert headers["content-type"] == "application/json"
        assert headers["accept"] == "application/json"
        assert headers["user-agent"] == USER_AGENT
        assert USER_AGENT.startswith("notifica-python/")

    @pytest.mark.asyncio
    async def test_body_is_json(self, make_client):
        api = MockApi(MockResponse(201, envelope({"id": "ntf_1"})))
        payload = {"channel": "email", "to": "ana@example.com", "data": {"name": "Ana"}}
        await make_client(api).post("/notifications", payload)
        assert body_of(api.last_request) == payload

    @pytest.mark.asyncio
    async def test_no_body_when_none(self, make_client):
        api = MockApi(MockResponse(204))
        await make_client(api).post("/channels/email/test")
        assert api.last_request.content == b""

    @pytest.mark.asyncio
    async def test_method_is_upper_cased(self, make_client):
        api = MockApi(OK)
        await make_client(api).request("patch", "/templates/tpl_1", {"name": "x"})
        assert api.last_request.method == "PATCH"


class TestResponses:
    """Tests for success response handling."""

    @pytest.mark.asyncio
    async def test_returns_decoded_json(self, make_client):
        api = MockApi(OK)
        assert await make_client(api).get("/notifications/ntf_1") == {"data": {"id": "ntf_1"}}

    @pytest.mark.asyncio
    async def test_204_returns_none(self, make_client):
        api = MockApi(MockResponse(204))
        assert await make_client(api).delete("/templates/tpl_1") is None

    @pytest.mark.asyncio
    async def test_empty_200_returns_none(self, make_client):
        api = MockApi(MockResponse(200, text=""))
        assert await make_client(api).post("/webhooks/wh_1/test") is None

    @pytest.mark.asyncio
    async def test_invalid_json_is_transport_error(self, make_client):
        api = MockApi(MockResponse(200, text="<html>gateway</html>"))
        with pytest.raises(TransportError, match="invalid JSON"):
            await make_client(api).get("/notifications")


class TestIdempotency:
    """Tests for automatic and explicit idempotency keys."""

    @pytest.mark.asyncio
    async def test_post_gets_uuid_key(self, make_client):
        api = MockApi(OK)
        await make_client(api).post("/notifications", {"channel": "sms"})
        key = api.last_request.headers["idempotency-key"]
        assert str(uuid.UUID(key)) == key

    @pytest.mark.asyncio
    async def test_distinct_keys_per_call(self, make_client):
        api = MockApi(OK)
        client = make_client(api)
        await client.post("/notifications", {"channel": "sms"})
        await client.post("/notifications", {"channel": "sms"})
        keys = {request.headers["idempotency-key"] for request in api.requests}
        assert len(keys) == 2

    @pytest.mark.asyncio
    async def test_same_key_across_retries(self, make_client):
        api = MockApi([MockResponse(503), MockResponse(503), OK])
        await make_client(api, max_retries=2).post("/notifications", {"channel": "sms"})
        assert api.call_count == 3
        keys = {request.headers["idempotency-key"] for request in api.requests}
        assert len(keys) == 1

    @pytest.mark.asyncio
    async def test_explicit_key_wins(self, make_client):
        api = MockApi(OK)
        options = RequestOptions(idempotency_key="order-42-welcome")
        await make_client(api).post("/notifications", {"channel": "sms"}, options)
        assert api.last_request.headers["idempotency-key"] == "order-42-welcome"

    @pytest.mark.asyncio
    async def test_explicit_key_without_auto(self, make_client):
        api = MockApi(OK)
        options = RequestOptions(idempotency_key="k1")
        await make_client(api, auto_idempotency=False).post("/notifications", None, options)
        assert api.last_request.headers["idempotency-key"] == "k1"

    @pytest.mark.asyncio
    async def test_auto_disabled(self, make_client):
        api = MockApi(OK)
        await make_client(api, auto_idempotency=False).post("/notifications", {"channel": "sms"})
        assert "idempotency-key" not in api.last_request.headers

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE"])
    async def test_only_post_gets_key(self, make_client, method):
        api = MockApi(OK)
        options = RequestOptions(idempotency_key="ignored")
        await make_client(api).request(method, "/templates/tpl_1", options=options)
        assert "idempotency-key" not in api.last_request.headers


class TestErrorClassification:
    """Tests for mapping error responses onto the exception taxonomy."""

    @pytest.mark.asyncio
    async def test_422_is_validation_error(self, make_client):
        body = error_body("validation_failed", "Invalid payload", {"to": ["is required"]})
        api = MockApi(MockResponse(422, body))
        with pytest.raises(ValidationError) as exc_info:
            await make_client(api).post("/notifications", {})
        assert exc_info.value.message == "Invalid payload"
        assert exc_info.value.details == {"to": ["is required"]}

    @pytest.mark.asyncio
    async def test_422_without_body(self, make_client):
        api = MockApi(MockResponse(422))
        with pytest.raises(ValidationError, match="Validation failed"):
            await make_client(api).post("/notifications", {})

    @pytest.mark.asyncio
    async def test_404_uses_body_code(self, make_client):
        api = MockApi(MockResponse(404, error_body("not_found", "Template not found")))
        with pytest.raises(ApiError) as exc_info:
            await make_client(api).get("/templates/missing")
        error = exc_info.value
        assert type(error) is ApiError
        assert error.status == 404
        assert error.code == "not_found"
        assert error.message == "Template not found"

    @pytest.mark.asyncio
    async def test_request_id_surfaced(self, make_client):
        api = MockApi(
            MockResponse(
                403, error_body("forbidden", "Nope"), headers={"x-request-id": "req_abc"}
            )
        )
        with pytest.raises(ApiError) as exc_info:
            await make_client(api).get("/api-keys")
        assert exc_info.value.request_id == "req_abc"

    @pytest.mark.asyncio
    async def test_malformed_client_error_body(self, make_client):
        api = MockApi(MockResponse(400, text="<html>Bad Request</html>"))
        with pytest.raises(ApiError) as exc_info:
            await make_client(api).get("/notifications")
        assert exc_info.value.message == "API error (400)"
        assert exc_info.value.code == "api_error"

    @pytest.mark.asyncio
    async def test_malformed_server_error_body(self, make_client):
        api = MockApi(MockResponse(502, text="upstream connect error"))
        with pytest.raises(ApiError) as exc_info:
            await make_client(api).get("/notifications")
        assert exc_info.value.status == 502
        assert exc_info.value.message == "Server error (502)"
        assert exc_info.value.code == "server_error"

    @pytest.mark.asyncio
    async def test_unexpected_error_shape(self, make_client):
        api = MockApi(MockResponse(400, {"error": "just a string"}))
        with pytest.raises(ApiError, match=r"API error \(400\)"):
            await make_client(api).get("/notifications")

    @pytest.mark.asyncio
    async def test_malformed_details_keep_code_and_message(self, make_client):
        """A details value that isn't a list of messages must not hide the code."""
        body = {
            "error": {"code": "not_found", "message": "Template missing", "details": {"id": "bad"}}
        }
        api = MockApi(MockResponse(404, body))
        with pytest.raises(ApiError) as exc_info:
            await make_client(api).get("/templates/missing")
        error = exc_info.value
        assert error.code == "not_found"
        assert error.message == "Template missing"
        assert error.details == {"id": ["bad"]}

    @pytest.mark.asyncio
    async def test_non_object_details_dropped(self, make_client):
        body = {"error": {"code": "invalid", "message": "Bad input", "details": ["to"]}}
        api = MockApi(MockResponse(422, body))
        with pytest.raises(ValidationError) as exc_info:
            await make_client(api).post("/notifications", {})
        assert exc_info.value.message == "Bad input"
        assert exc_info.value.details == {}

    @pytest.mark.asyncio
    async def test_non_string_code_falls_back(self, make_client):
        body = {"error": {"code": 404, "message": "Template missing"}}
        api = MockApi(MockResponse(404, body))
        with pytest.raises(ApiError) as exc_info:
            await make_client(api).get("/templates/missing")
        assert exc_info.value.code == "api_error"
        assert exc_info.value.message == "Template missing"

    @pytest.mark.asyncio
    async def test_429_is_rate_limit_error(self, make_client):
        api = MockApi(
            MockResponse(
                429,
                error_body("rate_limit_exceeded", "Too many requests"),
                headers={"retry-after": "12"},
            )
        )
        with pytest.raises(RateLimitError) as exc_info:
            await make_client(api).get("/notifications")
        assert exc_info.value.retry_after == 12
        assert exc_info.value.message == "Too many requests"

    @pytest.mark.asyncio
    async def test_429_http_date_uses_clock(self, sleeper):
        api = MockApi(
            MockResponse(429, headers={"retry-after": "Wed, 15 Jan 2025 12:00:05 GMT"})
        )
        client = NotificaClient(
            ClientConfig(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, max_retries=0),
            transport=api.transport,
            sleep=sleeper,
            clock=lambda: datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC),
        )
        with pytest.raises(RateLimitError) as exc_info:
            await client.get("/notifications")
        assert exc_info.value.retry_after == 5
        assert exc_info.value.message == "Rate limit exceeded"


class TestRetries:
    """Tests for the retry loop."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [429, 500, 502, 503, 504])
    async def test_retryable_status_exhausts_budget(self, make_client, sleeper, status):
        api = MockApi(MockResponse(status))
        with pytest.raises(ApiError) as exc_info:
            await make_client(api, max_retries=3).get("/notifications")
        assert exc_info.value.status == status
        assert api.call_count == 4
        assert len(sleeper.delays) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 401, 403, 404, 409, 422])
    async def test_client_errors_not_retried(self, make_client, sleeper, status):
        api = MockApi(MockResponse(status))
        with pytest.raises(ApiError):
            await make_client(api, max_retries=3).post("/notifications", {})
        assert api.call_count == 1
        assert sleeper.delays == []

    @pytest.mark.asyncio
    async def test_zero_retries_means_one_attempt(self, make_client):
        api = MockApi(MockResponse(503))
        with pytest.raises(ApiError):
            await make_client(api, max_retries=0).get("/notifications")
        assert api.call_count == 1

    @pytest.mark.asyncio
    async def test_recovers_after_transient_failure(self, make_client):
        api = MockApi([MockResponse(500), MockResponse(503), OK])
        result = await make_client(api, max_retries=3).get("/notifications/ntf_1")
        assert result == {"data": {"id": "ntf_1"}}
        assert api.call_count == 3

    @pytest.mark.asyncio
    async def test_exponential_delays(self, make_client, sleeper):
        api = MockApi(MockResponse(500))
        with pytest.raises(ApiError):
            await make_client(api, max_retries=3).get("/notifications")
        assert sleeper.delays == [0.5, 1.0, 2.0]

    @pytest.mark.asyncio
    async def test_retry_after_zero_retries_immediately(self, make_client, sleeper):
        api = MockApi([MockResponse(429, headers={"retry-after": "0"}), OK])
        await make_client(api, max_retries=1).get("/notifications")
        assert sleeper.delays == [0.0]

    @pytest.mark.asyncio
    async def test_retry_after_seconds(self, make_client, sleeper):
        api = MockApi(MockResponse(429, headers={"retry-after": "2"}))
        with pytest.raises(RateLimitError):
            await make_client(api, max_retries=2).get("/notifications")
        assert sleeper.delays == [2.0, 2.0]

    @pytest.mark.asyncio
    async def test_transport_errors_retried_and_wrapped(self, make_client):
        def refuse(request: httpx.Request) -> MockResponse:
            raise httpx.ConnectError("connection refused", request=request)

        api = MockApi(refuse)
        with pytest.raises(TransportError) as exc_info:
            await make_client(api, max_retries=2).get("/notifications")
        assert api.call_count == 3
        assert exc_info.value.message == "Request failed: connection refused"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_unexpected_exception_wrapped(self, make_client):
        def explode(request: httpx.Request) -> MockResponse:
            raise RuntimeError

        api = MockApi(explode)
        with pytest.raises(TransportError, match="Request failed: RuntimeError"):
            await make_client(api).get("/notifications")

    @pytest.mark.asyncio
    async def test_retry_is_logged(self, make_client, caplog):
        api = MockApi([MockResponse(503), OK])
        with caplog.at_level("WARNING", logger="notifica.retry"):
            await make_client(api, max_retries=1).get("/notifications")
        messages = [record.getMessage() for record in caplog.records]
        assert "Retrying Notifica request" in messages


class TestDeadlines:
    """Tests for per-request timeouts."""

    @pytest.mark.asyncio
    async def test_timeout_raises(self, make_client):
        api = MockApi(OK, delay=1.0)
        with pytest.raises(RequestTimeoutError) as exc_info:
            await make_client(api, timeout_ms=20).get("/notifications")
        assert exc_info.value.timeout_ms == 20
        assert exc_info.value.message == "Request timed out after 20ms"

    @pytest.mark.asyncio
    async def test_per_call_timeout_overrides_default(self, make_client):
        api = MockApi(OK, delay=1.0)
        client = make_client(api, timeout_ms=60_000)
        with pytest.raises(RequestTimeoutError, match="after 30ms"):
            await client.get("/notifications", options=RequestOptions(timeout_ms=30))

    @pytest.mark.asyncio
    async def test_timeouts_are_retried(self, make_client, sleeper):
        api = MockApi(OK, delay=1.0)
        with pytest.raises(RequestTimeoutError):
            await make_client(api, timeout_ms=20, max_retries=1).get("/notifications")
        assert api.call_count == 2
        assert sleeper.delays == [0.5]

    @pytest.mark.asyncio
    async def test_fast_response_within_deadline(self, make_client):
        api = MockApi(OK, delay=0.01)
        result = await make_client(api, timeout_ms=2000).get("/notifications")
        assert result == {"data": {"id": "ntf_1"}}


class TestCancellation:
    """Tests for caller-initiated cancellation."""

    @pytest.mark.asyncio
    async def test_cancel_before_send(self, make_client):
        api = MockApi(OK)
        event = asyncio.Event()
        event.set()
        with pytest.raises(NotificaError, match="Request aborted"):
            await make_client(api).get("/notifications", options=RequestOptions(cancel_event=event))
        assert api.call_count == 0

    @pytest.mark.asyncio
    async def test_cancel_in_flight_is_not_retried(self, make_client, sleeper):
        api = MockApi(OK, delay=5.0)
        client = make_client(api, max_retries=3)
        event = asyncio.Event()
        asyncio.get_running_loop().call_later(0.02, event.set)

        with pytest.raises(NotificaError) as exc_info:
            await client.get("/notifications", options=RequestOptions(cancel_event=event))
        assert type(exc_info.value) is NotificaError
        assert exc_info.value.message == "Request aborted"
        assert api.call_count == 1
        assert sleeper.delays == []

    @pytest.mark.asyncio
    async def test_cancel_interrupts_backoff(self):
        api = MockApi(MockResponse(503))
        event = asyncio.Event()
        sleeps: list[float] = []

        async def slow_sleep(seconds: float) -> None:
            sleeps.append(seconds)
            event.set()
            await asyncio.sleep(5)

        client = NotificaClient(
            ClientConfig(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, max_retries=3),
            transport=api.transport,
            sleep=slow_sleep,
            rand=lambda: 0.0,
        )
        with pytest.raises(NotificaError, match="Request aborted"):
            await client.get("/notifications", options=RequestOptions(cancel_event=event))
        assert api.call_count == 1
        assert sleeps == [0.5]

    @pytest.mark.asyncio
    async def test_unset_event_does_not_interfere(self, make_client):
        api = MockApi(OK)
        options = RequestOptions(cancel_event=asyncio.Event())
        result = await make_client(api).get("/notifications", options=options)
        assert result == {"data": {"id": "ntf_1"}}


class TestHelpers:
    """Tests for list/get_one helpers."""

    @pytest.mark.asyncio
    async def test_list_returns_page(self, make_client):
        api = MockApi(
            MockResponse(200, {"data": [{"id": "a"}], "meta": {"cursor": "c2", "has_more": True}})
        )
        page = await make_client(api).list("/notifications", {"limit": 1})
        assert page.data == [{"id": "a"}]
        assert page.meta.cursor == "c2"
        assert page.meta.has_more is True

    @pytest.mark.asyncio
    async def test_list_tolerates_missing_meta(self, make_client):
        api = MockApi(MockResponse(200, {"data": []}))
        page = await make_client(api).list("/notifications")
        assert page.data == []
        assert page.meta.has_more is False

    @pytest.mark.asyncio
    async def test_get_one_unwraps_envelope(self, make_client):
        api = MockApi(OK)
        assert await make_client(api).get_one("/notifications/ntf_1") == {"id": "ntf_1"}

    @pytest.mark.asyncio
    async def test_get_one_validates_item_type(self, make_client):
        api = MockApi(MockResponse(200, envelope({"count": 3})))
        result = await make_client(api).get_one("/x", item_type=UnreadCount)
        assert result.count == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [MockResponse(204), MockResponse(200, {"id": "ntf_1"}), MockResponse(200, [1, 2])],
        ids=["no-content", "no-envelope", "list-body"],
    )
    async def test_get_one_without_data_envelope(self, make_client, response):
        """Missing envelopes surface as TransportError, not KeyError or TypeError."""
        with pytest.raises(TransportError, match="no 'data' envelope"):
            await make_client(MockApi(response)).get_one("/notifications/ntf_1")

    @pytest.mark.asyncio
    async def test_get_one_shape_mismatch(self, make_client):
        api = MockApi(MockResponse(200, envelope({"count": "many"})))
        with pytest.raises(TransportError, match="unexpected response shape") as exc_info:
            await make_client(api).get_one("/x", item_type=UnreadCount)
        assert exc_info.value.kind == "transport"

    @pytest.mark.asyncio
    async def test_list_shape_mismatch(self, make_client):
        api = MockApi(MockResponse(200, [{"id": "a"}]))
        with pytest.raises(TransportError, match="unexpected response shape"):
            await make_client(api).list("/notifications")
