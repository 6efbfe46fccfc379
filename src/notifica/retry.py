"""Retry utilities for the request engine.

Provides the backoff policy, Retry-After parsing and the tenacity pieces
the engine composes into its attempt loop. Only rate limits, 5xx responses,
timeouts and transport failures are retried; other client errors are not.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

from tenacity import RetryCallState
from tenacity.wait import wait_base

from .exceptions import NotificaError, RateLimitError

logger = logging.getLogger(__name__)

BASE_DELAY_MS = 500
JITTER_RATIO = 0.5


def compute_backoff_ms(
    attempt: int,
    last_error: BaseException | None = None,
    rand: Callable[[], float] = random.random,
) -> float:
    """Delay before retry number ``attempt`` (1-based), in milliseconds.

    A rate limit carrying a Retry-After hint wins over exponential backoff;
    a hint of 0 means retry immediately. Otherwise the delay is
    ``500 * 2^(attempt-1)`` plus up to 50% jitter: 500ms, 1s, 2s, ...

    Args:
        attempt: Retry number, starting at 1 for the first retry.
        last_error: Error raised by the previous attempt.
        rand: Uniform [0, 1) source for jitter.
    """
    if isinstance(last_error, RateLimitError) and last_error.retry_after is not None:
        return last_error.retry_after * 1000

    base = BASE_DELAY_MS * (2 ** (attempt - 1))
    jitter = rand() * base * JITTER_RATIO
    return base + jitter


def parse_retry_after(value: str | None, now: datetime | None = None) -> float | None:
    """Parse a Retry-After header into seconds.

    Accepts delta-seconds ("120") or an HTTP-date. Dates in the past yield 0.

    Args:
        value: Raw header value.
        now: Reference time for HTTP-dates (defaults to the current UTC time).

    Returns:
        Seconds to wait, or None if the header is absent or unparseable.
    """
    if not value:
        return None

    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        if math.isfinite(seconds):
            return max(0.0, seconds)
        return None

    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=UTC)

    reference = now or datetime.now(UTC)
    return float(max(0, math.ceil((retry_at - reference).total_seconds())))


def is_retryable(exc: BaseException) -> bool:
    """Retry predicate: only Notifica errors flagged retryable qualify."""
    return isinstance(exc, NotificaError) and exc.retryable


class wait_backoff(wait_base):
    """Tenacity wait strategy backed by :func:`compute_backoff_ms`."""

    def __init__(self, rand: Callable[[], float] = random.random) -> None:
        self.rand = rand

    def __call__(self, retry_state: RetryCallState) -> float:
        last_error = retry_state.outcome.exception() if retry_state.outcome else None
        delay_ms = compute_backoff_ms(retry_state.attempt_number, last_error, self.rand)
        return delay_ms / 1000


def log_retry(method: str, path: str) -> Callable[[RetryCallState], None]:
    """Build a tenacity ``before_sleep`` hook that logs scheduled retries.

    Args:
        method: HTTP method of the request being retried.
        path: Request path, relative to the base URL.
    """

    def _log(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.warning(
            "Retrying Notifica request",
            extra={
                "attempt": retry_state.attempt_number,
                "method": method,
                "path": path,
                "delay_ms": round(delay * 1000),
                "error": str(error) if error else None,
            },
        )

    return _log
