"""Structured logging configuration for the Notifica SDK.

SDK modules log through the standard library (``logging.getLogger(__name__)``)
and stay silent until the application opts in. ``configure_logging`` routes
both structlog and stdlib records through structlog processors, rendering
JSON in production and colored console output in development.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import Processor

_HANDLER_NAME = "notifica-structlog"


def configure_logging(
    level: str = "INFO",
    format: str = "json",
) -> None:
    """Configure structured logging for the SDK.

    Safe to call more than once; the previous handler is replaced.

    Args:
        level: Threshold for the "notifica" logger, e.g. "DEBUG" or "WARNING".
        format: "json" renders one JSON object per line; "text" uses colored console output.

    Example:
        ```python
        from notifica.logging import configure_logging, get_logger

        configure_logging(level="DEBUG", format="text")
        logger = get_logger()
        logger.info("Sending batch", size=50)
        ```
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Processor
    if format.lower() == "json":
        renderer = structlog.processors.JSONRenderer()
        final_processors: list[Processor] = [structlog.processors.format_exc_info, renderer]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
        final_processors = [renderer]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *final_processors,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    sdk_logger = logging.getLogger("notifica")
    for existing in list(sdk_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            sdk_logger.removeHandler(existing)
    sdk_logger.addHandler(handler)
    sdk_logger.setLevel(log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, named "notifica" unless ``name`` is given.

    :func:`configure_logging` only attaches its handler to the "notifica"
    logger, so pick a name under it (e.g. "notifica.myapp") for the output
    to be rendered. Other names go through whatever handlers your
    application configured.

    Example:
        ```python
        from notifica.logging import get_logger

        logger = get_logger("notifica.myapp")
        logger.info("Webhook received", event_type="notification.delivered")
        ```
    """
    return structlog.get_logger(name or "notifica")  # type: ignore[no-any-return]


def bind_context(**kwargs: object) -> None:
    """Attach fields (e.g. a tenant or correlation id) to every later log line
    in the current context.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    """Drop previously bound fields by name."""
    structlog.contextvars.unbind_contextvars(*keys)
