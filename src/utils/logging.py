# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured logging configuration using structlog.

Logs are formatted as JSON outside development and as console output in
development. Domain modules log through ``logging.getLogger(__name__)``;
those records go through the same structlog processor chain as
:func:`get_logger` events, so values bound with :func:`bind_context`
(the request id, method and path) and the service name appear on both.

Example:
    >>> from src.utils.logging import setup_logging, get_logger
    >>> from src.core.config import get_settings
    >>> setup_logging(get_settings())
    >>> logger = get_logger(__name__)
    >>> logger.info("Book borrowed", book_id="123", borrower_type="Student")
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import EventDict, Processor

if TYPE_CHECKING:
    from src.core.config.settings import Settings

SERVICE_NAME = "school-records-api"

# Third-party loggers that are too chatty at DEBUG/INFO
_NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "sqlalchemy",
    "alembic",
    "asyncio",
)

_handler: logging.Handler | None = None


def _service_stamper(environment: str) -> Processor:
    """Processor adding the service name and environment to every event."""

    def stamp(_: object, __: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("environment", environment)
        return event_dict

    return stamp


def setup_logging(settings: "Settings") -> None:
    """Configure structured logging for the application.

    Both structlog loggers and ``logging.getLogger(__name__)`` loggers are
    rendered by one root handler, so records from the domain services carry
    the request context bound by the middleware:
    - Development: console output, colored when ``debug`` is on
    - Production and test: one JSON object per line

    Calling it again replaces the handler installed by the previous call.

    Args:
        settings: Application settings containing log_level and debug flag.
    """
    global _handler

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    pre_chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _service_stamper(settings.environment),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderers: list[Processor]
    if settings.is_development:
        renderers = [structlog.dev.ConsoleRenderer(colors=settings.debug)]
    else:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *renderers,
            ],
        )
    )

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(log_level)
    _handler = handler

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.getLogger("src").setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        A bound structlog logger instance.
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log calls in this context.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.

    Example:
        >>> bind_context(request_id="abc-123", path="/api/v1/student")
        >>> logger.info("Processing request")  # Will include request_id and path
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables.

    Called at the end of request processing so values do not leak
    between requests.
    """
    structlog.contextvars.clear_contextvars()
