"""
Structured logging for the Mollie client.

The library emits events through get_logger() and never configures logging
on import. Applications that want to see the client's request and response
events call configure_logging() once at start-up.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import EventDict, Processor

LIBRARY_LOGGER = "mollie_client"
REDACTED = "***"

_CREDENTIAL_KEYS = ("authorization", "api_key", "access_token", "bearer_token")


def redact_credentials(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask credential values bound to a log event."""
    for key in _CREDENTIAL_KEYS:
        if event_dict.get(key):
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    format_as_json: bool = True,
    stream: TextIO | None = None,
) -> None:
    """
    Route the client's log events to a stream.

    Only the "mollie_client" logger hierarchy gets a handler; the root logger
    and any handlers the application installed are left alone.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Request/response events are emitted at DEBUG.
        format_as_json: If True, output logs as JSON; otherwise use console format
        stream: Where to write (default: stdout)
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.handlers = [handler]
    library_logger.setLevel(getattr(logging, log_level.upper()))
    library_logger.propagate = False

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        redact_credentials,
    ]

    if format_as_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module)
    """
    return structlog.get_logger(name)
