"""
Logging Configuration

Structured logging setup using structlog on top of the standard library.

Log Output:
===========
Development:
    2024-05-02T10:30:00Z [info     ] Request handled   method=GET path=/users/1 status=200

Test / Production (JSON):
    {"timestamp": "...", "level": "info", "event": "Request handled", "status": 200}

Usage:
======
    from neweats.shared.core.logging import logger, get_logger, log_context

    logger.info("User registered", user_id=user.user_id)

    db_logger = get_logger("neweats.db")
    db_logger.debug("Upsert executed", table="shopping_list")

    # Bind values to every log line emitted while handling this request
    log_context(request_id=request_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from neweats.config.settings import settings


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Development renders coloured console lines; every other environment
    renders JSON so the output can be shipped to a log collector.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context lives in contextvars, so each request handled by the event
    loop keeps its own values.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all context variables bound with log_context()."""
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

logger = get_logger("neweats")
