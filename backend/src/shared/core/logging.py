"""
Logging Configuration

Structured logging setup using structlog.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Link created     link_id=550e8400-... position=2

Production (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Link created", "position": 2}

Usage:
======
    from src.shared.core.logging import logger, get_logger, log_context

    logger.info("Link created", link_id=link_id, position=position)

    db_logger = get_logger("linkbio.db")
    db_logger.debug("Pool disposed")

    # Bind request-scoped values (done by the request logging middleware)
    log_context(request_id=request_id, path=path)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from src.config.settings import settings


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Development gets colored console output, every other environment
    gets one JSON object per line.

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL),
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
        name: Logger name, defaults to the root logger if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls in this context.

    Args:
        **kwargs: Key-value pairs to add to log context

    Example:
        log_context(request_id="abc-123")
        logger.info("Reorder applied")  # Includes request_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop every value bound with log_context()."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("linkbio")
