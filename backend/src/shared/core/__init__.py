"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from src.shared.core.logging import logger, get_logger
    from src.shared.core.exceptions import LinkbioException, NotFoundError

    logger.info("Link created", link_id=link_id)
"""

from src.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from src.shared.core.exceptions import (
    LinkbioException,
    NotFoundError,
    UserNotFoundError,
    LinkNotFoundError,
    ProfileNotFoundError,
    ValidationError,
    InvalidArgumentError,
    ConflictError,
    DuplicateResourceError,
    ServiceUnavailableError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "LinkbioException",
    "NotFoundError",
    "UserNotFoundError",
    "LinkNotFoundError",
    "ProfileNotFoundError",
    "ValidationError",
    "InvalidArgumentError",
    "ConflictError",
    "DuplicateResourceError",
    "ServiceUnavailableError",
]
