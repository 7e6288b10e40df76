"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from tailblocks.shared.core.logging import logger, get_logger
    from tailblocks.shared.core.exceptions import TailblocksException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from tailblocks.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    bind_request_user,
    clear_log_context,
)
from tailblocks.shared.core.exceptions import (
    TailblocksException,
    AuthenticationError,
    NotFoundError,
    UserNotFoundError,
    ComponentNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "bind_request_user",
    "clear_log_context",
    # Exceptions
    "TailblocksException",
    "AuthenticationError",
    "NotFoundError",
    "UserNotFoundError",
    "ComponentNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
]
