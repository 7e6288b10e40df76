"""
Logging Configuration

structlog on top of the stdlib logging module, configured once on import.

Renderers:
==========
APP_ENV=development → coloured console lines:
    2026-10-19T10:30:00Z [info     ] Favorite toggled   component_id=4c1f... is_favorite=True user_id=9a2e...

anything else → one JSON object per line:
    {"event": "Favorite toggled", "level": "info", "user_id": "9a2e...", ...}

Request Context:
================
Values bound with log_context() live in a contextvar, so they follow the
request through every await. The request middleware binds method and path,
the auth gate adds user_id via bind_request_user(), and the middleware
clears everything when the response is out.

Passwords and tokens are never passed to a logger.

Usage:
======
    from tailblocks.shared.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Component created", component_id=str(component.id))
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from tailblocks.config.settings import settings


def setup_logging() -> None:
    """Route structlog through stdlib logging on stdout at LOG_LEVEL."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
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
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key-values to every later log line of the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def bind_request_user(user_id: str) -> None:
    log_context(user_id=user_id)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("tailblocks")
