"""
Request Context Middleware

Scopes the structlog context to a single request and logs its outcome.
"""

import time

from fastapi import FastAPI, Request

from tailblocks.shared.core.logging import clear_log_context, log_context, logger


def setup_request_context(app: FastAPI) -> None:
    """
    Register the request context middleware.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        clear_log_context()
        log_context(method=request.method, path=request.url.path)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_log_context()
