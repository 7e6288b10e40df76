"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Probes
    /api/auth               → Registration, login
    /api/users              → Current user profile
    /api/components         → Catalog and favorites

Usage:
======
    from tailblocks.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from tailblocks.api.handlers import (
    auth_handler,
    component_handler,
    health_handler,
    user_handler,
)
from tailblocks.shared.schemas.common import ErrorResponse


API_PREFIX = "/api"

# Documented error envelope for every /api route
ERROR_RESPONSES = {
    status_code: {"model": ErrorResponse} for status_code in (400, 401, 404, 500)
}


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix=f"{API_PREFIX}/auth",
        tags=["Authentication"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        user_handler.router,
        prefix=f"{API_PREFIX}/users",
        tags=["Users"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        component_handler.router,
        prefix=f"{API_PREFIX}/components",
        tags=["Components"],
        responses=ERROR_RESPONSES,
    )
