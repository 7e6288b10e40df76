"""
Tailblocks API Application

Builds the FastAPI app: routers, middleware, exception handlers and the
database lifecycle.

Request Path:
=============
    CORS
      └── request context (log binding, "Request completed" line)
            └── router: /health /ready /live, /api/auth, /api/users, /api/components
                  └── dependencies: DbSession, auth gate, catalog query, services
    exceptions → setup_exception_handlers → {"error": {...}} envelope

Lifecycle:
==========
    startup   → init_db(): SELECT 1, refuse to start if the database is down
    shutdown  → close_db(): dispose the connection pool

Usage:
======
    tailblocks-api                                   # HOST:PORT from settings
    uvicorn tailblocks.api.main:app --port 3000 --reload

    from tailblocks.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tailblocks.config.settings import settings
from tailblocks.shared.db import init_db, close_db
from tailblocks.shared.core.logging import logger
from tailblocks.api.middleware import setup_exception_handlers, setup_request_context
from tailblocks.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(
        "API starting",
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
    await init_db()

    yield

    await close_db()
    logger.info("API stopped")


def create_application() -> FastAPI:
    """
    Assemble the FastAPI application.

    Interactive docs (/docs, /redoc) are only served with DEBUG on.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Marketplace for reusable UI components",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    setup_request_context(app)

    # Outermost, so preflight requests never reach the routers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)
    register_routes(app)

    return app


app = create_application()


def serve() -> None:
    """Entry point of `tailblocks-api`."""
    uvicorn.run(
        "tailblocks.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development and settings.DEBUG,
    )
