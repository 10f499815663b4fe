"""
NewEats API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Request Flow:
=============
    request
       │
       ▼
    CORSMiddleware                 ← any origin by default (CORS_ORIGINS)
       │
    RequestLoggingMiddleware       ← binds request_id, logs status + duration
       │
    AuthenticationMiddleware       ← request.state.user = claims | None
       │
    router  /auth  /users  /shopping  /recipes  /health /ready /live
       │
    OwnerId dependency             ← 401 for strangers, 400 for non-numeric ids
       │
    handler → service → repository → PostgreSQL

    Any exception on the way back is rendered by setup_exception_handlers()
    as {"error": {"message": ..., "status": ...}}.

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection verified
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connection pool disposed

Usage:
======
    # Run with uvicorn
    uvicorn neweats.api.main:app --host 0.0.0.0 --port 3001 --reload

    # Or directly
    python -m neweats.api.main
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from neweats.config.settings import settings
from neweats.shared.db import init_db, close_db
from neweats.shared.core.logging import logger
from neweats.api.middleware import (
    AuthenticationMiddleware,
    RequestLoggingMiddleware,
    setup_exception_handlers,
)
from neweats.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database is reachable

    Shutdown:
    - Dispose of the connection pool
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting NewEats API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()

    logger.info("NewEats API started successfully", port=settings.PORT)

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down NewEats API")

    await close_db()

    logger.info("NewEats API shutdown complete")


def create_application() -> FastAPI:
    """Build the app: middleware, exception handlers, then routers."""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Recipe and shopping list backend",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    # Added innermost first: CORS ends up outermost
    app.add_middleware(AuthenticationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()


if __name__ == "__main__":
    uvicorn.run(
        "neweats.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )
