"""
Linkbio API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
    Request
      │
      ▼
    CORS Middleware
      │
      ▼
    Request Logging Middleware   (request_id bound to the log context)
      │
      ▼
    Routers: Health │ Users │ Links │ Profiles
      │
      ▼
    Services (per request, around one DB session)
      │
      ▼
    Error Handlers               (LinkbioException → JSON error body)

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection checked
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database pool disposed

Usage:
======
    # Run with uvicorn
    uvicorn src.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from src.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config.settings import settings
from src.shared.db import init_db, close_db
from src.shared.core.logging import logger
from src.api.middleware import RequestLoggingMiddleware, setup_exception_handlers
from src.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database is reachable

    Shutdown:
    - Dispose the connection pool
    """
    logger.info(
        "Starting Linkbio API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()
    logger.info("Linkbio API started successfully")

    yield

    logger.info("Shutting down Linkbio API")
    await close_db()
    logger.info("Linkbio API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request logging)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Link-in-bio profiles with ordered links and click counts",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    # Added last runs first: CORS wraps request logging
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
