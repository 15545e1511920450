"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /users                  → Creator registration, updates, link ordering
    /links                  → Link CRUD and click tracking
    /profiles               → Public profile and click-through redirect

Usage:
======
    from src.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from src.api.handlers import (
    user_handler,
    link_handler,
    profile_handler,
    health_handler,
)


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

    # Creator endpoints
    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
    )

    # Link endpoints
    app.include_router(
        link_handler.router,
        prefix="/links",
        tags=["Links"],
    )

    # Public profile endpoints
    app.include_router(
        profile_handler.router,
        prefix="/profiles",
        tags=["Profiles"],
    )
