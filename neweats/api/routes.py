"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /auth                   → Login and registration (public)
    /users                  → Profiles (owner-only)
    /shopping               → Shopping lists (owner-only)
    /recipes                → Saved recipes (owner-only) and link checks

Usage:
======
    from neweats.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from neweats.api.handlers import (
    auth_handler,
    user_handler,
    shopping_handler,
    recipe_handler,
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

    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
    )

    app.include_router(
        user_handler.router,
        prefix="/users",
        tags=["Users"],
    )

    app.include_router(
        shopping_handler.router,
        prefix="/shopping",
        tags=["Shopping"],
    )

    app.include_router(
        recipe_handler.router,
        prefix="/recipes",
        tags=["Recipes"],
    )
