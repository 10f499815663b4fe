"""
Database Module

This module provides database connectivity and session management.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit/rollback/close handled)
        │  Passed to a Service, which builds its Repositories
        ▼
    Repository (UserRepository, RecipeRepository, RecipeUserRepository,
                ShoppingListRepository)
        │  SQL
        ▼
    PostgreSQL

Usage in FastAPI:
=================
    from fastapi import Depends
    from neweats.shared.db import get_db
    from neweats.shared.repositories import UserRepository

    @app.get("/users/{user_id}")
    async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
        return await UserRepository(db).get(user_id)
"""

from neweats.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
