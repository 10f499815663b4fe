"""
Database Dependency

FastAPI dependency for database sessions.

This module provides the get_db dependency that yields async database sessions
to route handlers. The session is committed when the handler returns and
rolled back if it raises.

Usage:
======
    from neweats.api.dependencies.database import DbSession

    @router.get("/{user_id}")
    async def get_user(user_id: int, db: DbSession):
        return await UserService(db).get(user_id)
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from neweats.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
