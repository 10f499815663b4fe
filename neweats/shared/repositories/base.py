"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by primary key
- exists(id)     → Check if record exists
- create()       → Insert new record
- delete(id)     → Hard delete record

Primary keys differ between tables (users.user_id is an integer,
recipes.recipe_id is provider text), so subclasses name their key column.

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[User]):
        def __init__(self, session):
            super().__init__(User, session, pk="user_id")

    user = await UserRepository(db).get(1)  # Returns Optional[User]

flush() vs commit():
====================
Repository methods only flush(); the commit happens once per request in
get_db(), so every statement of a request shares one transaction.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from neweats.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
        pk: The primary key column attribute
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession, pk: str) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Recipe)
            session: Async database session from get_db()
            pk: Name of the primary key attribute on the model
        """
        self.model = model
        self.session = session
        self.pk = getattr(model, pk)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: Any) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Args:
            record_id: Primary key value

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE user_id = 1
        """
        result = await self.session.execute(
            select(self.model)
            .where(self.pk == record_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def exists(self, record_id: Any) -> bool:
        """
        Check if a record exists without loading it.

        SQL Generated:
            SELECT COUNT(*) FROM users WHERE user_id = 1
        """
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.pk == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Flushes so database-generated values (serial ids) are available
        on the returned instance.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance

        SQL Generated:
            INSERT INTO users (username, password, ...) VALUES (...)
            RETURNING user_id
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: Any) -> bool:
        """
        Hard delete a record by primary key.

        Issued as a single DELETE so foreign keys cascade in the database.

        Returns:
            True if a row was deleted, False if not found

        SQL Generated:
            DELETE FROM users WHERE user_id = 1 RETURNING user_id
        """
        result = await self.session.execute(
            delete(self.model).where(self.pk == record_id).returning(self.pk)
        )
        return result.scalar_one_or_none() is not None
