"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with lookups by login identity and the partial
profile update.

Common Operations:
==================
- get_by_username()    → Password login lookup
- get_by_google_id()   → Google login lookup
- username_exists()    → Registration duplicate check
- google_id_exists()   → Google registration duplicate check
- update_partial()     → UPDATE only the supplied fields

Partial Update:
===============
    await repo.update_partial(7, {"firstName": "Ann", "email": "ann@x.io"})

    UPDATE users
    SET "first_name" = $1, "email" = $2
    WHERE user_id = $3
    RETURNING user_id
"""

from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from neweats.shared.repositories.base import BaseRepository
from neweats.shared.models.user import User
from neweats.shared.utils.sql import sql_for_partial_update


# Request field names whose column is named differently
USER_COLUMN_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
}


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session, pk="user_id")

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        SQL Generated:
            SELECT * FROM users WHERE username = 'u1'
        """
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_by_google_id(self, google_id: str) -> Optional[User]:
        """
        Get user by Google account id.

        SQL Generated:
            SELECT * FROM users WHERE google_id = '123abc'
        """
        result = await self.session.execute(select(User).where(User.google_id == google_id))
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        """Check if a username is already registered."""
        return await self.get_by_username(username) is not None

    async def google_id_exists(self, google_id: str) -> bool:
        """Check if a Google account id is already registered."""
        return await self.get_by_google_id(google_id) is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update_partial(self, user_id: int, data: Mapping[str, Any]) -> Optional[User]:
        """
        Update only the supplied fields of a user.

        Keys are request field names (firstName, lastName, email, password);
        USER_COLUMN_MAP translates the ones whose column differs. Values are
        written as given, so a password must already be hashed.

        Args:
            user_id: Id of the user to update
            data: Non-empty mapping of fields to change

        Returns:
            The updated user, or None if no row has that id

        Raises:
            EmptyInputError: If data is empty
        """
        update = sql_for_partial_update(data, USER_COLUMN_MAP)
        statement = (
            f"UPDATE users SET {update.set_cols} "
            f"WHERE user_id = {update.next_placeholder} "
            "RETURNING user_id"
        )

        # Driver-level execution keeps the $n placeholders as written
        connection = await self.session.connection()
        result = await connection.exec_driver_sql(statement, (*update.values, user_id))
        if result.first() is None:
            return None

        return await self.get(user_id)
