"""
User Service

The user directory: login checks, registration and profile maintenance.

Service Pattern:
================
    Handler → UserService → UserRepository → users table
                   ↘ SecurityUtils (bcrypt)

Every method returns a UserProfile, which has no password field, so
digests never reach a handler.

Authorization is NOT checked here. update() will set whatever fields it
is given, including a new password; handlers must have verified the
caller owns the account and validated the body before calling it.
"""

from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from neweats.shared.core.exceptions import (
    DuplicateFederatedIdError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from neweats.shared.core.logging import logger
from neweats.shared.models.user import User
from neweats.shared.repositories.user_repository import UserRepository
from neweats.shared.schemas.user import UserProfile
from neweats.shared.utils.security import SecurityUtils
from neweats.shared.utils.sql import UNIQUE_VIOLATION, sqlstate


def to_profile(user: User) -> UserProfile:
    """Project an ORM row onto the digest-free profile."""
    return UserProfile.model_validate(user)


class UserService:
    """
    Service for user directory business logic.

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def authenticate(self, username: str, password: str) -> UserProfile:
        """
        Check a username and password.

        Unknown usernames and wrong passwords raise the same error.

        Raises:
            InvalidCredentialsError: If the credentials do not match a user
        """
        user = await self.repo.get_by_username(username)

        if user is not None and SecurityUtils.verify_password(password, user.password):
            return to_profile(user)

        logger.info("Password login rejected")
        raise InvalidCredentialsError()

    async def authenticate_with_google(self, google_id: str) -> UserProfile:
        """
        Look up the user registered with a Google account id.

        The id itself is trusted; verifying it with Google is the client's job.

        Raises:
            InvalidCredentialsError: If no user has that id
        """
        user = await self.repo.get_by_google_id(google_id)
        if user is None:
            raise InvalidCredentialsError("Invalid Google ID")
        return to_profile(user)

    # ═══════════════════════════════════════════════════════════════════════════
    # REGISTRATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def register(
        self,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> UserProfile:
        """
        Register a password account.

        Raises:
            DuplicateUsernameError: If the username is taken
        """
        if await self.repo.username_exists(username):
            raise DuplicateUsernameError(username)

        try:
            user = await self.repo.create(
                username=username,
                password=SecurityUtils.hash_password(password),
                first_name=first_name,
                last_name=last_name,
                email=email,
            )
        except IntegrityError as e:
            if sqlstate(e) != UNIQUE_VIOLATION:
                raise
            raise DuplicateUsernameError(username) from e

        logger.info("User registered", user_id=user.user_id)
        return to_profile(user)

    async def register_with_google(
        self,
        first_name: str,
        last_name: str,
        email: str,
        google_id: str,
    ) -> UserProfile:
        """
        Register a Google account; the user has no username or password.

        Raises:
            DuplicateFederatedIdError: If the Google id is already registered
        """
        if await self.repo.google_id_exists(google_id):
            raise DuplicateFederatedIdError(google_id)

        try:
            user = await self.repo.create(
                first_name=first_name,
                last_name=last_name,
                email=email,
                google_id=google_id,
            )
        except IntegrityError as e:
            if sqlstate(e) != UNIQUE_VIOLATION:
                raise
            raise DuplicateFederatedIdError(google_id) from e

        logger.info("User registered with Google", user_id=user.user_id)
        return to_profile(user)

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, user_id: int) -> UserProfile:
        """
        Raises:
            UserNotFoundError: If no user has that id
        """
        user = await self.repo.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return to_profile(user)

    async def update(self, user_id: int, data: Mapping[str, Any]) -> UserProfile:
        """
        Partially update a user.

        Args:
            user_id: Id of the user to update
            data: Request field names (firstName, lastName, password, email)
                mapped to new values; only these fields change

        Returns:
            The updated profile

        Raises:
            EmptyInputError: If data is empty
            UserNotFoundError: If no user has that id
        """
        changes = dict(data)
        if changes.get("password"):
            changes["password"] = SecurityUtils.hash_password(changes["password"])

        user = await self.repo.update_partial(user_id, changes)
        if user is None:
            raise UserNotFoundError(user_id)

        logger.info("User updated", user_id=user_id, fields=sorted(changes))
        return to_profile(user)

    async def remove(self, user_id: int) -> None:
        """
        Delete a user; saved recipes and shopping list go with it.

        Raises:
            UserNotFoundError: If no user has that id
        """
        if not await self.repo.delete(user_id):
            raise UserNotFoundError(user_id)

        logger.info("User deleted", user_id=user_id)
