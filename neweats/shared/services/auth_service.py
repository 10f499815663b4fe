"""
Authentication Service

Issues bearer tokens for logins and registrations.

Service Pattern:
================
    auth_handler → AuthService → UserService (directory)
                        ↘ create_token (PyJWT)

Usage:
======
    from neweats.shared.services.auth_service import AuthService

    service = AuthService(db)
    user, token = await service.login_user("u1", "password1")
"""

from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from neweats.shared.schemas.user import UserProfile
from neweats.shared.services.user_service import UserService
from neweats.shared.utils.security import create_token


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - Password and Google logins
    - Password and Google registrations
    - JWT token generation

    Attributes:
        session: Database session
        users: UserService instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.users = UserService(session)

    async def login_user(self, username: str, password: str) -> Tuple[UserProfile, str]:
        """
        Authenticate with username and password.

        Raises:
            InvalidCredentialsError: If credentials are invalid
        """
        user = await self.users.authenticate(username, password)
        return user, create_token(user)

    async def login_google_user(self, google_id: str) -> Tuple[UserProfile, str]:
        """
        Authenticate with a Google account id.

        Raises:
            InvalidCredentialsError: If no user has that Google id
        """
        user = await self.users.authenticate_with_google(google_id)
        return user, create_token(user)

    async def register_user(
        self,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> Tuple[UserProfile, str]:
        """
        Register a password account and sign its first token.

        Raises:
            DuplicateUsernameError: If the username is taken
        """
        user = await self.users.register(
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name,
            email=email,
        )
        return user, create_token(user)

    async def register_google_user(
        self,
        first_name: str,
        last_name: str,
        email: str,
        google_id: str,
    ) -> Tuple[UserProfile, str]:
        """
        Register a Google account and sign its first token.

        Raises:
            DuplicateFederatedIdError: If the Google id is already registered
        """
        user = await self.users.register_with_google(
            first_name=first_name,
            last_name=last_name,
            email=email,
            google_id=google_id,
        )
        return user, create_token(user)
