"""
Authentication Handler

Handles login and registration endpoints. Every endpoint answers with
{"token": "<jwt>"}.

ARCHITECTURE:
=============
    Handler → AuthService → UserService → UserRepository → users table
                   ↘ create_token (PyJWT)

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Failures are raised as NewEatsException subclasses and rendered by the
global exception handlers, so nothing here catches service errors.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from neweats.api.dependencies.services import get_auth_service
from neweats.shared.schemas.user import (
    GoogleLogin,
    GoogleRegister,
    TokenResponse,
    UserLogin,
    UserRegister,
)
from neweats.shared.services.auth_service import AuthService


router = APIRouter()


@router.post("/token", response_model=TokenResponse)
async def login(
    body: dict[str, Any] = Body(...),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange credentials for a token.

    A body carrying googleId is a Google login; anything else must be a
    username/password login.

    Raises:
        400: If the body matches neither shape
        401: If the credentials are invalid
    """
    if "googleId" in body:
        credentials = GoogleLogin.model_validate(body)
        _, token = await auth_service.login_google_user(credentials.google_id)
    else:
        credentials = UserLogin.model_validate(body)
        _, token = await auth_service.login_user(credentials.username, credentials.password)

    return TokenResponse(token=token)


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a password account and return its first token.

    Raises:
        400: If the body is invalid or the username is taken
    """
    _, token = await auth_service.register_user(
        username=user_data.username,
        password=user_data.password,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
    )
    return TokenResponse(token=token)


@router.post(
    "/googleregister",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def google_register(
    user_data: GoogleRegister,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a Google account and return its first token.

    Raises:
        400: If the body is invalid or the Google id is already registered
    """
    _, token = await auth_service.register_google_user(
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        google_id=user_data.google_id,
    )
    return TokenResponse(token=token)
