"""
Security Utilities

Password hashing and JWT token management.

Password Hashing:
=================
Uses bcrypt (through passlib) with the work factor from
settings.BCRYPT_WORK_FACTOR.

JWT Tokens:
===========
Uses PyJWT. Tokens carry {firstName, user_id, iat} and, when an expiry is
configured, exp. user_id is always serialized as a string because the
ownership check compares it with the raw path segment.

Usage:
======
    from neweats.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("password1")
    SecurityUtils.verify_password("password1", hashed)  # True

    token = SecurityUtils.create_access_token(
        data={"firstName": "Ann", "user_id": "7"},
        secret_key=settings.SECRET_KEY,
    )
    claims = SecurityUtils.claims_from_authorization(f"Bearer {token}", settings.SECRET_KEY)
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext

from neweats.config.settings import settings


BEARER_PREFIX = "bearer "


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_WORK_FACTOR,
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - JWT token creation and validation
    - Bearer header parsing that never raises
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt and work factor)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
        """
        Verify password against bcrypt hash.

        Accounts registered through Google have no digest; they never match.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise
        """
        if not hashed_password:
            return False
        return pwd_context.verify(plain_password, hashed_password)

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (firstName, user_id)
            secret_key: Secret key for signing
            expires_delta: Token lifetime; None issues a token without exp
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)

        to_encode["iat"] = now
        if expires_delta:
            to_encode["exp"] = now + expires_delta

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")

    @staticmethod
    def claims_from_authorization(
        authorization: Optional[str],
        secret_key: str,
        algorithm: str = "HS256",
    ) -> Optional[dict[str, Any]]:
        """
        Extract claims from an "Authorization: Bearer <token>" header value.

        Missing headers, other schemes and tokens that fail verification
        all yield None; rejecting the request is left to the route's
        authorization dependency.

        Args:
            authorization: Raw Authorization header value, if any
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded claims, or None
        """
        if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
            return None

        token = authorization[len(BEARER_PREFIX):].strip()
        if not token:
            return None

        try:
            return SecurityUtils.decode_access_token(token, secret_key, algorithm)
        except ValueError:
            return None


def create_token(user: Any) -> str:
    """
    Sign a token for a user profile.

    Args:
        user: Anything exposing user_id and first_name (ORM row or profile)

    Returns:
        Encoded JWT carrying {firstName, user_id}
    """
    expires_delta = None
    if settings.ACCESS_TOKEN_EXPIRE_MINUTES > 0:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    return SecurityUtils.create_access_token(
        data={"firstName": user.first_name, "user_id": str(user.user_id)},
        secret_key=settings.SECRET_KEY,
        expires_delta=expires_delta,
        algorithm=settings.JWT_ALGORITHM,
    )
