"""
User Schemas

Request/response models for user and authentication endpoints.

JSON bodies use camelCase (firstName, googleId); Python attributes are
snake_case and carry the JSON name as their alias.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from neweats.shared.schemas.common import BaseSchema, RequestSchema


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════


class UserLogin(RequestSchema):
    """Password login body for POST /auth/token."""

    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1)


class GoogleLogin(BaseModel):
    """
    Google login body for POST /auth/token.

    The client may send the rest of the Google profile along; only the
    account id is used.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    google_id: str = Field(alias="googleId", min_length=1)


class UserRegister(RequestSchema):
    """Schema for POST /auth/register."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=20)
    first_name: str = Field(alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(alias="lastName", min_length=1, max_length=30)
    email: EmailStr


class GoogleRegister(RequestSchema):
    """Schema for POST /auth/googleregister."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    first_name: str = Field(alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(alias="lastName", min_length=1, max_length=30)
    email: EmailStr
    google_id: str = Field(alias="googleId", min_length=1)


class UserUpdate(RequestSchema):
    """
    Schema for PATCH /users/{user_id}.

    Every field is optional; only the keys present in the body are
    updated (dump with exclude_unset=True, by_alias=True).
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName", min_length=1, max_length=30)
    last_name: Optional[str] = Field(default=None, alias="lastName", min_length=1, max_length=30)
    password: Optional[str] = Field(default=None, min_length=5, max_length=20)
    email: Optional[EmailStr] = None

    @model_validator(mode="after")
    def reject_nulls(self) -> "UserUpdate":
        """A key that is present must carry a value; null cannot clear a column."""
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} must not be null")
        return self


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class UserResponse(BaseSchema):
    """Public profile; never includes the password digest."""

    user_id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str


class UserEnvelope(BaseModel):
    """Body of GET/PATCH /users/{user_id}."""

    user: UserResponse


class TokenResponse(BaseModel):
    """Body of the /auth endpoints."""

    token: str


class UserProfile(BaseSchema):
    """
    A user as returned by the user directory.

    Built from the ORM row; the password digest has no field here, so it
    cannot leak past the service layer.
    """

    user_id: int
    username: Optional[str] = None
    first_name: str
    last_name: str
    email: str
    google_id: Optional[str] = None
