"""
User Entity Model

Represents an application user registered either with a username and
password or with a Google account id.

SAMPLE USER RECORDS:
┌──────────────────────────────────────────────────────────────────────────────┐
│ user_id     │ 1                           │ 2                               │
│ username    │ "u1"                        │ NULL                            │
│ password    │ "$2b$12$..."                │ NULL                            │
│ first_name  │ "U1F"                       │ "U2F"                           │
│ last_name   │ "U1L"                       │ "U2L"                           │
│ email       │ "user1@user.com"            │ "user2@user.com"                │
│ google_id   │ NULL                        │ "123abc"                        │
└──────────────────────────────────────────────────────────────────────────────┘

Deleting a user cascades (in the database) to the user's recipe
associations and shopping list.
"""

from typing import Optional

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from neweats.shared.models.base import Base


class User(Base):
    """
    User model.

    Attributes:
        user_id: Surrogate key assigned by the database (SERIAL)
        username: Login name, unique when present
        password: Bcrypt digest, NULL for Google accounts
        first_name: Given name
        last_name: Family name
        email: Contact address; must contain "@" after the first character
        google_id: Google account id, unique when present
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("position('@' IN email) > 1", name="email_check"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[Optional[str]] = mapped_column(
        String(25),
        unique=True,
        nullable=True,
    )

    # Bcrypt digest; never leaves the repository layer
    password: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    google_id: Mapped[Optional[str]] = mapped_column(
        Text,
        unique=True,
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    first_name: Mapped[str] = mapped_column(Text, nullable=False)

    last_name: Mapped[str] = mapped_column(Text, nullable=False)

    email: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(user_id={self.user_id}, username={self.username})>"
