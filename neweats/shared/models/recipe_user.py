"""
RecipeUser Junction Model

Links users to the recipes they saved (many-to-many).

SAMPLE RECIPES_USERS RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ user_id          │ 1                                                         │
│ recipe_id        │ "123abc"                                                  │
└──────────────────────────────────────────────────────────────────────────────┘

The table has no primary key or unique constraint; pairs stay unique
because RecipeUserRepository checks before inserting. The mapper treats
(user_id, recipe_id) as the identity.
"""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from neweats.shared.models.base import Base


class RecipeUser(Base):
    """
    RecipeUser model - one saved recipe of one user.

    Both foreign keys cascade on delete.
    """

    __tablename__ = "recipes_users"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    recipe_id: Mapped[str] = mapped_column(
        Text,
        ForeignKey("recipes.recipe_id", ondelete="CASCADE"),
        nullable=True,
    )

    __mapper_args__ = {"primary_key": [user_id, recipe_id]}

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<RecipeUser(user_id={self.user_id}, recipe_id={self.recipe_id})>"
