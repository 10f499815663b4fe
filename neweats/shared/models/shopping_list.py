"""
ShoppingList Entity Model

At most one row per user, holding the ingredient lines the user still has
to buy. The row is created lazily by the first add or replace.

SAMPLE SHOPPING_LIST RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ list_id          │ 1                                                         │
│ user_id          │ 1 (unique)                                                │
│ ingredients      │ {"i1", "i2", "i3"}                                        │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from neweats.shared.models.base import Base


class ShoppingList(Base):
    """
    ShoppingList model.

    user_id is unique; it is the conflict target of the upserts in
    ShoppingListRepository.
    """

    __tablename__ = "shopping_list"

    list_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE", name="fk_user_shopping_list"),
        unique=True,
        nullable=True,
    )

    ingredients: Mapped[Optional[list[str]]] = mapped_column(ARRAY(Text), nullable=True)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<ShoppingList(user_id={self.user_id}, items={len(self.ingredients or [])})>"
