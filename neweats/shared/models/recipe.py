"""
Recipe Entity Model

A recipe saved from the external recipe search. The key is the id the
search provider assigned, not a surrogate.

SAMPLE RECIPE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ recipe_id    │ "123abc"                                                      │
│ label        │ "Chicken Vesuvio"                                             │
│ image        │ "https://.../chicken.jpg"                                     │
│ ingredients  │ {"1/2 cup olive oil", "5 cloves garlic"}                      │
│ url          │ "https://example.com/chicken-vesuvio"                         │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional

from sqlalchemy import Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from neweats.shared.models.base import Base


class Recipe(Base):
    """
    Recipe model.

    Rows are created on first save and never updated afterwards.
    """

    __tablename__ = "recipes"

    recipe_id: Mapped[str] = mapped_column(Text, primary_key=True)

    label: Mapped[str] = mapped_column(Text, nullable=False)

    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Ordered ingredient lines as shown by the provider
    ingredients: Mapped[list[str]] = mapped_column(ARRAY(Text), nullable=False)

    url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Recipe(recipe_id={self.recipe_id}, label={self.label})>"
