"""
Recipe Repository

Database operations for saved recipes.

Common Operations:
==================
- get()              → Fetch a recipe by provider id (inherited)
- create_if_absent() → Insert a recipe unless its id is already stored
"""

from typing import Optional, Sequence

from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from neweats.shared.repositories.base import BaseRepository
from neweats.shared.models.recipe import Recipe
from neweats.shared.core.exceptions import InternalError


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for Recipe database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Recipe, session, pk="recipe_id")

    async def create_if_absent(
        self,
        recipe_id: str,
        label: str,
        ingredients: Sequence[str],
        image: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Recipe:
        """
        Insert a recipe, keeping the stored row when the id already exists.

        Returns:
            The stored recipe (new or pre-existing)

        SQL Generated:
            INSERT INTO recipes (recipe_id, label, image, ingredients, url)
            VALUES (...) ON CONFLICT (recipe_id) DO NOTHING
        """
        statement = (
            insert(Recipe)
            .values(
                recipe_id=recipe_id,
                label=label,
                image=image,
                ingredients=list(ingredients),
                url=url,
            )
            .on_conflict_do_nothing(index_elements=[Recipe.recipe_id])
        )
        await self.session.execute(statement)

        recipe = await self.get(recipe_id)
        if recipe is None:
            raise InternalError(f"Recipe {recipe_id} missing after insert")
        return recipe
