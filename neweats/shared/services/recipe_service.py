"""
Recipe Service

Saved recipes and their association with users.

Saving a recipe for a user is two steps in one transaction:

    1. RecipeRepository.create_if_absent()   ← recipe row (kept if present)
    2. RecipeUserRepository.add()            ← user ↔ recipe link (idempotent)

Recipes are never updated or deleted through the API; removing a saved
recipe only removes the link.
"""

from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from neweats.shared.core.exceptions import (
    RecipeAssociationNotFoundError,
    RecipeNotFoundError,
)
from neweats.shared.core.logging import logger
from neweats.shared.models.recipe import Recipe
from neweats.shared.models.recipe_user import RecipeUser
from neweats.shared.repositories.recipe_repository import RecipeRepository
from neweats.shared.repositories.recipe_user_repository import RecipeUserRepository


class RecipeService:
    """
    Service for recipe business logic.

    Attributes:
        session: Database session
        recipes: RecipeRepository instance
        links: RecipeUserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.recipes = RecipeRepository(session)
        self.links = RecipeUserRepository(session)

    async def create_recipe(
        self,
        recipe_id: str,
        label: str,
        ingredients: Sequence[str],
        image: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Recipe:
        """
        Store a recipe unless its id is already stored.

        Returns:
            The stored row; for a known id that is the existing row, not
            the submitted data
        """
        return await self.recipes.create_if_absent(
            recipe_id=recipe_id,
            label=label,
            ingredients=ingredients,
            image=image,
            url=url,
        )

    async def get_recipe(self, recipe_id: str) -> Recipe:
        """
        Raises:
            RecipeNotFoundError: If the recipe is not stored
        """
        recipe = await self.recipes.get(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    async def add_to_user(self, user_id: int, recipe_id: str) -> RecipeUser:
        """Link a stored recipe to a user; linking twice is a no-op."""
        return await self.links.add(user_id, recipe_id)

    async def save_for_user(
        self,
        user_id: int,
        recipe_id: str,
        label: str,
        ingredients: Sequence[str],
        image: Optional[str] = None,
        url: Optional[str] = None,
    ) -> Recipe:
        """
        Store a recipe and link it to a user.

        Returns:
            The stored recipe
        """
        recipe = await self.create_recipe(
            recipe_id=recipe_id,
            label=label,
            ingredients=ingredients,
            image=image,
            url=url,
        )
        await self.add_to_user(user_id, recipe_id)

        logger.info("Recipe saved", user_id=user_id, recipe_id=recipe_id)
        return recipe

    async def remove_from_user(self, user_id: int, recipe_id: str) -> None:
        """
        Unlink a recipe from a user.

        Raises:
            RecipeAssociationNotFoundError: If the user had not saved it
        """
        if not await self.links.remove(user_id, recipe_id):
            raise RecipeAssociationNotFoundError(recipe_id, user_id)

        logger.info("Recipe removed", user_id=user_id, recipe_id=recipe_id)

    async def find_all(self, user_id: int) -> list[Recipe]:
        """Get the recipes a user saved, ordered by recipe id."""
        return await self.links.list_user_recipes(user_id)
