"""
RecipeUser Repository

Database operations for the user ↔ recipe junction table.

Common Operations:
==================
- get_pair()           → Existing association, if any
- add()                → Associate (returns the existing row when present)
- remove()             → Disassociate
- list_user_recipes()  → A user's recipes, ordered by recipe id
"""

from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from neweats.shared.models.recipe import Recipe
from neweats.shared.models.recipe_user import RecipeUser


class RecipeUserRepository:
    """
    Repository for RecipeUser database operations.

    The junction has no single-column key, so this repository does not
    extend BaseRepository.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_pair(self, user_id: int, recipe_id: str) -> Optional[RecipeUser]:
        """
        SQL Generated:
            SELECT * FROM recipes_users WHERE recipe_id = '123abc' AND user_id = 1
        """
        result = await self.session.execute(
            select(RecipeUser)
            .where(and_(RecipeUser.recipe_id == recipe_id, RecipeUser.user_id == user_id))
            .limit(1)
        )
        return result.scalars().first()

    async def add(self, user_id: int, recipe_id: str) -> RecipeUser:
        """
        Associate a recipe with a user.

        Re-associating returns the existing row instead of a duplicate.
        """
        existing = await self.get_pair(user_id, recipe_id)
        if existing is not None:
            return existing

        link = RecipeUser(user_id=user_id, recipe_id=recipe_id)
        self.session.add(link)
        await self.session.flush()
        return link

    async def remove(self, user_id: int, recipe_id: str) -> bool:
        """
        Remove the association.

        Returns:
            True if a row was deleted, False if there was none
        """
        result = await self.session.execute(
            delete(RecipeUser)
            .where(and_(RecipeUser.recipe_id == recipe_id, RecipeUser.user_id == user_id))
            .returning(RecipeUser.recipe_id)
        )
        return len(result.all()) > 0

    async def list_user_recipes(self, user_id: int) -> list[Recipe]:
        """
        Get the recipes a user saved.

        SQL Generated:
            SELECT r.* FROM recipes_users ru
            JOIN recipes r ON ru.recipe_id = r.recipe_id
            WHERE ru.user_id = 1
            ORDER BY r.recipe_id
        """
        result = await self.session.execute(
            select(Recipe)
            .join(RecipeUser, RecipeUser.recipe_id == Recipe.recipe_id)
            .where(RecipeUser.user_id == user_id)
            .order_by(Recipe.recipe_id)
        )
        return list(result.scalars().all())
