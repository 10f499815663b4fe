"""
Shopping List Service

Business logic for the per-user shopping list.

List Lifecycle:
===============
    absent ──(add_ingredients | replace_list)──→ populated
    populated ──(add_ingredients | replace_list)──→ populated

A list only disappears when its user is deleted (foreign key cascade).
Reading a user's absent list yields an empty list, not an error.
"""

from typing import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from neweats.shared.core.exceptions import UserNotFoundError
from neweats.shared.core.logging import logger
from neweats.shared.repositories.shopping_list_repository import ShoppingListRepository
from neweats.shared.repositories.user_repository import UserRepository
from neweats.shared.utils.sql import FOREIGN_KEY_VIOLATION, sqlstate


REPLACED_MESSAGE = "Shopping list updated successfully."


class ShoppingListService:
    """
    Service for shopping list business logic.

    Attributes:
        session: Database session
        repo: ShoppingListRepository instance
        users: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = ShoppingListRepository(session)
        self.users = UserRepository(session)

    async def get_list(self, user_id: int) -> list[str]:
        """
        Get a user's ingredients in stored order.

        Returns:
            The stored ingredients, or [] if the user has no list yet
        """
        ingredients = await self.repo.get_ingredients(user_id)
        return ingredients if ingredients is not None else []

    async def add_ingredients(self, user_id: int, ingredients: Sequence[str]) -> list[str]:
        """
        Merge ingredients into a user's list.

        Values already stored are skipped; the rest are appended in the
        given order. Calling this twice with the same values leaves the
        list as after the first call.

        Returns:
            The full list after the merge

        Raises:
            UserNotFoundError: If the user does not exist
        """
        if not await self.users.exists(user_id):
            raise UserNotFoundError(user_id)

        await self.repo.merge_append(user_id, ingredients)
        logger.info("Shopping list merged", user_id=user_id, submitted=len(ingredients))

        return await self.get_list(user_id)

    async def replace_list(self, user_id: int, ingredients: Sequence[str]) -> dict[str, str]:
        """
        Overwrite a user's list with exactly the given ingredients.

        No merging and no de-duplication. Returns a confirmation, not the
        list; callers that need the contents read them with get_list().

        Raises:
            UserNotFoundError: If the user does not exist
        """
        try:
            await self.repo.replace(user_id, ingredients)
        except IntegrityError as e:
            # shopping_list.user_id references users.user_id
            if sqlstate(e) != FOREIGN_KEY_VIOLATION:
                raise
            raise UserNotFoundError(user_id) from e

        logger.info("Shopping list replaced", user_id=user_id, size=len(ingredients))
        return {"message": REPLACED_MESSAGE}
