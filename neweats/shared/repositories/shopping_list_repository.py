"""
Shopping List Repository

Database operations for the per-user shopping list.

Both writes are single-statement upserts on the unique user_id, so two
requests for the same user cannot lose each other's update between a
read and an insert.

Merge vs. Replace:
==================
    stored            merge_append(["i1", "i2"])     replace(["i3"])
    ─────────────     ──────────────────────────     ───────────────
    (no row)          ["i1", "i2"]                   ["i3"]
    ["i1"]            ["i1", "i2"]                   ["i3"]
    ["i1", "i2"]      ["i1", "i2"]  (unchanged)      ["i3"]

merge_append keeps the stored order and appends, in request order, the
new values not already stored. Values repeated inside one request are only
compared against the stored array, not against each other.
"""

from typing import Optional, Sequence

from sqlalchemy import Text, bindparam, select, text
from sqlalchemy.dialects.postgresql import ARRAY, insert
from sqlalchemy.ext.asyncio import AsyncSession

from neweats.shared.repositories.base import BaseRepository
from neweats.shared.models.shopping_list import ShoppingList


MERGE_APPEND_SQL = text(
    """
    INSERT INTO shopping_list (user_id, ingredients)
    VALUES (:user_id, :ingredients)
    ON CONFLICT (user_id) DO UPDATE
    SET ingredients = COALESCE(shopping_list.ingredients, ARRAY[]::text[]) || ARRAY(
        SELECT new_items.item
        FROM unnest(excluded.ingredients) WITH ORDINALITY AS new_items(item, position)
        WHERE NOT (new_items.item = ANY(COALESCE(shopping_list.ingredients, ARRAY[]::text[])))
        ORDER BY new_items.position
    )
    WHERE NOT (excluded.ingredients <@ COALESCE(shopping_list.ingredients, ARRAY[]::text[]))
    """
).bindparams(bindparam("ingredients", type_=ARRAY(Text)))


class ShoppingListRepository(BaseRepository[ShoppingList]):
    """Repository for ShoppingList database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ShoppingList, session, pk="list_id")

    async def get_ingredients(self, user_id: int) -> Optional[list[str]]:
        """
        Get the stored ingredient array of a user.

        Returns:
            The stored array, or None if the user has no list row yet

        SQL Generated:
            SELECT ingredients FROM shopping_list WHERE user_id = 1
        """
        result = await self.session.execute(
            select(ShoppingList.ingredients).where(ShoppingList.user_id == user_id)
        )
        row = result.first()
        if row is None:
            return None
        return list(row.ingredients or [])

    async def merge_append(self, user_id: int, ingredients: Sequence[str]) -> None:
        """
        Create the list, or append the values it does not contain yet.

        Args:
            user_id: Owner of the list (must exist)
            ingredients: Values to add
        """
        await self.session.execute(
            MERGE_APPEND_SQL,
            {"user_id": user_id, "ingredients": list(ingredients)},
        )

    async def replace(self, user_id: int, ingredients: Sequence[str]) -> None:
        """
        Create the list, or overwrite it with exactly the given values.

        SQL Generated:
            INSERT INTO shopping_list (user_id, ingredients) VALUES (1, '{i3}')
            ON CONFLICT (user_id) DO UPDATE SET ingredients = excluded.ingredients
        """
        statement = insert(ShoppingList).values(user_id=user_id, ingredients=list(ingredients))
        statement = statement.on_conflict_do_update(
            index_elements=[ShoppingList.user_id],
            set_={"ingredients": statement.excluded.ingredients},
        )
        await self.session.execute(statement)
