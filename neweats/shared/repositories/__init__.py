"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data
access. Services build them from the request's session.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic get/exists/create/delete
         │
         ├── UserRepository             ← Login lookups, partial update
         ├── RecipeRepository           ← Idempotent recipe insert
         └── ShoppingListRepository     ← Merge/replace upserts

    RecipeUserRepository                ← Junction table (no single key)

Usage Example:
==============
    from neweats.shared.repositories import UserRepository

    user = await UserRepository(db).get_by_username("u1")
"""

from neweats.shared.repositories.base import BaseRepository
from neweats.shared.repositories.user_repository import UserRepository, USER_COLUMN_MAP
from neweats.shared.repositories.recipe_repository import RecipeRepository
from neweats.shared.repositories.recipe_user_repository import RecipeUserRepository
from neweats.shared.repositories.shopping_list_repository import ShoppingListRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "USER_COLUMN_MAP",
    "RecipeRepository",
    "RecipeUserRepository",
    "ShoppingListRepository",
]
