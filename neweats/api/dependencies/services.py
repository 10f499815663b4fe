"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request around that request's session; they
hold no other state.

Usage:
======
    from neweats.api.dependencies.services import get_recipe_service

    @router.get("/{user_id}")
    async def find_all(
        user_id: OwnerId,
        recipe_service: RecipeService = Depends(get_recipe_service),
    ):
        return await recipe_service.find_all(user_id)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from neweats.api.dependencies.database import get_db
from neweats.shared.services.auth_service import AuthService
from neweats.shared.services.recipe_service import RecipeService
from neweats.shared.services.shopping_service import ShoppingListService
from neweats.shared.services.url_service import URLService
from neweats.shared.services.user_service import UserService


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_user_service(
    db: AsyncSession = Depends(get_db),
) -> UserService:
    """
    Dependency to get UserService instance.
    """
    return UserService(db)


async def get_shopping_service(
    db: AsyncSession = Depends(get_db),
) -> ShoppingListService:
    return ShoppingListService(db)


async def get_recipe_service(
    db: AsyncSession = Depends(get_db),
) -> RecipeService:
    return RecipeService(db)


def get_url_service() -> URLService:
    """URLService needs no session; overridable in tests."""
    return URLService()
