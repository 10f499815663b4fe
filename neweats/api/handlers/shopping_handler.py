"""
Shopping List Handler

    GET   /shopping/{user_id}   → {"list": [...]}
    POST  /shopping/{user_id}   → {"list": [...]}            (merge)
    PATCH /shopping/{user_id}   → {"list": {"message": ...}}  (replace)

All routes are owner-only.
"""

from fastapi import APIRouter, Depends

from neweats.api.dependencies.auth import OwnerId
from neweats.api.dependencies.services import get_shopping_service
from neweats.shared.schemas.common import MessageResponse
from neweats.shared.schemas.shopping import (
    ShoppingListReplaced,
    ShoppingListResponse,
    ShoppingListUpdate,
)
from neweats.shared.services.shopping_service import ShoppingListService


router = APIRouter()


@router.get("/{user_id}", response_model=ShoppingListResponse)
async def get_list(
    user_id: OwnerId,
    shopping_service: ShoppingListService = Depends(get_shopping_service),
):
    """Get the list; a user without one gets an empty list."""
    items = await shopping_service.get_list(user_id)
    return ShoppingListResponse(items=items)


@router.post("/{user_id}", response_model=ShoppingListResponse)
async def add_ingredients(
    user_id: OwnerId,
    body: ShoppingListUpdate,
    shopping_service: ShoppingListService = Depends(get_shopping_service),
):
    """Append the ingredients not already on the list."""
    items = await shopping_service.add_ingredients(user_id, body.ingredients)
    return ShoppingListResponse(items=items)


@router.patch("/{user_id}", response_model=ShoppingListReplaced)
async def replace_list(
    user_id: OwnerId,
    body: ShoppingListUpdate,
    shopping_service: ShoppingListService = Depends(get_shopping_service),
):
    """Overwrite the list with exactly the given ingredients."""
    confirmation = await shopping_service.replace_list(user_id, body.ingredients)
    return ShoppingListReplaced(confirmation=MessageResponse(**confirmation))
