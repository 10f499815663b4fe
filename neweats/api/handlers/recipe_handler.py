"""
Recipe Handler

Saved recipes per user, plus a reachability check for recipe links.

Routes:
=======
    GET    /recipes/check-url?url=...        → {"status": "OK"}  (public)
    GET    /recipes/{user_id}                → {"recipes": [...]}
    GET    /recipes/{user_id}/{recipe_id}    → {"recipe": {...}}
    POST   /recipes/{user_id}/{recipe_id}    → {"recipe": {...}}
    DELETE /recipes/{user_id}/{recipe_id}    → {"deleted": "<recipe_id>"}

/check-url is declared first so it is not captured by /{user_id}.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from neweats.api.dependencies.auth import OwnerId
from neweats.api.dependencies.services import get_recipe_service, get_url_service
from neweats.shared.core.exceptions import BadRequestError
from neweats.shared.schemas.common import DeletedResponse
from neweats.shared.schemas.recipe import (
    RecipeCreate,
    RecipeEnvelope,
    RecipeListResponse,
    RecipeResponse,
    RecipeSummary,
)
from neweats.shared.services.recipe_service import RecipeService
from neweats.shared.services.url_service import URLService


router = APIRouter()


@router.get("/check-url")
async def check_url(
    url: Optional[str] = Query(None),
    url_service: URLService = Depends(get_url_service),
):
    """
    Probe a recipe link with a HEAD request.

    Returns:
        200 {"status": "OK"} when reachable, otherwise
        500 {"status": "URL is not working", "error": "..."}

    Raises:
        400: If the url query parameter is missing
    """
    if not url:
        raise BadRequestError("URL parameter is required.")

    reachable, error = await url_service.check_url(url)
    if reachable:
        return {"status": "OK"}

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "URL is not working", "error": error},
    )


@router.get("/{user_id}", response_model=RecipeListResponse)
async def find_all(
    user_id: OwnerId,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    """List the recipes the user saved, ordered by recipe id."""
    recipes = await recipe_service.find_all(user_id)
    return RecipeListResponse(
        recipes=[RecipeSummary.model_validate(recipe) for recipe in recipes]
    )


@router.get("/{user_id}/{recipe_id}", response_model=RecipeEnvelope)
async def get_recipe(
    user_id: OwnerId,
    recipe_id: str,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    """
    Get a stored recipe by id.

    Any stored recipe is returned, saved by this user or not.

    Raises:
        404: If the recipe is not stored
    """
    recipe = await recipe_service.get_recipe(recipe_id)
    return RecipeEnvelope(recipe=RecipeResponse.model_validate(recipe))


@router.post("/{user_id}/{recipe_id}", response_model=RecipeEnvelope)
async def save_recipe(
    user_id: OwnerId,
    recipe_id: str,
    recipe_data: RecipeCreate,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    """
    Store the recipe (unless already stored) and save it for the user.

    The key comes from the path; a recipe_id in the body is ignored.
    """
    recipe = await recipe_service.save_for_user(
        user_id=user_id,
        recipe_id=recipe_id,
        label=recipe_data.label,
        ingredients=recipe_data.ingredients,
        image=recipe_data.image,
        url=recipe_data.url,
    )
    return RecipeEnvelope(recipe=RecipeResponse.model_validate(recipe))


@router.delete("/{user_id}/{recipe_id}", response_model=DeletedResponse)
async def remove_recipe(
    user_id: OwnerId,
    recipe_id: str,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    """
    Remove a recipe from the user's saved list; the recipe stays stored.

    Raises:
        404: If the user had not saved it
    """
    await recipe_service.remove_from_user(user_id, recipe_id)
    return DeletedResponse(deleted=recipe_id)
