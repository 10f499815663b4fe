"""
Recipe Schemas

Request/response models for /recipes endpoints.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from neweats.shared.schemas.common import BaseSchema


class RecipeCreate(BaseModel):
    """
    Body of POST /recipes/{user_id}/{recipe_id}.

    The client posts the recipe as returned by the search provider; extra
    provider fields are ignored. The key is taken from the path.
    """

    model_config = ConfigDict(extra="ignore")

    recipe_id: Optional[str] = None
    label: str = Field(min_length=1)
    image: Optional[str] = None
    ingredients: list[str]
    url: Optional[str] = None


class RecipeResponse(BaseSchema):
    """A stored recipe, without its key."""

    label: str
    image: Optional[str] = None
    ingredients: list[str]
    url: Optional[str] = None


class RecipeSummary(BaseSchema):
    """A recipe in a user's saved list; the key is exposed as id."""

    id: str = Field(validation_alias="recipe_id")
    label: str
    image: Optional[str] = None
    ingredients: list[str]
    url: Optional[str] = None


class RecipeEnvelope(BaseModel):
    """Body of GET/POST /recipes/{user_id}/{recipe_id}."""

    recipe: RecipeResponse


class RecipeListResponse(BaseModel):
    """Body of GET /recipes/{user_id}."""

    recipes: list[RecipeSummary]
