"""
Shopping List Schemas

Request/response models for /shopping endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field

from neweats.shared.schemas.common import MessageResponse, RequestSchema


class ShoppingListUpdate(RequestSchema):
    """Body of POST and PATCH /shopping/{user_id}."""

    ingredients: list[str]


class ShoppingListResponse(BaseModel):
    """Current list contents: {"list": [...]}."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[str] = Field(alias="list")


class ShoppingListReplaced(BaseModel):
    """Confirmation of a replace: {"list": {"message": ...}}."""

    model_config = ConfigDict(populate_by_name=True)

    confirmation: MessageResponse = Field(alias="list")
