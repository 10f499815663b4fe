"""
User Handler

Profile endpoints. Every route is owner-only: the token's user_id must
equal the {user_id} path segment.

    GET    /users/{user_id}   → {"user": {...}}
    PATCH  /users/{user_id}   → {"user": {...}}
    DELETE /users/{user_id}   → {"deleted": "<user_id>"}
"""

from fastapi import APIRouter, Depends

from neweats.api.dependencies.auth import OwnerId
from neweats.api.dependencies.services import get_user_service
from neweats.shared.schemas.common import DeletedResponse
from neweats.shared.schemas.user import UserEnvelope, UserResponse, UserUpdate
from neweats.shared.services.user_service import UserService


router = APIRouter()


@router.get("/{user_id}", response_model=UserEnvelope)
async def get_user(
    user_id: OwnerId,
    user_service: UserService = Depends(get_user_service),
):
    """Get the caller's public profile."""
    user = await user_service.get(user_id)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.patch("/{user_id}", response_model=UserEnvelope)
async def update_user(
    user_id: OwnerId,
    user_data: UserUpdate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Change any of firstName, lastName, password and email.

    Raises:
        400: If the body is empty, has unknown keys, or invalid values
        404: If the user no longer exists
    """
    changes = user_data.model_dump(exclude_unset=True, by_alias=True)
    user = await user_service.update(user_id, changes)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.delete("/{user_id}", response_model=DeletedResponse)
async def delete_user(
    user_id: OwnerId,
    user_service: UserService = Depends(get_user_service),
):
    """Delete the caller's account along with their saved recipes and list."""
    await user_service.remove(user_id)
    return DeletedResponse(deleted=str(user_id))
