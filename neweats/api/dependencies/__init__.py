"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authorization: require_owner(), get_owner_id()
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        user_id: int = Depends(get_owner_id),
        db: AsyncSession = Depends(get_db),
    ):

    # Write this:
    async def handler(user_id: OwnerId, db: DbSession):
"""

from neweats.api.dependencies.database import (
    get_db,
    DbSession,
)
from neweats.api.dependencies.auth import (
    get_current_claims,
    require_owner,
    get_owner_id,
    OwnerUser,
    OwnerId,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authorization
    "get_current_claims",
    "require_owner",
    "get_owner_id",
    "OwnerUser",
    "OwnerId",
]
