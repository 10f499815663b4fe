"""
Authorization Dependencies

FastAPI dependencies that gate protected routes.

AuthenticationMiddleware has already decoded the bearer token (if any)
into request.state.user. These dependencies only decide whether that
caller may proceed.

Dependency Hierarchy:
=====================
    get_current_claims()      ← request.state.user (claims or None)
           │
           └──▶ require_owner()          ← caller's user_id == path user_id
                       │
                       ▼
                 get_owner_id()          ← path user_id parsed as int

The ownership check compares strings, so it runs before the path value
is parsed. A foreign caller gets 401 even for a malformed id; the owner
of a non-numeric id gets 400.

Type Aliases:
=============
    OwnerUser   - Claims of the caller owning {user_id}
    OwnerId     - Numeric {user_id} after the ownership gate

Usage:
======
    from neweats.api.dependencies.auth import OwnerId

    @router.get("/{user_id}")
    async def get_list(user_id: OwnerId, service: ...):
        return await service.get_list(user_id)
"""

from typing import Annotated, Any, Optional

from fastapi import Depends, Request

from neweats.shared.core.authorization import ensure_correct_user
from neweats.shared.core.exceptions import InvalidUserIdError


def get_current_claims(request: Request) -> Optional[dict[str, Any]]:
    """Claims of the verified bearer token, or None for anonymous callers."""
    return getattr(request.state, "user", None)


async def require_owner(
    user_id: str,
    claims: Annotated[Optional[dict[str, Any]], Depends(get_current_claims)],
) -> dict[str, Any]:
    """
    Let through only the user named by the {user_id} path parameter.

    Raises:
        AuthenticationRequiredError: If the caller is anonymous
        OwnershipMismatchError: If the caller is someone else
    """
    return ensure_correct_user(claims, user_id)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

OwnerUser = Annotated[dict, Depends(require_owner)]


async def get_owner_id(user_id: str, _owner: OwnerUser) -> int:
    """
    Raises:
        InvalidUserIdError: If {user_id} is not an integer
    """
    try:
        return int(user_id)
    except ValueError as e:
        raise InvalidUserIdError() from e


OwnerId = Annotated[int, Depends(get_owner_id)]
