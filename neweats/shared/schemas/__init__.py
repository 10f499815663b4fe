"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schemas, error envelope, confirmations, health
- user: Authentication and profile schemas
- shopping: Shopping list schemas
- recipe: Recipe schemas

Usage:
======
    from neweats.shared.schemas.user import UserRegister, UserResponse
    from neweats.shared.schemas.common import ErrorResponse
"""

from neweats.shared.schemas.common import (
    BaseSchema,
    RequestSchema,
    MessageResponse,
    DeletedResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from neweats.shared.schemas.user import (
    UserLogin,
    GoogleLogin,
    UserRegister,
    GoogleRegister,
    UserUpdate,
    UserProfile,
    UserResponse,
    UserEnvelope,
    TokenResponse,
)
from neweats.shared.schemas.shopping import (
    ShoppingListUpdate,
    ShoppingListResponse,
    ShoppingListReplaced,
)
from neweats.shared.schemas.recipe import (
    RecipeCreate,
    RecipeResponse,
    RecipeSummary,
    RecipeEnvelope,
    RecipeListResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "RequestSchema",
    "MessageResponse",
    "DeletedResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserLogin",
    "GoogleLogin",
    "UserRegister",
    "GoogleRegister",
    "UserUpdate",
    "UserProfile",
    "UserResponse",
    "UserEnvelope",
    "TokenResponse",
    # Shopping
    "ShoppingListUpdate",
    "ShoppingListResponse",
    "ShoppingListReplaced",
    # Recipe
    "RecipeCreate",
    "RecipeResponse",
    "RecipeSummary",
    "RecipeEnvelope",
    "RecipeListResponse",
]
