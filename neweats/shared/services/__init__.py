"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic (merge policy, credential checks, hashing)
- Coordinate multiple repositories if needed
- NOT handle HTTP concerns (that's for handlers)
- NOT check authorization (that's for the route dependencies)

Available Services:
===================
- UserService: User directory (login checks, registration, profile)
- AuthService: Token issuance on login and registration
- ShoppingListService: Shopping list merge/replace
- RecipeService: Saved recipes and user associations
- URLService: Recipe link reachability
"""

from neweats.shared.services.user_service import UserService
from neweats.shared.services.auth_service import AuthService
from neweats.shared.services.shopping_service import ShoppingListService
from neweats.shared.services.recipe_service import RecipeService
from neweats.shared.services.url_service import URLService

__all__ = [
    "UserService",
    "AuthService",
    "ShoppingListService",
    "RecipeService",
    "URLService",
]
