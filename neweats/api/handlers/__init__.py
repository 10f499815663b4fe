"""
API Handlers

Route handlers for the NewEats API.

Handlers follow the pattern:
- Parse HTTP requests (path, query, validated body)
- Call service methods
- Format HTTP responses

Authorization lives in dependencies; errors are raised and rendered by
the global exception handlers.
"""

from neweats.api.handlers import (
    auth_handler,
    user_handler,
    shopping_handler,
    recipe_handler,
    health_handler,
)

__all__ = [
    "auth_handler",
    "user_handler",
    "shopping_handler",
    "recipe_handler",
    "health_handler",
]
