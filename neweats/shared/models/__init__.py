"""
NewEats SQLAlchemy Models

This package contains all database models for the NewEats application.

Model Hierarchy:
================
    User
       ├── recipes_users (RecipeUser[])  ──→ Recipe
       └── shopping_list (ShoppingList, at most one)

Models Overview:
================
- Base: Declarative base with constraint naming convention
- User: Registered application user (password or Google account)
- Recipe: Saved recipe keyed by the provider's recipe id
- RecipeUser: Junction table for users and recipes
- ShoppingList: Per-user list of ingredient lines

Usage:
======
    from neweats.shared.models import User, Recipe, RecipeUser, ShoppingList
"""

from neweats.shared.models.base import Base
from neweats.shared.models.user import User
from neweats.shared.models.recipe import Recipe
from neweats.shared.models.recipe_user import RecipeUser
from neweats.shared.models.shopping_list import ShoppingList

__all__ = [
    "Base",
    "User",
    "Recipe",
    "RecipeUser",
    "ShoppingList",
]
