"""
Base Model Class

This module provides the declarative base shared by all SQLAlchemy models
in NewEats.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── User
       ├── Recipe
       ├── RecipeUser       ← user ↔ recipe junction
       └── ShoppingList

Usage:
======
    from neweats.shared.models.base import Base

    class Recipe(Base):
        __tablename__ = "recipes"
        recipe_id: Mapped[str] = mapped_column(Text, primary_key=True)
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase


# Constraint naming convention so migrations produce stable names
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "ck": "%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s",
    "pk": "%(table_name)s_pkey",
}


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    The schema predates the ORM mapping, so models declare their tables
    column for column and carry no timestamp or soft-delete columns.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
