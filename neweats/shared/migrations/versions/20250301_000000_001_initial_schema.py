# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2025-03-01 00:00:00

This migration creates all database tables for the NewEats application.

Tables created:
- users: Password and Google accounts
- recipes: Recipes saved from the search provider
- recipes_users: Junction table for saved recipes
- shopping_list: One ingredient list per user
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ═══════════════════════════════════════════════════════════════════════════
    # USERS
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(25), nullable=True, unique=True),
        sa.Column("password", sa.Text(), nullable=True),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("google_id", sa.Text(), nullable=True, unique=True),
        sa.CheckConstraint("position('@' IN email) > 1", name="users_email_check"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RECIPES
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "recipes",
        sa.Column("recipe_id", sa.Text(), primary_key=True),
        sa.Column("label", sa.Text(), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("ingredients", postgresql.ARRAY(sa.Text()), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RECIPES_USERS (no primary key; pairs kept unique by the application)
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "recipes_users",
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.user_id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column(
            "recipe_id",
            sa.Text(),
            sa.ForeignKey("recipes.recipe_id", ondelete="CASCADE"),
            nullable=True,
        ),
    )
    op.create_index("ix_recipes_users_user_id", "recipes_users", ["user_id"])

    # ═══════════════════════════════════════════════════════════════════════════
    # SHOPPING_LIST
    # ═══════════════════════════════════════════════════════════════════════════
    op.create_table(
        "shopping_list",
        sa.Column("list_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.user_id", ondelete="CASCADE", name="fk_user_shopping_list"),
            nullable=True,
            unique=True,
        ),
        sa.Column("ingredients", postgresql.ARRAY(sa.Text()), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("shopping_list")
    op.drop_index("ix_recipes_users_user_id", table_name="recipes_users")
    op.drop_table("recipes_users")
    op.drop_table("recipes")
    op.drop_table("users")
