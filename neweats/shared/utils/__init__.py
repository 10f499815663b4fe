"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing, JWT management, bearer header parsing
- sql: Partial UPDATE clause builder

Usage:
======
    from neweats.shared.utils.security import SecurityUtils, create_token
    from neweats.shared.utils.sql import sql_for_partial_update
"""

from neweats.shared.utils.security import SecurityUtils, create_token
from neweats.shared.utils.sql import PartialUpdate, sql_for_partial_update

__all__ = [
    "SecurityUtils",
    "create_token",
    "PartialUpdate",
    "sql_for_partial_update",
]
