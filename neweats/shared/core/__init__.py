"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions
- Authorization predicates

Usage:
======
    from neweats.shared.core.logging import logger, get_logger
    from neweats.shared.core.exceptions import NewEatsException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from neweats.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from neweats.shared.core.exceptions import (
    NewEatsException,
    BadRequestError,
    EmptyInputError,
    InvalidUserIdError,
    DuplicateUsernameError,
    DuplicateFederatedIdError,
    UnauthorizedError,
    AuthenticationRequiredError,
    OwnershipMismatchError,
    InvalidCredentialsError,
    NotFoundError,
    UserNotFoundError,
    RecipeNotFoundError,
    RecipeAssociationNotFoundError,
    InternalError,
)
from neweats.shared.core.authorization import (
    ensure_logged_in,
    ensure_correct_user,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "NewEatsException",
    "BadRequestError",
    "EmptyInputError",
    "InvalidUserIdError",
    "DuplicateUsernameError",
    "DuplicateFederatedIdError",
    "UnauthorizedError",
    "AuthenticationRequiredError",
    "OwnershipMismatchError",
    "InvalidCredentialsError",
    "NotFoundError",
    "UserNotFoundError",
    "RecipeNotFoundError",
    "RecipeAssociationNotFoundError",
    "InternalError",
    # Authorization
    "ensure_logged_in",
    "ensure_correct_user",
]
