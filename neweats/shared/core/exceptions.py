"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    NewEatsException (base, 500)
       │
       ├── BadRequestError (400)          ← Malformed payload, bad path id
       │      ├── EmptyInputError         ← Partial update with no fields
       │      ├── InvalidUserIdError      ← Non-numeric user id in the path
       │      ├── DuplicateUsernameError
       │      └── DuplicateFederatedIdError
       ├── UnauthorizedError (401)        ← Identity problems of any kind
       │      ├── AuthenticationRequiredError
       │      ├── OwnershipMismatchError
       │      └── InvalidCredentialsError
       ├── NotFoundError (404)            ← Unknown route or missing row
       │      ├── UserNotFoundError
       │      ├── RecipeNotFoundError
       │      └── RecipeAssociationNotFoundError
       └── InternalError (500)            ← Unexpected store/downstream failure

Usage:
======
    from neweats.shared.core.exceptions import NotFoundError, UserNotFoundError

    raise UserNotFoundError(user_id)
    # Results in: {"error": {"message": "No user: 7", "status": 404}}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "message": "No user: 7",
            "status": 404
        }
    }
"""

from typing import Any, Optional


class NewEatsException(Exception):
    """
    Base exception for all NewEats application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for logs and programmatic handling
    - Consistent JSON serialization

    Attributes:
        message: Human-readable error message (a string or a list of
            validation messages)
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
    """

    def __init__(
        self,
        message: Any = "Internal Server Error",
        status_code: int = 500,
        error_code: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        super().__init__(str(self.message))

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with the error envelope for JSON response
        """
        return {
            "error": {
                "message": self.message,
                "status": self.status_code,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# BAD REQUEST ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class BadRequestError(NewEatsException):
    """
    Bad request error (400 Bad Request).

    Raised when:
    - Request body fails schema validation
    - A path identifier cannot be parsed
    - A uniqueness rule is violated on registration
    """

    def __init__(self, message: Any = "Bad Request", error_code: str = "BAD_REQUEST") -> None:
        super().__init__(message=message, status_code=400, error_code=error_code)


class EmptyInputError(BadRequestError):
    """A partial update was requested without any field to change."""

    def __init__(self, message: str = "No data") -> None:
        super().__init__(message=message, error_code="EMPTY_INPUT")


class InvalidUserIdError(BadRequestError):
    """Path user id is not an integer."""

    def __init__(self) -> None:
        super().__init__(message="Invalid user ID.", error_code="INVALID_USER_ID")


class DuplicateUsernameError(BadRequestError):
    """Username is already registered."""

    def __init__(self, username: str) -> None:
        super().__init__(message=f"Duplicate username: {username}", error_code="DUPLICATE_USERNAME")


class DuplicateFederatedIdError(BadRequestError):
    """Federated (Google) id is already registered."""

    def __init__(self, google_id: str) -> None:
        super().__init__(
            message=f"Duplicate registration: {google_id}",
            error_code="DUPLICATE_FEDERATED_ID",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# UNAUTHORIZED ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class UnauthorizedError(NewEatsException):
    """
    Unauthorized error (401 Unauthorized).

    Every identity failure maps here: missing token, token for another
    user, and failed login all answer with the same status.
    """

    def __init__(self, message: str = "Unauthorized", error_code: str = "UNAUTHORIZED") -> None:
        super().__init__(message=message, status_code=401, error_code=error_code)


class AuthenticationRequiredError(UnauthorizedError):
    """No authenticated identity on the request."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message=message, error_code="AUTHENTICATION_REQUIRED")


class OwnershipMismatchError(UnauthorizedError):
    """Authenticated identity is not the owner named in the path."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message=message, error_code="OWNERSHIP_MISMATCH")


class InvalidCredentialsError(UnauthorizedError):
    """
    Login failed.

    Raised both for an unknown username and for a wrong password so the
    caller cannot tell which one happened.
    """

    def __init__(self, message: str = "Invalid username/password") -> None:
        super().__init__(message=message, error_code="INVALID_CREDENTIALS")


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(NewEatsException):
    """
    Resource not found error (404 Not Found).

    Also used for unmatched routes.
    """

    def __init__(self, message: str = "Not Found", error_code: str = "NOT_FOUND") -> None:
        super().__init__(message=message, status_code=404, error_code=error_code)


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: Any) -> None:
        super().__init__(message=f"No user: {user_id}", error_code="USER_NOT_FOUND")


class RecipeNotFoundError(NotFoundError):
    """Recipe not found error."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(message=f"No recipe: {recipe_id}", error_code="RECIPE_NOT_FOUND")


class RecipeAssociationNotFoundError(NotFoundError):
    """The user has no saved association with the recipe."""

    def __init__(self, recipe_id: str, user_id: Any) -> None:
        super().__init__(
            message=f"No recipe-user relationship: {recipe_id} for user {user_id}",
            error_code="RECIPE_ASSOCIATION_NOT_FOUND",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# INTERNAL ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class InternalError(NewEatsException):
    """Unexpected store or downstream failure (500)."""

    def __init__(self, message: str = "Internal Server Error") -> None:
        super().__init__(message=message, status_code=500, error_code="INTERNAL_ERROR")
