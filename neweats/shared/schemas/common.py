"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- RequestSchema: Base for request bodies that reject unknown keys
- Generic Responses: MessageResponse, DeletedResponse, ErrorResponse
- HealthResponse
"""

from datetime import datetime, timezone
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All response schemas should inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class RequestSchema(BaseModel):
    """Base for request bodies; unknown properties are a validation error."""

    model_config = ConfigDict(extra="forbid")


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response for success confirmations."""

    message: str


class DeletedResponse(BaseModel):
    """Confirmation of a deletion, echoing the deleted key."""

    deleted: str


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    message: Union[str, list[Any]] = Field(description="Error message or validation messages")
    status: int = Field(description="HTTP status code")


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {"error": {"message": "No user: 7", "status": 404}}
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "neweats"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
