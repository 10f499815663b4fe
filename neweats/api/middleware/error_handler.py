"""
Error Handler Middleware

Global exception handling for the API.

Every failure leaves the API through this funnel and is rendered as:

    {
        "error": {
            "message": "No user: 7",
            "status": 404
        }
    }

Exception Handling:
===================
1. NewEatsException subclasses → their status_code and to_dict()
2. Request validation errors   → 400, message is the list of problems
3. HTTP errors from routing    → their status (404 for unmatched routes)
4. Other exceptions            → 500; logged with traceback, never echoed
                                 in production
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from neweats.config.settings import settings
from neweats.shared.core.exceptions import NewEatsException
from neweats.shared.core.logging import logger


def _envelope(message: Any, status: int) -> dict[str, Any]:
    return {"error": {"message": message, "status": status}}


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> list[str]:
    """
    Flatten pydantic error dicts into readable messages.

    Example:
        [{"loc": ("body", "email"), "msg": "value is not a valid email"}]
        → ["email: value is not a valid email"]
    """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        prefix = ".".join(loc)
        messages.append(f"{prefix}: {error['msg']}" if prefix else error["msg"])
    return messages


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(NewEatsException)
    async def neweats_exception_handler(
        request: Request,
        exc: NewEatsException,
    ) -> JSONResponse:
        """Handle application exceptions."""
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle bodies/params that do not match the route's schema."""
        messages = format_validation_errors(exc.errors())
        logger.warning("Validation error", errors=messages, path=request.url.path)
        return JSONResponse(status_code=400, content=_envelope(messages, 400))

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Handle pydantic errors raised while validating inside a handler."""
        messages = format_validation_errors(exc.errors())
        logger.warning("Validation error", errors=messages, path=request.url.path)
        return JSONResponse(status_code=400, content=_envelope(messages, 400))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Handle routing errors such as unmatched paths and wrong methods."""
        return JSONResponse(
            status_code=exc.status_code,
            content=_envelope(exc.detail, exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but only exposed outside production.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        message = "Internal Server Error" if settings.is_production else str(exc)
        return JSONResponse(status_code=500, content=_envelope(message, 500))
