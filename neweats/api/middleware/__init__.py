"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling (single error envelope)
- authentication: Bearer token → request.state.user, never rejects
- request_logging: Structured access log with request ids

Usage:
======
    from neweats.api.middleware import (
        AuthenticationMiddleware,
        RequestLoggingMiddleware,
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(AuthenticationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
"""

from neweats.api.middleware.error_handler import setup_exception_handlers
from neweats.api.middleware.authentication import AuthenticationMiddleware
from neweats.api.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "setup_exception_handlers",
    "AuthenticationMiddleware",
    "RequestLoggingMiddleware",
]
