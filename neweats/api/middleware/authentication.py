"""
Authentication Middleware

Runs on every request and records who is calling.

    Authorization: Bearer <jwt>   →  request.state.user = {firstName, user_id, iat}
    (missing / other scheme)      →  request.state.user = None
    (bad signature / expired)     →  request.state.user = None

This middleware never rejects a request. Public routes such as
/auth/register pass through unchanged; protected routes reject anonymous
or foreign callers in their authorization dependency.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from neweats.config.settings import settings
from neweats.shared.core.logging import log_context
from neweats.shared.utils.security import SecurityUtils


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Attach verified token claims (or None) to request.state.user."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        claims = SecurityUtils.claims_from_authorization(
            request.headers.get("authorization"),
            settings.SECRET_KEY,
            settings.JWT_ALGORITHM,
        )
        request.state.user = claims
        if claims:
            log_context(user_id=str(claims.get("user_id")))

        return await call_next(request)
