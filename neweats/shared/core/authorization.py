"""
Authorization Predicates

The one authorization policy of the API: a request is allowed to touch a
user-scoped resource only when its verified token belongs to that user.

    ensure_logged_in(claims)             ← any authenticated identity
    ensure_correct_user(claims, owner)   ← identity equals the path owner

There are no roles or scopes. Claims come from the authentication
middleware, which leaves them as None when the request carried no valid
bearer token.

Comparison Rule:
================
The claims' user_id and the path segment are compared as strings, without
numeric parsing:

    claims "0"  vs path "0"    → allowed
    claims "0"  vs path "NaN"  → OwnershipMismatchError
    no claims   vs path "0"    → AuthenticationRequiredError
"""

from typing import Any, Mapping, Optional

from neweats.shared.core.exceptions import (
    AuthenticationRequiredError,
    OwnershipMismatchError,
)


Claims = Mapping[str, Any]


def ensure_logged_in(claims: Optional[Claims]) -> Claims:
    """
    Require an authenticated identity.

    Args:
        claims: Decoded token claims, or None for anonymous requests

    Returns:
        The claims, unchanged

    Raises:
        AuthenticationRequiredError: If the request is anonymous
    """
    if not claims:
        raise AuthenticationRequiredError()
    return claims


def ensure_correct_user(claims: Optional[Claims], owner_id: Any) -> Claims:
    """
    Require the authenticated identity to be the owner named in the path.

    Args:
        claims: Decoded token claims, or None for anonymous requests
        owner_id: Raw user id segment taken from the request path

    Returns:
        The claims, unchanged

    Raises:
        AuthenticationRequiredError: If the request is anonymous
        OwnershipMismatchError: If the token subject is another user
    """
    claims = ensure_logged_in(claims)
    subject = claims.get("user_id")
    if subject is None or str(subject) != str(owner_id):
        raise OwnershipMismatchError()
    return claims
