from datetime import timedelta

import jwt
import pytest

from neweats.config.settings import settings
from neweats.shared.utils.security import SecurityUtils, create_token
from tests.factories import make_user


def test_password_round_trip():
    digest = SecurityUtils.hash_password("password1")

    assert digest != "password1"
    assert SecurityUtils.verify_password("password1", digest)
    assert not SecurityUtils.verify_password("password2", digest)


def test_missing_digest_never_matches():
    assert not SecurityUtils.verify_password("password1", None)
    assert not SecurityUtils.verify_password("", "")


def test_create_token_claims():
    token = create_token(make_user(user_id=7, first_name="Ann"))

    claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert claims["firstName"] == "Ann"
    assert claims["user_id"] == "7"
    assert "iat" in claims
    assert "exp" not in claims


def test_expiry_is_added_when_requested():
    token = SecurityUtils.create_access_token(
        {"user_id": "1"}, "k", expires_delta=timedelta(minutes=5)
    )

    assert "exp" in SecurityUtils.decode_access_token(token, "k")


def test_expired_token_is_rejected():
    token = SecurityUtils.create_access_token(
        {"user_id": "1"}, "k", expires_delta=timedelta(minutes=-1)
    )

    with pytest.raises(ValueError, match="expired"):
        SecurityUtils.decode_access_token(token, "k")


def test_claims_from_valid_bearer_header():
    token = SecurityUtils.create_access_token({"user_id": "1"}, "k")

    assert SecurityUtils.claims_from_authorization(f"Bearer {token}", "k")["user_id"] == "1"
    assert SecurityUtils.claims_from_authorization(f"bearer {token}", "k")["user_id"] == "1"


@pytest.mark.parametrize(
    "header",
    [None, "", "Bearer", "Bearer ", "Basic dXNlcjpwYXNz", "Bearer not-a-jwt"],
)
def test_unusable_headers_yield_none(header):
    assert SecurityUtils.claims_from_authorization(header, "k") is None


def test_token_signed_with_other_key_yields_none():
    token = SecurityUtils.create_access_token({"user_id": "1"}, "other")

    assert SecurityUtils.claims_from_authorization(f"Bearer {token}", "k") is None
