import pytest
from pydantic import ValidationError

from neweats.shared.core.exceptions import (
    DuplicateUsernameError,
    InvalidUserIdError,
    RecipeAssociationNotFoundError,
    UserNotFoundError,
)
from neweats.shared.schemas import (
    GoogleLogin,
    RecipeSummary,
    ShoppingListResponse,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from tests.factories import make_recipe, make_user


VALID_REGISTRATION = {
    "username": "u1",
    "password": "password1",
    "firstName": "U1F",
    "lastName": "U1L",
    "email": "user1@user.com",
}


def test_error_envelope():
    assert UserNotFoundError(7).to_dict() == {"error": {"message": "No user: 7", "status": 404}}
    assert InvalidUserIdError().to_dict() == {
        "error": {"message": "Invalid user ID.", "status": 400}
    }
    assert DuplicateUsernameError("u1").message == "Duplicate username: u1"
    assert RecipeAssociationNotFoundError("r1", 3).status_code == 404


def test_registration_accepts_camel_case_body():
    user = UserRegister.model_validate(VALID_REGISTRATION)

    assert user.first_name == "U1F"
    assert user.last_name == "U1L"


@pytest.mark.parametrize(
    "changes",
    [
        {"password": "1234"},
        {"password": "x" * 21},
        {"username": ""},
        {"username": "u" * 26},
        {"email": "not-an-email"},
        {"nickname": "extra keys are rejected"},
    ],
)
def test_registration_rejects_invalid_bodies(changes):
    with pytest.raises(ValidationError):
        UserRegister.model_validate({**VALID_REGISTRATION, **changes})


def test_registration_requires_every_field():
    body = dict(VALID_REGISTRATION)
    del body["email"]

    with pytest.raises(ValidationError):
        UserRegister.model_validate(body)


def test_google_login_ignores_profile_fields():
    login = GoogleLogin.model_validate({"googleId": "123abc", "email": "g@x.com"})

    assert login.google_id == "123abc"


def test_update_dumps_only_supplied_fields_by_json_name():
    update = UserUpdate.model_validate({"firstName": "New", "email": "n@x.com"})

    assert update.model_dump(exclude_unset=True, by_alias=True) == {
        "firstName": "New",
        "email": "n@x.com",
    }


def test_update_of_nothing_dumps_empty():
    assert UserUpdate.model_validate({}).model_dump(exclude_unset=True, by_alias=True) == {}


@pytest.mark.parametrize(
    "body",
    [{"firstName": None}, {"password": "1234"}, {"username": "u2"}, {"email": "bad"}],
)
def test_update_rejects_invalid_bodies(body):
    with pytest.raises(ValidationError):
        UserUpdate.model_validate(body)


def test_user_response_hides_credentials():
    user = make_user(password="$2b$04$digest", google_id="g1")

    body = UserResponse.model_validate(user).model_dump(by_alias=True)

    assert body == {
        "user_id": 1,
        "firstName": "U1F",
        "lastName": "U1L",
        "email": "user1@user.com",
    }


def test_recipe_summary_exposes_key_as_id():
    summary = RecipeSummary.model_validate(make_recipe("r9"))

    assert summary.model_dump()["id"] == "r9"
    assert summary.label == "Recipe r9"


def test_shopping_list_serializes_under_list():
    assert ShoppingListResponse(items=["i1"]).model_dump(by_alias=True) == {"list": ["i1"]}
