"""
HTTP tests against the real application with services replaced.

Routing, middleware, the ownership gate, validation and the error
envelope all run for real; only the service layer is mocked, so no
database is needed.
"""

import pytest

from neweats.api.dependencies.services import (
    get_auth_service,
    get_recipe_service,
    get_shopping_service,
    get_url_service,
    get_user_service,
)
from neweats.shared.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    RecipeNotFoundError,
    UserNotFoundError,
)
from neweats.shared.services.user_service import to_profile
from tests.factories import make_recipe, make_user, mock_service, token_for


OWNER_ONLY_ROUTES = [
    ("GET", "/users/1", None),
    ("PATCH", "/users/1", {"firstName": "New"}),
    ("DELETE", "/users/1", None),
    ("GET", "/shopping/1", None),
    ("POST", "/shopping/1", {"ingredients": ["i1"]}),
    ("PATCH", "/shopping/1", {"ingredients": ["i1"]}),
    ("GET", "/recipes/1", None),
    ("GET", "/recipes/1/r1", None),
    ("POST", "/recipes/1/r1", {"label": "L", "ingredients": ["i1"]}),
    ("DELETE", "/recipes/1/r1", None),
]


@pytest.fixture
def services(override):
    """Every service dependency replaced by a mock."""
    return {
        "auth": override(
            get_auth_service,
            mock_service("login_user", "login_google_user", "register_user", "register_google_user"),
        ),
        "users": override(get_user_service, mock_service("get", "update", "remove")),
        "shopping": override(
            get_shopping_service,
            mock_service("get_list", "add_ingredients", "replace_list"),
        ),
        "recipes": override(
            get_recipe_service,
            mock_service("find_all", "get_recipe", "save_for_user", "remove_from_user"),
        ),
        "urls": override(get_url_service, mock_service("check_url")),
    }


def assert_error(response, status, message=None):
    assert response.status_code == status
    error = response.json()["error"]
    assert error["status"] == status
    if message is not None:
        assert error["message"] == message


# ═══════════════════════════════════════════════════════════════════════════════
# AUTH
# ═══════════════════════════════════════════════════════════════════════════════


def test_password_login(client, services):
    services["auth"].login_user.return_value = (to_profile(make_user()), "tok")

    response = client.post("/auth/token", json={"username": "u1", "password": "password1"})

    assert response.status_code == 200
    assert response.json() == {"token": "tok"}
    services["auth"].login_user.assert_awaited_once_with("u1", "password1")


def test_google_login(client, services):
    services["auth"].login_google_user.return_value = (to_profile(make_user()), "gtok")

    response = client.post("/auth/token", json={"googleId": "123abc", "email": "x@y.com"})

    assert response.json() == {"token": "gtok"}
    services["auth"].login_google_user.assert_awaited_once_with("123abc")
    services["auth"].login_user.assert_not_awaited()


@pytest.mark.parametrize(
    "body",
    [{}, {"username": "u1"}, {"username": "u1", "password": "p", "extra": 1}],
)
def test_login_with_invalid_body(client, services, body):
    response = client.post("/auth/token", json=body)

    assert_error(response, 400)
    assert isinstance(response.json()["error"]["message"], list)


def test_login_with_bad_credentials(client, services):
    services["auth"].login_user.side_effect = InvalidCredentialsError()

    response = client.post("/auth/token", json={"username": "u1", "password": "nope"})

    assert_error(response, 401, "Invalid username/password")


def test_register(client, services):
    services["auth"].register_user.return_value = (to_profile(make_user()), "newtok")

    response = client.post(
        "/auth/register",
        json={
            "username": "u1",
            "password": "password1",
            "firstName": "U1F",
            "lastName": "U1L",
            "email": "user1@user.com",
        },
    )

    assert response.status_code == 201
    assert response.json() == {"token": "newtok"}
    assert services["auth"].register_user.await_args.kwargs["first_name"] == "U1F"


def test_register_duplicate(client, services):
    services["auth"].register_user.side_effect = DuplicateUsernameError("u1")

    response = client.post(
        "/auth/register",
        json={
            "username": "u1",
            "password": "password1",
            "firstName": "U1F",
            "lastName": "U1L",
            "email": "user1@user.com",
        },
    )

    assert_error(response, 400, "Duplicate username: u1")


def test_register_invalid_body(client, services):
    response = client.post("/auth/register", json={"username": "u1", "password": "pw"})

    assert_error(response, 400)
    services["auth"].register_user.assert_not_awaited()


def test_google_register(client, services):
    services["auth"].register_google_user.return_value = (to_profile(make_user()), "gtok")

    response = client.post(
        "/auth/googleregister",
        json={"firstName": "F", "lastName": "L", "email": "g@x.com", "googleId": "g1"},
    )

    assert response.status_code == 201
    assert response.json() == {"token": "gtok"}


# ═══════════════════════════════════════════════════════════════════════════════
# OWNERSHIP GATE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("method, path, body", OWNER_ONLY_ROUTES)
def test_anonymous_caller_is_rejected(client, services, method, path, body):
    response = client.request(method, path, json=body)

    assert_error(response, 401, "Unauthorized")


@pytest.mark.parametrize("method, path, body", OWNER_ONLY_ROUTES)
def test_other_user_is_rejected(client, services, auth_header, method, path, body):
    response = client.request(method, path, json=body, headers=auth_header(2))

    assert_error(response, 401, "Unauthorized")
    for service in services.values():
        for call in service.method_calls:
            pytest.fail(f"service reached: {call}")


@pytest.mark.parametrize("method, path, body", OWNER_ONLY_ROUTES)
def test_forged_token_is_rejected(client, services, method, path, body):
    headers = {"Authorization": f"Bearer {token_for(1)}x"}

    response = client.request(method, path, json=body, headers=headers)

    assert_error(response, 401)


@pytest.mark.parametrize("path", ["/users/abc", "/shopping/abc", "/recipes/abc"])
def test_non_numeric_id_of_owner_is_bad_request(client, services, auth_header, path):
    response = client.get(path, headers=auth_header("abc"))

    assert_error(response, 400, "Invalid user ID.")


def test_non_numeric_id_of_other_user_is_unauthorized(client, services, auth_header):
    response = client.get("/users/abc", headers=auth_header(1))

    assert_error(response, 401)


# ═══════════════════════════════════════════════════════════════════════════════
# USERS
# ═══════════════════════════════════════════════════════════════════════════════


def test_get_user(client, services, auth_header):
    services["users"].get.return_value = to_profile(
        make_user(password="$2b$04$digest", google_id="g1")
    )

    response = client.get("/users/1", headers=auth_header(1))

    assert response.status_code == 200
    assert response.json() == {
        "user": {
            "user_id": 1,
            "firstName": "U1F",
            "lastName": "U1L",
            "email": "user1@user.com",
        }
    }
    services["users"].get.assert_awaited_once_with(1)


def test_get_missing_user(client, services, auth_header):
    services["users"].get.side_effect = UserNotFoundError(1)

    assert_error(client.get("/users/1", headers=auth_header(1)), 404, "No user: 1")


def test_patch_passes_only_supplied_fields(client, services, auth_header):
    services["users"].update.return_value = to_profile(make_user(first_name="New"))

    response = client.patch("/users/1", json={"firstName": "New"}, headers=auth_header(1))

    assert response.status_code == 200
    assert response.json()["user"]["firstName"] == "New"
    services["users"].update.assert_awaited_once_with(1, {"firstName": "New"})


@pytest.mark.parametrize(
    "body",
    [{"username": "u2"}, {"firstName": None}, {"password": "123"}, {"email": "nope"}],
)
def test_patch_with_invalid_body(client, services, auth_header, body):
    response = client.patch("/users/1", json=body, headers=auth_header(1))

    assert_error(response, 400)
    services["users"].update.assert_not_awaited()


def test_delete_user(client, services, auth_header):
    response = client.delete("/users/1", headers=auth_header(1))

    assert response.status_code == 200
    assert response.json() == {"deleted": "1"}
    services["users"].remove.assert_awaited_once_with(1)


# ═══════════════════════════════════════════════════════════════════════════════
# SHOPPING
# ═══════════════════════════════════════════════════════════════════════════════


def test_get_shopping_list(client, services, auth_header):
    services["shopping"].get_list.return_value = ["i1", "i2"]

    response = client.get("/shopping/1", headers=auth_header(1))

    assert response.json() == {"list": ["i1", "i2"]}


def test_add_ingredients(client, services, auth_header):
    services["shopping"].add_ingredients.return_value = ["i1", "i2", "i3"]

    response = client.post(
        "/shopping/1", json={"ingredients": ["i2", "i3"]}, headers=auth_header(1)
    )

    assert response.status_code == 200
    assert response.json() == {"list": ["i1", "i2", "i3"]}
    services["shopping"].add_ingredients.assert_awaited_once_with(1, ["i2", "i3"])


def test_replace_list(client, services, auth_header):
    services["shopping"].replace_list.return_value = {
        "message": "Shopping list updated successfully."
    }

    response = client.patch("/shopping/1", json={"ingredients": ["x"]}, headers=auth_header(1))

    assert response.status_code == 200
    assert response.json() == {"list": {"message": "Shopping list updated successfully."}}


@pytest.mark.parametrize(
    "body",
    [{}, {"ingredients": "i1"}, {"ingredients": [1, 2]}, {"ingredients": [], "x": 1}],
)
def test_shopping_with_invalid_body(client, services, auth_header, body):
    response = client.post("/shopping/1", json=body, headers=auth_header(1))

    assert_error(response, 400)


# ═══════════════════════════════════════════════════════════════════════════════
# RECIPES
# ═══════════════════════════════════════════════════════════════════════════════


def test_find_all(client, services, auth_header):
    services["recipes"].find_all.return_value = [make_recipe("a"), make_recipe("b")]

    response = client.get("/recipes/1", headers=auth_header(1))

    recipes = response.json()["recipes"]
    assert [recipe["id"] for recipe in recipes] == ["a", "b"]
    assert set(recipes[0]) == {"id", "label", "image", "ingredients", "url"}


def test_get_recipe(client, services, auth_header):
    services["recipes"].get_recipe.return_value = make_recipe("r1")

    response = client.get("/recipes/1/r1", headers=auth_header(1))

    assert response.json()["recipe"]["label"] == "Recipe r1"
    services["recipes"].get_recipe.assert_awaited_once_with("r1")


def test_get_missing_recipe(client, services, auth_header):
    services["recipes"].get_recipe.side_effect = RecipeNotFoundError("r9")

    assert_error(client.get("/recipes/1/r9", headers=auth_header(1)), 404, "No recipe: r9")


def test_save_recipe_uses_path_key(client, services, auth_header):
    services["recipes"].save_for_user.return_value = make_recipe("r1")

    response = client.post(
        "/recipes/1/r1",
        json={
            "recipe_id": "ignored",
            "label": "Recipe r1",
            "ingredients": ["1 egg"],
            "calories": 120,
        },
        headers=auth_header(1),
    )

    assert response.status_code == 200
    assert response.json()["recipe"]["label"] == "Recipe r1"
    kwargs = services["recipes"].save_for_user.await_args.kwargs
    assert kwargs["user_id"] == 1
    assert kwargs["recipe_id"] == "r1"


def test_remove_recipe(client, services, auth_header):
    response = client.delete("/recipes/1/r1", headers=auth_header(1))

    assert response.json() == {"deleted": "r1"}
    services["recipes"].remove_from_user.assert_awaited_once_with(1, "r1")


def test_check_url_requires_url(client, services):
    assert_error(client.get("/recipes/check-url"), 400, "URL parameter is required.")


def test_check_url_reachable(client, services):
    services["urls"].check_url.return_value = (True, None)

    response = client.get("/recipes/check-url", params={"url": "https://example.com"})

    assert response.status_code == 200
    assert response.json() == {"status": "OK"}
    services["urls"].check_url.assert_awaited_once_with("https://example.com")


def test_check_url_unreachable(client, services):
    services["urls"].check_url.return_value = (False, "connection refused")

    response = client.get("/recipes/check-url", params={"url": "https://down.example.com"})

    assert response.status_code == 500
    assert response.json() == {"status": "URL is not working", "error": "connection refused"}


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION
# ═══════════════════════════════════════════════════════════════════════════════


def test_unknown_route_uses_envelope(client):
    assert_error(client.get("/nowhere"), 404, "Not Found")


def test_unexpected_error_uses_envelope(client, services, auth_header):
    services["users"].get.side_effect = RuntimeError("boom")

    assert_error(client.get("/users/1", headers=auth_header(1)), 500)


def test_health_and_liveness(client):
    health = client.get("/health").json()

    assert health["status"] == "healthy"
    assert health["service"] == "neweats"
    assert client.get("/live").json() == {"status": "alive"}
