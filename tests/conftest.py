"""
Shared pytest fixtures.

Settings are read once at import time, so the test environment is put in
place before anything from neweats is imported.
"""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "0")

from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from tests.factories import token_for


@pytest.fixture
def auth_header() -> Callable[[Any], dict[str, str]]:
    """Build an Authorization header for a user id."""

    def _header(user_id: Any) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_for(user_id)}"}

    return _header


@pytest.fixture
def app():
    from neweats.api.main import app as application

    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    # Not entered as a context manager: the lifespan would connect to Postgres
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def override(app) -> Callable[[Callable, Any], Any]:
    """Replace a dependency with a fixed object for the test."""

    def _override(dependency: Callable, replacement: Any) -> Any:
        app.dependency_overrides[dependency] = lambda: replacement
        return replacement

    return _override
