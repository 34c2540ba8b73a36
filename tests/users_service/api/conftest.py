"""Pytest fixtures for API tests.

The app runs against a fresh in-memory backend per test, injected through
FastAPI dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient

from users_config.settings import Settings
from users_identity import InMemoryUserRepository
from users_service.presentation.api.app import create_app
from users_service.presentation.api.dependencies import (
    get_password_service,
    get_user_repository,
)


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        api_debug=True,
        storage_backend="memory",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def test_client(api_settings, user_repository, password_service):
    app = create_app(api_settings)
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    app.dependency_overrides[get_password_service] = lambda: password_service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(test_client) -> dict:
    """Register a user through the API and return the request payload."""
    payload = {
        "emailAddress": "a@b.com",
        "name": "James",
        "password": "Testing!23",
    }
    response = test_client.post("/users", json=payload)
    assert response.status_code == 201
    return payload
