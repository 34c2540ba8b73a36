"""Tests for the ApplicationError to HTTP status mapping."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from users_identity import (
    ApplicationError,
    DatabaseError,
    IncorrectPasswordError,
    InvalidEmailError,
    UserAlreadyExistsError,
    UserDoesNotExistError,
    WeakPasswordError,
)
from users_service.presentation.api.exception_handlers import (
    setup_exception_handlers,
    status_for_error,
)


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (UserDoesNotExistError("a@b.com"), 404),
        (IncorrectPasswordError(), 401),
        (UserAlreadyExistsError("a@b.com"), 500),
        (DatabaseError("timeout"), 500),
        (InvalidEmailError(), 500),
        (WeakPasswordError("too short"), 500),
        (ApplicationError("Failed to hash password"), 500),
    ],
)
def test_status_for_error(error, expected):
    assert status_for_error(error) == expected


@pytest.fixture
def failing_client():
    """App whose routes raise the errors under test."""
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/database")
    async def database() -> None:
        raise DatabaseError("postgresql://admin:secret@db:5432 refused")

    @app.get("/missing")
    async def missing() -> None:
        raise UserDoesNotExistError("a@b.com")

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("unexpected")

    return TestClient(app, raise_server_exceptions=False)


def test_infrastructure_detail_is_logged_not_returned(failing_client, caplog):
    with caplog.at_level(logging.ERROR):
        response = failing_client.get("/database")

    assert response.status_code == 500
    assert "secret" not in response.text
    assert response.json()["code"] == "INTERNAL_ERROR"
    assert "secret@db" in caplog.text


def test_not_found_uses_generic_message(failing_client):
    response = failing_client.get("/missing")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "User not found",
        "code": "USER_DOES_NOT_EXIST",
    }


def test_unhandled_exception_is_internal_error(failing_client):
    response = failing_client.get("/boom")

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_ERROR"
    assert "unexpected" not in response.text
