"""
Pytest configuration for users_identity tests.

Provides users built with the fast password service from the root conftest.
"""

import pytest

from users_identity import InMemoryUserRepository, User

TEST_EMAIL = "test@test.com"
TEST_NAME = "James"
TEST_PASSWORD = "James!23"


@pytest.fixture
def test_user(password_service) -> User:
    """Create a standard test user."""
    return User.create(TEST_EMAIL, TEST_NAME, TEST_PASSWORD, password_service)


@pytest.fixture
def premium_user(test_user) -> User:
    """Create a premium test user."""
    return test_user.upgrade_to_premium()


@pytest.fixture
def memory_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()
