"""In-memory persistence, for tests and local demos."""

from users_identity.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryUserRepository",
]
