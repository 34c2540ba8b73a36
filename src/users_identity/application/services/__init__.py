"""Application services for users_identity."""

from users_identity.application.services.user_service import UserService

__all__ = [
    "UserService",
]
