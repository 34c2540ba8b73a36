"""Application layer: request flows over the user domain."""

from users_identity.application.services import UserService

__all__ = [
    "UserService",
]
