"""Identity services - password hashing."""

from users_identity.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
]
