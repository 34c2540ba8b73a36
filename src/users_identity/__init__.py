"""Users Identity - user aggregate, credentials and storage.

This module handles all identity-related concerns:
- User aggregate (validation, tiers, password verification)
- Password management (Argon2id hashing, strength rules)
- Storage abstraction with in-memory and SQLAlchemy backends
- Register / login / lookup flows
"""

from users_identity.application import UserService
from users_identity.domain.user import (
    Email,
    User,
    UserDetails,
    UserRepository,
    UserTier,
)
from users_identity.exceptions import (
    ApplicationError,
    DatabaseError,
    ErrorCode,
    IncorrectPasswordError,
    InvalidEmailError,
    InvalidNameError,
    UserAlreadyExistsError,
    UserDoesNotExistError,
    WeakPasswordError,
)
from users_identity.infrastructure.persistence.memory import InMemoryUserRepository
from users_identity.services import PasswordHashingService

__all__ = [
    # Domain - User
    "Email",
    "User",
    "UserDetails",
    "UserRepository",
    "UserTier",
    # Exceptions
    "ApplicationError",
    "DatabaseError",
    "ErrorCode",
    "IncorrectPasswordError",
    "InvalidEmailError",
    "InvalidNameError",
    "UserAlreadyExistsError",
    "UserDoesNotExistError",
    "WeakPasswordError",
    # Persistence
    "InMemoryUserRepository",
    # Services
    "PasswordHashingService",
    # Application Services
    "UserService",
]
