"""User domain manages user identity only.

This domain handles:
- User aggregate (identity: email, name, age, password hash, tier)
- Email validation and normalization
- The storage abstraction for users
"""

from users_identity.domain.user.aggregates import User, UserDetails
from users_identity.domain.user.repositories import UserRepository
from users_identity.domain.user.value_objects import (
    Email,
    UserTier,
    normalize_email,
)

__all__ = [
    "Email",
    "User",
    "UserDetails",
    "UserRepository",
    "UserTier",
    "normalize_email",
]
