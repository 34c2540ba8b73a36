"""Value objects for the user domain."""

from users_identity.domain.user.value_objects.email import Email, normalize_email
from users_identity.domain.user.value_objects.user_tier import UserTier

__all__ = [
    "Email",
    "UserTier",
    "normalize_email",
]
