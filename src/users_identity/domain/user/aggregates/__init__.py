from users_identity.domain.user.aggregates.user import User, UserDetails

__all__ = [
    "User",
    "UserDetails",
]
