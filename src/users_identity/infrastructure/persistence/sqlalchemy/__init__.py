"""SQLAlchemy implementation for users_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for the users table
- UserRepositorySQLAlchemy: Repository implementation for users
- create_schema / drop_schema: table management helpers
"""

from users_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
    create_schema,
    drop_schema,
)
from users_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from users_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_schema",
    "drop_schema",
]
