"""FastAPI dependency injection for the users API.

Provides dependencies for:
- Database engine and session maker (relational backend)
- The configured UserRepository backend
- Service instances
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from users_config.settings import get_settings
from users_identity import (
    ApplicationError,
    InMemoryUserRepository,
    PasswordHashingService,
    UserRepository,
    UserService,
)
from users_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get the database URL from application settings.

    Raises
    ------
    ApplicationError
        If no connection string is configured
    """
    url = get_settings().database_url
    if not url:
        msg = "Database connection string not configured"
        raise ApplicationError(msg)
    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine owns the connection pool and is reused across all requests.
    """
    settings = get_settings()
    url = get_database_url()

    pool_options = {}
    if url.startswith("postgresql"):
        pool_options["pool_size"] = settings.database_pool_size

    return create_async_engine(
        url,
        echo=settings.database_echo,
        pool_pre_ping=True,  # Verify connections before use
        **pool_options,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


# -----------------------------------------------------------------------------
# Backends & Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def _get_in_memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def get_user_repository() -> UserRepository:
    """Return the storage backend selected by ``STORAGE_BACKEND``."""
    if get_settings().storage_backend == "postgres":
        return UserRepositorySQLAlchemy(get_session_maker())
    return _get_in_memory_repository()


@lru_cache(maxsize=1)
def get_password_service() -> PasswordHashingService:
    """Get the password hashing service configured from settings."""
    settings = get_settings()
    return PasswordHashingService(
        time_cost=settings.password_time_cost,
        memory_cost=settings.password_memory_cost,
        parallelism=settings.password_parallelism,
    )


def get_user_service(
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    password_service: Annotated[
        PasswordHashingService,
        Depends(get_password_service),
    ],
) -> UserService:
    return UserService(user_repository, password_service)


# Type alias for injected service
UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def reset_dependency_caches() -> None:
    """Clear cached singletons (useful for tests)."""
    get_database_url.cache_clear()
    get_engine.cache_clear()
    get_session_maker.cache_clear()
    _get_in_memory_repository.cache_clear()
    get_password_service.cache_clear()
