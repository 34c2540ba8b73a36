"""SQLAlchemy declarative base and schema helpers for identity models."""

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase


class IdentityBase(DeclarativeBase):
    """Base class for all identity database models."""


async def create_schema(engine: AsyncEngine) -> None:
    """Create the identity tables if they do not exist yet."""
    # Register models with the metadata before creating tables
    import users_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)


async def drop_schema(engine: AsyncEngine) -> None:
    """Drop the identity tables (tests only)."""
    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.drop_all)
