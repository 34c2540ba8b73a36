"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from users_identity.domain.user import User, UserRepository, normalize_email
from users_identity.exceptions import (
    DatabaseError,
    UserAlreadyExistsError,
    UserDoesNotExistError,
)
from users_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Each operation checks a connection out of the engine's pool through its
    own session and returns it when the ``async with`` block exits, whether
    the operation succeeded, failed or was cancelled.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def find_by_email(self, email_address: str) -> User:
        email_value = normalize_email(email_address)
        stmt = select(UserModel).where(UserModel.email_address == email_value)

        try:
            async with self._session_maker() as session:
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Failed to look up user %s", email_value)
            raise DatabaseError(str(e)) from e

        if model is None:
            raise UserDoesNotExistError(email_value)

        return self._map_to_domain(model)

    async def store(self, user: User) -> None:
        try:
            async with self._session_maker() as session:
                async with session.begin():
                    session.add(self._map_to_model(user))
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise UserAlreadyExistsError(user.email_address) from e
            logger.exception("Failed to store user %s", user.email_address)
            raise DatabaseError(str(e)) from e
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Failed to store user %s", user.email_address)
            raise DatabaseError(str(e)) from e

        logger.info("Created user: %s", user.email_address)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            email_address=model.email_address,
            name=model.name,
            password_hash=model.password,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            email_address=user.email_address,
            name=user.name,
            password=user.password,
        )
