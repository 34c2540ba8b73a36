"""User service for registration, login and lookup."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from users_identity.domain.user import User
from users_identity.services import PasswordHashingService

if TYPE_CHECKING:
    from users_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for the user request flows.

    Depends only on the UserRepository interface, so the same logic runs
    against any backend. Hashing and verification are CPU-bound and run
    in a worker thread to keep the event loop responsive.

    Every failure is raised as an ApplicationError subclass; mapping those
    to transport statuses is the caller's job.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService | None = None,
    ):
        self._user_repo = user_repository
        self._password_service = password_service or PasswordHashingService()

    async def register(self, email_address: str, name: str, password: str) -> User:
        user = await asyncio.to_thread(
            User.create,
            email_address,
            name,
            password,
            self._password_service,
        )
        await self._user_repo.store(user)

        logger.info("User registered: %s", user.email_address)
        return user

    async def login(self, email_address: str, password: str) -> User:
        user = await self._user_repo.find_by_email(email_address)
        await asyncio.to_thread(
            user.verify_password,
            password,
            self._password_service,
        )

        logger.info("User logged in: %s", user.email_address)
        return user

    async def get_by_email(self, email_address: str) -> User:
        return await self._user_repo.find_by_email(email_address)
