"""In-memory implementation of UserRepository."""

import asyncio
import logging

from users_identity.domain.user import User, UserRepository, normalize_email
from users_identity.exceptions import UserAlreadyExistsError, UserDoesNotExistError

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a list guarded by a single lock.

    Every read and write holds the lock for the whole scan or insert.
    Users go in and come out as copies, so no caller ever holds a
    reference to a stored entry.
    """

    def __init__(self) -> None:
        self._users: list[User] = []
        self._lock = asyncio.Lock()

    async def find_by_email(self, email_address: str) -> User:
        email_value = normalize_email(email_address)

        async with self._lock:
            for user in self._users:
                if user.email_address == email_value:
                    return user.copy()

        raise UserDoesNotExistError(email_value)

    async def store(self, user: User) -> None:
        async with self._lock:
            if any(u.email_address == user.email_address for u in self._users):
                raise UserAlreadyExistsError(user.email_address)
            self._users.append(user.copy())

        logger.info("Created user: %s", user.email_address)

    async def count(self) -> int:
        async with self._lock:
            return len(self._users)
