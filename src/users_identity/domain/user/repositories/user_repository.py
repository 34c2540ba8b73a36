"""User repository interface."""

from abc import ABC, abstractmethod

from users_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations must be safe to call from concurrent tasks and must
    raise typed ApplicationError subclasses instead of returning sentinels.
    """

    @abstractmethod
    async def find_by_email(self, email_address: str) -> User:
        """Find a user by their email address.

        Raises UserDoesNotExistError when nothing matches.
        """

    @abstractmethod
    async def store(self, user: User) -> None:
        """Persist a new user.

        Raises UserAlreadyExistsError when the address is taken.
        """
