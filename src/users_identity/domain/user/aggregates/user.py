"""User aggregate for identity concerns only."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from functools import lru_cache
from typing import Any, Union

from users_identity.domain.user.value_objects import Email, UserTier
from users_identity.exceptions import InvalidNameError
from users_identity.services.password_service import PasswordHashingService


@lru_cache(maxsize=1)
def _default_password_service() -> PasswordHashingService:
    return PasswordHashingService()


@dataclass
class UserDetails:
    """Identity record shared by every tier.

    ``password`` always holds the Argon2 hash, never the plaintext.
    """

    email_address: str
    name: str
    password: str = field(repr=False)
    age: int | None = None

    def public_dict(self) -> dict[str, Any]:
        """Serializable view with the password hash removed."""
        data = asdict(self)
        data.pop("password")
        return data


class User:
    """
    User aggregate root.

    Wraps one UserDetails record plus a membership tier. Identity is the
    email address: two users with the same address are equal regardless
    of tier.
    """

    def __init__(
        self,
        details: UserDetails,
        tier: Union[str, UserTier] = UserTier.STANDARD,
    ):
        self._details = details
        self._tier = tier if isinstance(tier, UserTier) else UserTier(tier)

    @property
    def details(self) -> UserDetails:
        return replace(self._details)

    @property
    def email_address(self) -> str:
        return self._details.email_address

    @property
    def name(self) -> str:
        return self._details.name

    @property
    def age(self) -> int | None:
        return self._details.age

    @property
    def password(self) -> str:
        """The stored password hash."""
        return self._details.password

    @property
    def tier(self) -> UserTier:
        return self._tier

    @property
    def is_premium(self) -> bool:
        return self._tier == UserTier.PREMIUM

    def update_name(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise InvalidNameError
        self._details.name = new_name

    def update_age(self, new_age: int) -> None:
        self._details.age = new_age

    def upgrade_to_premium(self) -> User:
        """Return the premium version of this user.

        Already-premium users come back as an equivalent premium user.
        """
        return User(replace(self._details), tier=UserTier.PREMIUM)

    def verify_password(
        self,
        password: str,
        password_service: PasswordHashingService | None = None,
    ) -> None:
        """Check a plaintext candidate against the stored hash.

        Raises
        ------
        IncorrectPasswordError
            If the candidate does not match
        ApplicationError
            If the stored hash cannot be parsed
        """
        service = password_service or _default_password_service()
        service.verify(self._details.password, password)

    def public_dict(self) -> dict[str, Any]:
        data = self._details.public_dict()
        data["tier"] = self._tier.value
        return data

    def copy(self) -> User:
        return User(replace(self._details), tier=self._tier)

    @classmethod
    def create(
        cls,
        email_address: Union[str, Email],
        name: str,
        password: str,
        password_service: PasswordHashingService | None = None,
    ) -> User:
        """Validate the input and hash the password in one step.

        Raises
        ------
        InvalidEmailError
            If the address is malformed
        WeakPasswordError
            If the password breaks a strength rule
        InvalidNameError
            If the name is blank
        ApplicationError
            If hashing fails
        """
        service = password_service or _default_password_service()

        email = email_address if isinstance(email_address, Email) else Email(
            email_address,
        )
        service.validate_strength(password)
        if not name or not name.strip():
            raise InvalidNameError

        return cls(
            UserDetails(
                email_address=email.value,
                name=name,
                password=service.hash(password),
            ),
        )

    @classmethod
    def reconstitute(
        cls,
        email_address: str,
        name: str,
        password_hash: str,
        age: int | None = None,
        tier: Union[str, UserTier] = UserTier.STANDARD,
    ) -> User:
        """Rebuild a user from trusted storage. No validation, no hashing."""
        return cls(
            UserDetails(
                email_address=email_address,
                name=name,
                password=password_hash,
                age=age,
            ),
            tier=tier,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._details.email_address == other._details.email_address

    def __hash__(self) -> int:
        return hash(self._details.email_address)

    def __repr__(self) -> str:
        return (
            f"User(email_address={self._details.email_address}, "
            f"tier={self._tier.value})"
        )
