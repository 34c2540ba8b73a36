"""Password hashing service using Argon2id.

Provides salted, memory-hard password hashing and verification with
configurable cost parameters, plus the password strength rules applied
when a user is created.
"""

from argon2 import PasswordHasher
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from users_identity.exceptions import (
    ApplicationError,
    IncorrectPasswordError,
    WeakPasswordError,
)


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Hashes are PHC strings (``$argon2id$v=19$m=...,t=...,p=...$salt$hash``)
    so verification needs nothing beyond the stored value.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("Testing!23")
    >>> service.verify(hash, "Testing!23")
    >>> service.verify(hash, "wrong")
    Traceback (most recent call last):
    ...
    users_identity.exceptions.IncorrectPasswordError: The provided password is incorrect
    """

    # Password requirements
    MIN_LENGTH = 8

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        time_cost
            Number of Argon2 iterations.
        memory_cost
            Memory usage in KiB.
        parallelism
            Number of parallel lanes.
        """
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )

    def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh random salt.

        Raises
        ------
        ApplicationError
            If the underlying algorithm fails or the password cannot be
            encoded as UTF-8
        """
        try:
            return self._hasher.hash(password)
        except (HashingError, UnicodeEncodeError) as e:
            msg = "Failed to hash password"
            raise ApplicationError(msg) from e

    def verify(self, password_hash: str, password: str) -> None:
        """Verify a plaintext candidate against a stored hash.

        Parameters
        ----------
        password_hash
            The stored Argon2 hash
        password
            The plaintext candidate

        Raises
        ------
        IncorrectPasswordError
            If the candidate does not match
        ApplicationError
            If the stored hash cannot be parsed
        """
        try:
            self._hasher.verify(password_hash, password)
        except VerifyMismatchError as e:
            raise IncorrectPasswordError from e
        except UnicodeEncodeError as e:
            if e.encoding == "ascii":
                msg = "Failed to parse password hash"
                raise ApplicationError(msg) from e
            # Candidate is not valid UTF-8, so it cannot match any hash
            raise IncorrectPasswordError from e
        except (InvalidHashError, ValueError) as e:
            # Not a PHC string, or not ASCII
            msg = "Failed to parse password hash"
            raise ApplicationError(msg) from e
        except VerificationError as e:
            raise IncorrectPasswordError from e

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a hash was produced with different cost parameters."""
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except (InvalidHashError, ValueError):
            return True

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Rules are checked in order and the first failure is reported:
        - Minimum 8 characters
        - At least one uppercase letter
        - At least one lowercase letter
        - At least one ASCII digit

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters long"
            raise WeakPasswordError(msg)

        if not any(c.isupper() for c in password):
            msg = "Password must contain at least one uppercase letter"
            raise WeakPasswordError(msg)

        if not any(c.islower() for c in password):
            msg = "Password must contain at least one lowercase letter"
            raise WeakPasswordError(msg)

        if not any(c.isascii() and c.isdigit() for c in password):
            msg = "Password must contain at least one digit"
            raise WeakPasswordError(msg)
