"""Email value object.

Provides validated, normalized email addresses for user identification.
"""

import re
from dataclasses import dataclass

from users_identity.exceptions import InvalidEmailError

# Validates: local@domain.tld (minimum requirements)
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def normalize_email(value: str) -> str:
    """Normalize an address for storage and lookup without validating it."""
    return value.strip().lower()


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    value: str

    def __post_init__(self) -> None:
        if not EMAIL_PATTERN.fullmatch(self.value or ""):
            raise InvalidEmailError

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalize_email(self.value))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
