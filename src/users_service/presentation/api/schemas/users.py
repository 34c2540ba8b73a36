"""User schemas for request/response models.

Payloads use camelCase keys on the wire (``emailAddress``).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from users_identity.domain.user import User


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RegisterUserRequest(_CamelModel):
    """Request schema for user registration.

    Only the payload shape is checked here; email format and password
    strength are enforced by the User aggregate.
    """

    email_address: str = Field(..., description="User's email address")
    name: str = Field(..., description="Display name")
    password: str = Field(..., description="Plaintext password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "emailAddress": "james@example.com",
                "name": "James",
                "password": "Testing!23",
            },
        },
    )


class LoginRequest(_CamelModel):
    """Request schema for user login."""

    email_address: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "emailAddress": "james@example.com",
                "password": "Testing!23",
            },
        },
    )


class UserResponse(_CamelModel):
    """Public user details. The password hash is never included."""

    email_address: str
    name: str
    age: int | None = None
    tier: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(**user.public_dict())


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    detail: str
    code: str
