from users_service.presentation.api.schemas.users import (
    ErrorResponse,
    LoginRequest,
    RegisterUserRequest,
    UserResponse,
)

__all__ = [
    "ErrorResponse",
    "LoginRequest",
    "RegisterUserRequest",
    "UserResponse",
]
