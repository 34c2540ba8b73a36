"""Users router for registration, login and lookup.

Errors raised by UserService propagate to the centralized exception
handlers, which turn them into 404/401/500 responses.
"""

from fastapi import APIRouter, status

from users_service.presentation.api.dependencies import UserServiceDep
from users_service.presentation.api.schemas import (
    ErrorResponse,
    LoginRequest,
    RegisterUserRequest,
    UserResponse,
)

router = APIRouter()


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        500: {"model": ErrorResponse, "description": "Registration failed"},
    },
)
async def register_user(
    request: RegisterUserRequest,
    user_service: UserServiceDep,
) -> UserResponse:
    user = await user_service.register(
        email_address=request.email_address,
        name=request.name,
        password=request.password,
    )
    return UserResponse.from_domain(user)


@router.post(
    "/login",
    summary="Check a user's password",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Incorrect password"},
        404: {"model": ErrorResponse, "description": "User not found"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)
async def login(
    request: LoginRequest,
    user_service: UserServiceDep,
) -> UserResponse:
    user = await user_service.login(
        email_address=request.email_address,
        password=request.password,
    )
    return UserResponse.from_domain(user)


@router.get(
    "/users/{email_address}",
    summary="Get user details by email address",
    responses={
        200: {"description": "User found"},
        404: {"model": ErrorResponse, "description": "User not found"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)
async def get_user_details(
    email_address: str,
    user_service: UserServiceDep,
) -> UserResponse:
    user = await user_service.get_by_email(email_address)
    return UserResponse.from_domain(user)
