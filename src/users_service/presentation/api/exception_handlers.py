"""Centralized exception handlers for the FastAPI application.

ApplicationError subclasses raised by the identity core are mapped to HTTP
responses here. The error detail is logged server-side; clients only get a
generic message and a stable code.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from users_identity.exceptions import ApplicationError, ErrorCode

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "An internal error occurred"

# Anything not listed here is reported as a 500
ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.USER_DOES_NOT_EXIST: status.HTTP_404_NOT_FOUND,
    ErrorCode.INCORRECT_PASSWORD: status.HTTP_401_UNAUTHORIZED,
}

PUBLIC_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.USER_DOES_NOT_EXIST: "User not found",
    ErrorCode.INCORRECT_PASSWORD: "Incorrect password",
}


def status_for_error(exc: ApplicationError) -> int:
    """Determine HTTP status code for an application error."""
    return ERROR_CODE_TO_STATUS.get(
        exc.code,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(ApplicationError)
    async def application_error_handler(
        request: Request,
        exc: ApplicationError,
    ) -> JSONResponse:
        status_code = status_for_error(exc)

        if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Application error on %s %s: %s (code=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
            )
            return _create_error_response(
                status_code=status_code,
                message=INTERNAL_ERROR_MESSAGE,
                code=INTERNAL_ERROR_CODE,
            )

        logger.warning(
            "Request failed on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
        )
        return _create_error_response(
            status_code=status_code,
            message=PUBLIC_MESSAGES[exc.code],
            code=exc.code.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for exceptions the handlers above did not cover."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=INTERNAL_ERROR_MESSAGE,
            code=INTERNAL_ERROR_CODE,
        )
