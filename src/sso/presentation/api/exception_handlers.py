"""Centralized exception handlers for the FastAPI application.

Auth errors are mapped to HTTP responses by their error code. Only the
codes below are reported to clients as they are; everything else
becomes an opaque internal error so storage details never leak.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sso_auth import AuthError, ErrorCode

logger = logging.getLogger(__name__)

INVALID_ARGUMENT = "INVALID_ARGUMENT"

# Pydantic error types reported as a missing value
MISSING_VALUE_ERRORS = frozenset({"missing", "string_too_short"})

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - client argument errors
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_APP_ID: status.HTTP_400_BAD_REQUEST,
    # 404 Not Found
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict
    ErrorCode.USER_EXISTS: status.HTTP_409_CONFLICT,
    # 504 Gateway Timeout
    ErrorCode.DEADLINE_EXCEEDED: status.HTTP_504_GATEWAY_TIMEOUT,
}

# Messages for internal failures, keyed by the outermost operation
INTERNAL_ERROR_MESSAGES: dict[str, str] = {
    "Auth.Login": "failed to login",
    "Auth.Register": "failed to register user",
    "Auth.IsAdmin": "failed to check admin status",
}


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


def _internal_message(exc: AuthError) -> str:
    operation = (exc.op or "").split(":", 1)[0]
    return INTERNAL_ERROR_MESSAGES.get(operation, "internal error")


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Map an auth error to its HTTP status by code."""
        status_code = ERROR_CODE_TO_STATUS.get(exc.code)

        if status_code is None:
            logger.error(
                "Internal error on %s %s: %s (code=%s)",
                request.method,
                request.url.path,
                exc,
                exc.code.value,
                exc_info=exc,
            )
            return _create_error_response(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=_internal_message(exc),
                code=ErrorCode.INTERNAL_ERROR.value,
            )

        logger.warning(
            "Auth error on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc,
            exc.code.value,
        )
        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report malformed request fields as invalid arguments."""
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = first.get("loc", ("", "request"))[-1]
        missing = first.get("type") in MISSING_VALUE_ERRORS
        problem = "is required" if missing else "is invalid"
        logger.info(
            "Invalid request on %s %s: %s",
            request.method,
            request.url.path,
            errors,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=f"{field} {problem}",
            code=INVALID_ARGUMENT,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for anything that escaped the service boundary."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="internal error",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
