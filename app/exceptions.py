# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Every failure is answered with the error's message as a plain body and no
# Content-Type header. By default all of them are 500. With STRICT_ERRORS
# enabled, client errors get their own status:
#
#   INVALID_IDENTIFIER -> 400
#   MALFORMED_INPUT    -> 400
#   PERSON_NOT_FOUND   -> 404
#   STORE_ERROR        -> 500
# =============================================================================

import logging

from fastapi import Request, Response
from fastapi.exception_handlers import http_exception_handler as default_http_exception_handler
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.dependencies import is_strict_errors
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_STATUS = 500

STRICT_STATUS_CODES: dict[str, int] = {
    "INVALID_IDENTIFIER": 400,
    "MALFORMED_INPUT": 400,
    "PERSON_NOT_FOUND": 404,
    "STORE_ERROR": 500,
}


# =============================================================================
# Request Exceptions
# =============================================================================

class MalformedInputError(ApplicationError):
    """Raised when a request body can't be decoded into a Person."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(
            message=message,
            code="MALFORMED_INPUT",
            suggestion='Send a JSON object like {"name": "Ann", "age": 30, "address": "1 Main St"}',
            details={"errors": errors or []},
        )

    @classmethod
    def from_errors(
        cls,
        errors: list,
        location_prefix: tuple = (),
    ) -> "MalformedInputError":
        """
        Flatten pydantic validation errors into one line of text.

        Example:
            "body.age: Input should be a valid integer"
        """
        errors = list(errors)
        parts = []
        for error in errors:
            location = ".".join(
                str(part) for part in (*location_prefix, *error.get("loc", ()))
            )
            parts.append(f"{location}: {error.get('msg', 'invalid input')}")
        message = "; ".join(parts) or "request body could not be decoded"
        return cls(message, errors=[{"loc": e.get("loc"), "msg": e.get("msg")} for e in errors])


# =============================================================================
# Status Mapping
# =============================================================================

def status_for(exc: ApplicationError, strict: bool) -> int:
    """Pick the HTTP status for an error under the configured mode."""
    if not strict:
        return DEFAULT_ERROR_STATUS
    return STRICT_STATUS_CODES.get(exc.code, DEFAULT_ERROR_STATUS)


def _plain_error(message: str, status_code: int) -> Response:
    # No media_type: the response carries no Content-Type header
    return Response(content=message, status_code=status_code)


# =============================================================================
# Exception Handlers
# =============================================================================

async def application_exception_handler(
    request: Request,
    exc: ApplicationError,
) -> Response:
    """
    Convert an ApplicationError into a plain-text error response.

    Logs the error with its code so the cause is visible server-side even
    when the status code doesn't distinguish it.
    """
    logger.error(
        f"Error: [{exc.code}] {exc.message} ({request.method} {request.url.path})"
        + (f" Suggestion: {exc.suggestion}" if exc.suggestion else "")
    )
    return _plain_error(exc.message, status_for(exc, is_strict_errors(request)))


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> Response:
    """
    Handle body decoding errors.

    Replaces FastAPI's default 422 JSON response with MalformedInputError.
    """
    return await application_exception_handler(
        request, MalformedInputError.from_errors(exc.errors())
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> Response:
    """
    Handle HTTPExceptions raised by the framework.

    A 400 means the request could not be read (e.g. an undecodable body) and
    is reported as MalformedInputError. Anything else, such as an unknown
    route or method, keeps FastAPI's default response.
    """
    if exc.status_code == 400:
        return await application_exception_handler(
            request, MalformedInputError(str(exc.detail))
        )
    return await default_http_exception_handler(request, exc)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception,
) -> Response:
    """Handle anything that escaped the handlers above."""
    logger.exception(f"Unexpected error: {exc}")
    return _plain_error(str(exc), DEFAULT_ERROR_STATUS)
