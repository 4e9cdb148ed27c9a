# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId


# =============================================================================
# ObjectId Utilities
# =============================================================================

def parse_object_id(value: str) -> ObjectId:
    """
    Parse a 24-character hex string into a MongoDB ObjectId.

    Args:
        value: Identifier as received in the URL path

    Returns:
        The parsed ObjectId

    Raises:
        InvalidId: If the string is not a valid ObjectId

    Example:
        oid = parse_object_id("65a1f0c2e4b0a1b2c3d4e5f6")
    """
    if not isinstance(value, str):
        raise InvalidId(f"{value!r} is not a valid ObjectId, it must be a string")
    return ObjectId(value)


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message (sent as the response body)
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class MyServiceError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="MY_SERVICE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

