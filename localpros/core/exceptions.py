# localpros/core/exceptions.py
from typing import Optional


class AppError(Exception):
    """Base exception for errors surfaced to API callers with a typed code."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, original_error: Exception = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.original_error = original_error

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class BadRequest(AppError):
    """Input failed validation or a business-rule precondition."""

    code = "BAD_REQUEST"
    status_code = 400
    default_message = "Bad request"


class Unauthorized(AppError):
    """No actor could be resolved from the inbound session."""

    code = "UNAUTHORIZED"
    status_code = 401
    default_message = "Please login"


class Forbidden(AppError):
    """The actor lacks the capability the operation requires."""

    code = "FORBIDDEN"
    status_code = 403
    default_message = "Forbidden"


class NotFound(AppError):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "Not found"


class Unavailable(AppError):
    """The persistence layer could not be reached for a write."""

    code = "UNAVAILABLE"
    status_code = 503
    default_message = "Database not available"
