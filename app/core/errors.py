"""Application error taxonomy. Each error maps to one HTTP status and error label."""

from typing import Any


class AppError(Exception):
    """Base class for errors that are reported to API clients as JSON."""

    status_code: int = 500
    error: str = "Internal Server Error"
    default_message: str = "Something went wrong"

    def __init__(
        self,
        message: str | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        """Error body: {error, message, details?}."""
        body: dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationFailedError(AppError):
    """Malformed or out-of-range input."""

    status_code = 400
    error = "Validation Error"
    default_message = "Request validation failed"


class UnauthorizedError(AppError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    error = "Unauthorized"
    default_message = "Authentication required"


class ForbiddenError(AppError):
    """Authenticated, but not allowed to act on the resource."""

    status_code = 403
    error = "Forbidden"
    default_message = "You do not have permission to access this resource"


class NotFoundError(AppError):
    status_code = 404
    error = "Not Found"
    default_message = "Resource not found"


class ConflictError(AppError):
    """Duplicate value for a unique field."""

    status_code = 409
    error = "Conflict"
    default_message = "Resource already exists"


class InternalError(AppError):
    status_code = 500
    error = "Internal Server Error"
    default_message = "Something went wrong"
