"""
Application Error Kinds

Every failure a handler can report maps to one of these classes. The HTTP
layer renders any AppError as ``{"message": ...}`` with the class status code.
"""


class AppError(Exception):
    """Base class for errors that carry an HTTP status code."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(AppError):
    """Malformed identifier or missing/invalid request field."""
    status_code = 400
    default_message = "Bad request"


class Unauthorized(AppError):
    """Missing, invalid or expired bearer token."""
    status_code = 401
    default_message = "Unauthorized access"


class Forbidden(AppError):
    """Authenticated, but not allowed to touch this resource."""
    status_code = 403
    default_message = "Forbidden access"


class NotFound(AppError):
    status_code = 404
    default_message = "No document found with the provided ID"


class GatewayError(AppError):
    """The payment gateway call failed."""
    status_code = 500
    default_message = "Failed to create payment intent"


class InternalError(AppError):
    status_code = 500
