from typing import Any, Optional


class OrderAppError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500
    kind = "Error"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(OrderAppError):
    status_code = 404
    kind = "NotFound"


class InvalidRequestError(OrderAppError):
    status_code = 400
    kind = "InvalidRequest"


class ConflictError(OrderAppError):
    status_code = 409
    kind = "Conflict"
