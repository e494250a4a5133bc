from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, ids involved)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Service error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Covers malformed meal plan creation requests: an empty item list, an
    inverted date range or a blank name. http_status is 400.
    """

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(ServiceError):
    """Raised when a requested meal plan or plan item does not exist. http_status is 404."""

    http_status = 404
    default_message = "Not found"


class AuthorizationError(ServiceError):
    """Raised when a caller tries to mutate a meal plan they do not own.

    The check always happens before any mutation. http_status is 403.
    """

    http_status = 403
    default_message = "Forbidden"


class UnauthorizedError(ServiceError):
    """Raised when the caller's identity is missing or malformed. http_status is 401."""

    http_status = 401
    default_message = "Unauthorized"
