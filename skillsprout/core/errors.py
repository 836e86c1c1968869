"""Service-level errors. Each carries the HTTP status and a caller-safe message."""


class ServiceError(Exception):
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Missing required fields"


class ConflictError(ServiceError):
    """Uniqueness violation."""

    status_code = 409
    default_message = "Already exists"


class AuthError(ServiceError):
    """Bad credentials or a missing / invalid / expired bearer token."""

    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Not found"


class InternalError(ServiceError):
    """Store or crypto failure. The message never includes the underlying error."""

    status_code = 500
