"""Error taxonomy shared by the stores and the HTTP handlers."""
from typing import Optional


class TaskManagerError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskManagerError):
    """A field is missing or malformed."""

    status_code = 400
    default_message = "Invalid request"


class ConflictError(TaskManagerError):
    """A unique field is already taken."""

    status_code = 400
    default_message = "Resource already exists"


class AuthenticationError(TaskManagerError):
    status_code = 401
    default_message = "Please authenticate."


class NotFoundError(TaskManagerError):
    """The resource does not exist or is not owned by the caller."""

    status_code = 404
    default_message = "Not found"


class UnexpectedStoreError(TaskManagerError):
    status_code = 500
