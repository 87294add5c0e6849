"""Application error taxonomy.

Each error carries the HTTP status it is rendered with, so the handlers in
``controllers.error_handlers`` can turn any of them into the response envelope.
"""
from fastapi import status


class AppError(Exception):
    """Base class for errors that end a request with a structured envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Inbound payload is malformed or breaks a field constraint."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """The requested category does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class StorageError(AppError):
    """Unexpected persistence failure. The transaction was rolled back."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
