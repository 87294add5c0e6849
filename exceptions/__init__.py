from exceptions.app_errors import (
    AppError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "AppError",
    "NotFoundError",
    "StorageError",
    "UnauthorizedError",
    "ValidationError",
]
