"""Global exception handlers: every failure leaves as a response envelope."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from exceptions import AppError, StorageError
from schemas.web_response import envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        # Details stay in the server log.
        logger.error(f"Storage error on {request.method} {request.url.path}: {exc.message}")
        return envelope(exc.status_code)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.info(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        return envelope(exc.status_code, exc.message or None)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return envelope(status.HTTP_400_BAD_REQUEST, "invalid request")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return envelope(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))
