"""API key middleware.

Runs before routing: a request whose ``X-API-Key`` header does not match the
configured key is answered with 401 and never reaches a handler.
"""
import hmac
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from exceptions import UnauthorizedError
from schemas.web_response import envelope

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


class ApiKeyMiddleware(BaseHTTPMiddleware):

    def __init__(self, app: ASGIApp, api_key: str, header_name: str = API_KEY_HEADER):
        super().__init__(app)
        if not api_key:
            raise ValueError("api_key must not be empty")
        self.api_key = api_key
        self.header_name = header_name

    def is_authorized(self, request: Request) -> bool:
        provided = request.headers.get(self.header_name)
        if provided is None:
            return False
        return hmac.compare_digest(provided.encode("utf-8"), self.api_key.encode("utf-8"))

    async def dispatch(self, request: Request, call_next):
        if not self.is_authorized(request):
            logger.warning(f"Rejected {request.method} {request.url.path}: missing or invalid API key")
            return envelope(UnauthorizedError.status_code)
        return await call_next(request)
