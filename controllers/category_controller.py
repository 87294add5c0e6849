"""Category controller: HTTP handlers for the category CRUD endpoints."""
import json
import logging
import re
from typing import Any

from fastapi import APIRouter, Request, status
from starlette.concurrency import run_in_threadpool

from exceptions import NotFoundError, ValidationError
from schemas.web_response import envelope
from services.category_service import CATEGORY_NOT_FOUND, CategoryService

logger = logging.getLogger(__name__)

_decoder = json.JSONDecoder()

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class CategoryController:
    """
    Owns the category router and delegates every call to a CategoryService.

    Service calls are blocking database work, so they run in the thread pool
    and each in-flight request occupies one worker thread.
    """

    def __init__(self, service: CategoryService, tags=None):
        self.service = service
        self.router = APIRouter(prefix="/categories", tags=tags or ["Categories"])
        self._register_routes()

    def _register_routes(self):
        """Register all CRUD routes."""

        @self.router.post("")
        async def create(request: Request):
            payload = await self._decode_body(request)
            category = await run_in_threadpool(self.service.create, payload)
            return envelope(status.HTTP_200_OK, category)

        @self.router.put("/{category_id}")
        async def update(category_id: str, request: Request):
            id_key = self._parse_id(category_id)
            payload = await self._decode_body(request)
            category = await run_in_threadpool(self.service.update, id_key, payload)
            return envelope(status.HTTP_200_OK, category)

        @self.router.delete("/{category_id}")
        async def delete(category_id: str):
            await run_in_threadpool(self.service.delete, self._parse_id(category_id))
            return envelope(status.HTTP_200_OK)

        @self.router.get("/{category_id}")
        async def find_by_id(category_id: str):
            category = await run_in_threadpool(self.service.find_by_id, self._parse_id(category_id))
            return envelope(status.HTTP_200_OK, category)

        @self.router.get("")
        async def find_all():
            categories = await run_in_threadpool(self.service.find_all)
            return envelope(status.HTTP_200_OK, categories)

        logger.debug(f"CategoryController: Registered {len(self.router.routes)} routes.")

    @staticmethod
    def _parse_id(raw: str) -> int:
        # Only an optionally signed run of ASCII digits within BIGINT range can name a category.
        if not _ID_PATTERN.fullmatch(raw):
            raise NotFoundError(CATEGORY_NOT_FOUND)
        category_id = int(raw)
        if not MIN_ID <= category_id <= MAX_ID:
            raise NotFoundError(CATEGORY_NOT_FOUND)
        return category_id

    @staticmethod
    async def _decode_body(request: Request) -> Any:
        """Decode the first JSON value of the body; trailing bytes are ignored."""
        raw = await request.body()
        try:
            text = raw.decode("utf-8").lstrip()
            payload, _ = _decoder.raw_decode(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValidationError(f"malformed JSON body: {e}") from None
        return payload
