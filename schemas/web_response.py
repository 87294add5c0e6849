"""Uniform response envelope returned by every endpoint."""
from http import HTTPStatus
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class WebResponse(BaseModel):
    code: int
    status: str
    data: Optional[Any] = None


def status_text(code: int) -> str:
    """Upper-cased reason phrase, e.g. 400 -> "BAD REQUEST"."""
    try:
        return HTTPStatus(code).phrase.upper()
    except ValueError:
        return "UNKNOWN"


def envelope(code: int, data: Any = None, headers: Optional[dict] = None) -> JSONResponse:
    body = WebResponse(code=code, status=status_text(code), data=jsonable_encoder(data))
    return JSONResponse(status_code=code, content=body.model_dump(), headers=headers)
