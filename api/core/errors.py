"""
HTTP error shaping shared by every feature.

Error bodies are `{"error": "<message>"}`. Unmatched routes answer 404 with
an empty body.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

ModelT = TypeVar("ModelT", bound=BaseModel)


def _first_error_message(errors: Sequence[Any]) -> str:
    if not errors:
        return "Invalid request."
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    msg = str(first.get("msg") or "Invalid value.")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


def parse_body(model: type[ModelT], body: dict[str, Any]) -> ModelT:
    """
    Coerce an already-checked body into its schema, or answer 400.
    """
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_first_error_message(exc.errors()),
        ) from exc


def echo_body(body: dict[str, Any], payload: BaseModel) -> dict[str, Any]:
    """
    Fields the client sent, with schema fields in their coerced types.
    """
    return {**body, **payload.model_dump(exclude_unset=True)}


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def request_validation_handler(_: Request, exc: RequestValidationError) -> Response:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _first_error_message(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
