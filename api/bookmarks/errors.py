"""
Error-to-response mapping for the bookmarks API.

Client errors are answered in plain text; anything unexpected is logged and
becomes a bare 500. The server re-raises after a 500 and prints the
traceback itself, so it is not logged again here.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response

from .service import BookmarkNotFoundError
from .validation import BookmarkValidationError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Bookmark Not Found"
INVALID_BODY_MESSAGE = "Request body must be valid JSON"


async def _validation_error(_: Request, exc: Exception) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> Response:
    # Undecodable bodies are client errors like any other payload problem;
    # path/query errors keep FastAPI's default 422.
    if any(tuple(err.get("loc") or ())[:1] == ("body",) for err in exc.errors()):
        return PlainTextResponse(INVALID_BODY_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)
    return await request_validation_exception_handler(request, exc)


async def _not_found(_: Request, exc: Exception) -> PlainTextResponse:
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


async def _unexpected(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error(
        "request_failed method=%s path=%s error=%s",
        request.method,
        request.url.path,
        type(exc).__name__,
    )
    return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookmarkValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(BookmarkNotFoundError, _not_found)
    app.add_exception_handler(Exception, _unexpected)
