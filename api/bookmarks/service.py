"""
Bookmark business logic.

Each operation is a short pipeline: validate -> (existence check) ->
persist -> sanitize. Failures are raised as domain errors and turned into
HTTP responses by the handlers registered in `errors.py`.
"""

from __future__ import annotations

import logging
from typing import Any

from . import schemas
from .repository import BookmarkRepository
from .sanitize import sanitize_bookmark
from .validation import validate_bookmark

logger = logging.getLogger(__name__)


class BookmarkNotFoundError(LookupError):
    def __init__(self, bookmark_id: int) -> None:
        super().__init__("Bookmark Not Found")
        self.bookmark_id = bookmark_id


async def _require(repo: BookmarkRepository, bookmark_id: int) -> dict[str, Any]:
    row = await repo.get_by_id(bookmark_id)
    if row is None:
        raise BookmarkNotFoundError(bookmark_id)
    return row


async def create_bookmark(repo: BookmarkRepository, payload: Any) -> schemas.BookmarkResponse:
    fields = validate_bookmark(payload, require_all=True)
    row = await repo.create(fields.as_columns())
    logger.info("bookmark_created id=%s", row["id"])
    return sanitize_bookmark(row)


async def list_bookmarks(repo: BookmarkRepository) -> list[schemas.BookmarkResponse]:
    rows = await repo.list_all()
    return [sanitize_bookmark(row) for row in rows]


async def get_bookmark(repo: BookmarkRepository, bookmark_id: int) -> schemas.BookmarkResponse:
    row = await _require(repo, bookmark_id)
    return sanitize_bookmark(row)


async def update_bookmark(repo: BookmarkRepository, bookmark_id: int, payload: Any) -> None:
    await _require(repo, bookmark_id)
    fields = validate_bookmark(payload, require_all=False)

    # No transaction: a concurrent delete between the check and here is a no-op.
    if not await repo.update(bookmark_id, fields.as_columns()):
        logger.warning("bookmark_update_missed id=%s", bookmark_id)
        return None
    logger.info("bookmark_updated id=%s fields=%s", bookmark_id, ",".join(fields.as_columns()))


async def delete_bookmark(repo: BookmarkRepository, bookmark_id: int) -> None:
    await _require(repo, bookmark_id)
    if not await repo.delete(bookmark_id):
        logger.warning("bookmark_delete_missed id=%s", bookmark_id)
        return None
    logger.info("bookmark_deleted id=%s", bookmark_id)
