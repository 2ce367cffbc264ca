"""
FastAPI router for bookmark endpoints.

Mounted under a configurable prefix (default `/bookmarks`) by `main.py`.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response, status

from . import schemas, service
from .dependencies import get_repository
from .repository import BookmarkRepository

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_bookmark(
    request: Request,
    response: Response,
    payload: Any = Body(default=None),
    repo: BookmarkRepository = Depends(get_repository),
) -> schemas.BookmarkResponse:
    bookmark = await service.create_bookmark(repo, payload)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{bookmark.id}"
    return bookmark


@router.get("")
@router.get("/", include_in_schema=False)
async def list_bookmarks(
    repo: BookmarkRepository = Depends(get_repository),
) -> list[schemas.BookmarkResponse]:
    return await service.list_bookmarks(repo)


@router.get("/{bookmark_id}")
async def get_bookmark(
    bookmark_id: int,
    repo: BookmarkRepository = Depends(get_repository),
) -> schemas.BookmarkResponse:
    return await service.get_bookmark(repo, bookmark_id)


@router.patch("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_bookmark(
    bookmark_id: int,
    payload: Any = Body(default=None),
    repo: BookmarkRepository = Depends(get_repository),
) -> Response:
    """
    Partial update: any non-empty subset of title, url, rating, description.
    """
    await service.update_bookmark(repo, bookmark_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bookmark(
    bookmark_id: int,
    repo: BookmarkRepository = Depends(get_repository),
) -> Response:
    await service.delete_bookmark(repo, bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
