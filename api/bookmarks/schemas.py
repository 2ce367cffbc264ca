"""
Pydantic schemas for bookmark responses.

Request bodies are taken as raw JSON and checked by `validation.py` so
that errors come back as plain-text 400s instead of 422 detail lists.
"""

from __future__ import annotations

from pydantic import BaseModel


class BookmarkResponse(BaseModel):
    id: int
    title: str
    url: str
    description: str | None = None
    rating: int
