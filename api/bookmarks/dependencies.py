"""
Dependencies wiring bookmark routes to the app's storage handle.
"""

from __future__ import annotations

from fastapi import Depends, Request

from core.db import Database

from .repository import BookmarkRepository


def get_db(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not attached to the app.")
    return db


def get_repository(db: Database = Depends(get_db)) -> BookmarkRepository:
    return BookmarkRepository(db)
