"""
Bookmark persistence (raw SQL).

This module is where bookmark-related SQL lives. Column names used in
generated statements only ever come from `COLUMNS`; values are always bound
as positional parameters.
"""

from __future__ import annotations

from typing import Any

from core.db import Database, StorageError

COLUMNS = ("title", "url", "description", "rating")

# `id` is a SERIAL (int4) column.
MAX_ID = 2**31 - 1


def _writable(fields: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if k in COLUMNS}


def _affected(status: str) -> int:
    # asyncpg returns the command tag, e.g. "UPDATE 1" / "DELETE 0".
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0


class BookmarkRepository:
    def __init__(self, db: Database) -> None:
        self.db = db

    async def list_all(self) -> list[dict[str, Any]]:
        return await self.db.fetch_all(
            """
            SELECT id, title, url, description, rating
            FROM bookmarks
            ORDER BY id
            """
        )

    async def get_by_id(self, bookmark_id: int) -> dict[str, Any] | None:
        if not 0 < bookmark_id <= MAX_ID:
            return None
        return await self.db.fetch_one(
            """
            SELECT id, title, url, description, rating
            FROM bookmarks
            WHERE id = $1
            """,
            bookmark_id,
        )

    async def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        values = _writable(fields)
        if not values:
            raise StorageError("Nothing to insert.")

        columns = ", ".join(values)
        placeholders = ", ".join(f"${i}" for i in range(1, len(values) + 1))
        row = await self.db.fetch_one(
            f"""
            INSERT INTO bookmarks ({columns})
            VALUES ({placeholders})
            RETURNING id, title, url, description, rating
            """,
            *values.values(),
        )
        if row is None:
            raise StorageError("Failed to create bookmark.")
        return row

    async def update(self, bookmark_id: int, fields: dict[str, Any]) -> bool:
        """
        Overwrite only the given columns. Returns False if no row matched.
        """
        values = _writable(fields)
        if not values:
            return False

        assignments = ", ".join(f"{col} = ${i}" for i, col in enumerate(values, start=2))
        status = await self.db.execute(
            f"""
            UPDATE bookmarks
            SET {assignments}
            WHERE id = $1
            """,
            bookmark_id,
            *values.values(),
        )
        return _affected(status) > 0

    async def delete(self, bookmark_id: int) -> bool:
        status = await self.db.execute(
            """
            DELETE FROM bookmarks
            WHERE id = $1
            """,
            bookmark_id,
        )
        return _affected(status) > 0
