import copy
import itertools
from typing import Any

from bookmarks.repository import COLUMNS, BookmarkRepository


def make_bookmarks_array() -> list[dict[str, Any]]:
    return [
        {
            "id": 1,
            "title": "Google",
            "url": "https://google.com",
            "description": "Search for stuff",
            "rating": 5,
        },
        {
            "id": 2,
            "title": "Facebook",
            "url": "https://facebook.com",
            "description": "Poke people",
            "rating": 4,
        },
        {
            "id": 3,
            "title": "CSS Legends",
            "url": "https://css-legends.com",
            "description": "Learn CSS by playing a game",
            "rating": 5,
        },
    ]


class InMemoryBookmarkRepository(BookmarkRepository):
    """Stand-in for the bookmarks table; keeps raw rows in insertion order."""

    def __init__(self) -> None:
        super().__init__(db=None)
        self.rows: dict[int, dict[str, Any]] = {}
        self._ids = itertools.count(1)

    def insert(self, *rows: dict[str, Any]) -> None:
        for row in rows:
            record = {"description": None, **copy.deepcopy(row)}
            self.rows[int(record["id"])] = record
        top = max(self.rows, default=0)
        self._ids = itertools.count(top + 1)

    async def list_all(self) -> list[dict[str, Any]]:
        return [dict(row) for row in self.rows.values()]

    async def get_by_id(self, bookmark_id: int) -> dict[str, Any] | None:
        row = self.rows.get(bookmark_id)
        return dict(row) if row is not None else None

    async def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        row = {"id": next(self._ids), "description": None}
        row.update({k: v for k, v in fields.items() if k in COLUMNS})
        self.rows[row["id"]] = row
        return dict(row)

    async def update(self, bookmark_id: int, fields: dict[str, Any]) -> bool:
        row = self.rows.get(bookmark_id)
        if row is None:
            return False
        row.update({k: v for k, v in fields.items() if k in COLUMNS})
        return True

    async def delete(self, bookmark_id: int) -> bool:
        return self.rows.pop(bookmark_id, None) is not None


