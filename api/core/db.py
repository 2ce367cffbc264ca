"""
Async database access (raw SQL) using asyncpg.

`Database` owns one connection pool. The app opens it in its lifespan and
keeps it on `app.state.db` (see `api/main.py`); repositories receive it as
a constructor argument.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings


# Storage failures are explicit and separable from validation errors.
class StorageError(RuntimeError):
    pass


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, dsn: str | None = None) -> None:
        self._dsn = dsn
        self._pool: asyncpg.Pool | None = None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        dsn = _sanitize_database_url(self._dsn or settings.database_url())
        self._pool = await asyncpg.create_pool(
            dsn=dsn,
            min_size=settings.pool_min_size(),
            max_size=settings.pool_max_size(),
            command_timeout=settings.command_timeout(),
        )

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is not initialized. Call connect() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self.pool().fetchrow(sql, *args)
        except asyncpg.PostgresError as exc:
            raise StorageError(str(exc)) from exc
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self.pool().fetch(sql, *args)
        except asyncpg.PostgresError as exc:
            raise StorageError(str(exc)) from exc
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement and return asyncpg's status tag (e.g. "DELETE 1").
        """
        try:
            return await self.pool().execute(sql, *args)
        except asyncpg.PostgresError as exc:
            raise StorageError(str(exc)) from exc
