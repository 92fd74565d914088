"""
SQLite access for the election tables, raw SQL through aiosqlite.

`Database` wraps the one connection the service uses. The app lifespan opens
it before serving and closes it on shutdown (see `api/main.py`); handlers get
it from `core.dependencies.get_db`.

Placeholders are positional `?` marks, bound by the driver.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import aiosqlite

DEFAULT_DATABASE_PATH = "db/election.db"

logger = logging.getLogger(__name__)


# Store failures are explicit and separable from other runtime errors.
class DatabaseError(RuntimeError):
    pass


@dataclass(frozen=True)
class ExecResult:
    id: int | None
    changes: int


def database_path() -> str:
    return os.environ.get("DATABASE_PATH", "").strip() or DEFAULT_DATABASE_PATH


class Database:
    def __init__(self, path: str | None = None) -> None:
        self.path = path or database_path()
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def open(self) -> None:
        if self._conn is not None:
            return None
        try:
            # isolation_level=None: autocommit, each statement stands alone.
            conn = await aiosqlite.connect(self.path, isolation_level=None)
        except aiosqlite.Error as exc:
            raise DatabaseError(str(exc)) from exc
        conn.row_factory = aiosqlite.Row
        self._conn = conn
        logger.info("database_open path=%s", self.path)

    async def close(self) -> None:
        if self._conn is None:
            return None
        conn, self._conn = self._conn, None
        await conn.close()
        logger.info("database_closed path=%s", self.path)

    def connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("Database is not open. Call open() on startup.")
        return self._conn

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        First matching row as a plain dict, None when nothing matches.
        """
        try:
            async with self.connection().execute(sql, args) as cursor:
                row = await cursor.fetchone()
        except (aiosqlite.Error, OverflowError) as exc:
            raise DatabaseError(str(exc)) from exc
        return dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        try:
            async with self.connection().execute(sql, args) as cursor:
                rows = await cursor.fetchall()
        except (aiosqlite.Error, OverflowError) as exc:
            raise DatabaseError(str(exc)) from exc
        return [dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> ExecResult:
        """
        INSERT/UPDATE/DELETE. `id` is the generated rowid (inserts only),
        `changes` the number of rows the statement touched.
        """
        # Ints past SQLite's 64-bit range fail at bind time with OverflowError.
        try:
            async with self.connection().execute(sql, args) as cursor:
                return ExecResult(id=cursor.lastrowid, changes=cursor.rowcount)
        except (aiosqlite.Error, OverflowError) as exc:
            raise DatabaseError(str(exc)) from exc

    async def execute_script(self, script: str) -> None:
        """
        Load a `;`-separated file such as db/schema.sql or db/seeds.sql.
        """
        try:
            await self.connection().executescript(script)
        except aiosqlite.Error as exc:
            raise DatabaseError(str(exc)) from exc
