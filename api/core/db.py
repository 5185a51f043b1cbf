"""
Async database access (raw SQL) using asyncpg.

`Database` owns the connection pool. FastAPI connects it once on startup,
stores it on `app.state.db`, and hands it to route handlers through the
`get_db` dependency (see `api/main.py`). Tests override `get_db` with a fake.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import asyncpg
from fastapi import Request

from .errors import DatabaseConnectionError, InternalError

logger = logging.getLogger(__name__)

# Failures a single statement can surface from the driver or the socket.
DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(
        cls,
        dsn: str,
        *,
        min_size: int = 1,
        max_size: int = 5,
        command_timeout: float = 30.0,
    ) -> Database:
        """
        Open the pool and verify it with a round trip. Any failure is fatal.
        """
        try:
            pool = await asyncpg.create_pool(
                dsn=dsn,
                min_size=min_size,
                max_size=max_size,
                command_timeout=command_timeout,
            )
        except DRIVER_ERRORS as exc:
            raise DatabaseConnectionError(f"Error connecting to the database: {exc}") from exc

        try:
            await pool.fetchval("SELECT 1")
        except DRIVER_ERRORS as exc:
            await pool.close()
            raise DatabaseConnectionError(f"Database connection failed: {exc}") from exc

        logger.info("db_connected min_size=%s max_size=%s", min_size, max_size)
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()
        logger.info("db_closed")

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self._pool.fetchrow(sql, *args)
        except DRIVER_ERRORS as exc:
            raise self._internal(exc) from exc
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self._pool.fetch(sql, *args)
        except DRIVER_ERRORS as exc:
            raise self._internal(exc) from exc
        return [_record_to_dict(r) for r in rows]

    async def fetch_val(self, sql: str, *args: Any) -> Any:
        try:
            return await self._pool.fetchval(sql, *args)
        except DRIVER_ERRORS as exc:
            raise self._internal(exc) from exc

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE). Returns the command status tag,
        e.g. "UPDATE 0".
        """
        try:
            return await self._pool.execute(sql, *args)
        except DRIVER_ERRORS as exc:
            raise self._internal(exc) from exc

    @staticmethod
    def _internal(exc: BaseException) -> InternalError:
        logger.error("db_statement_failed error=%s", exc)
        return InternalError(str(exc) or exc.__class__.__name__)


def get_db(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise InternalError("Database is not initialized.")
    return db
