"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created by the application lifespan and kept on `app.state`
(see `api/main.py`). Every helper here takes the connection explicitly;
`core.dependencies.get_connection` hands one out per request.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

SCHEMA_PATH = Path(__file__).with_name("schema.sql")

# Errors that mean "the statement produced nothing usable".
DB_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError, OSError)

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


def apply_schema_on_startup() -> bool:
    return _env_bool("DB_APPLY_SCHEMA", True)


async def create_pool() -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=_env_int("DB_POOL_MIN_SIZE", 1),
        max_size=_env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=_env_int("DB_COMMAND_TIMEOUT_S", 30),
    )
    logger.info("Database pool created.")
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("Database pool closed.")


async def apply_schema(pool: asyncpg.Pool) -> None:
    """
    Create the `account` and `message` tables if they do not exist yet.
    """
    async with pool.acquire() as conn:
        await conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(conn: asyncpg.Connection, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a statement and return a single row as a dict (or None).

    A database error is logged and reported as "no row".
    """
    try:
        row = await conn.fetchrow(sql, *args)
    except DB_ERRORS:
        logger.exception("Database error while running: %s", " ".join(sql.split()))
        return None
    return _record_to_dict(row) if row is not None else None


async def fetch_all(conn: asyncpg.Connection, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts (empty on error).
    """
    try:
        rows = await conn.fetch(sql, *args)
    except DB_ERRORS:
        logger.exception("Database error while running: %s", " ".join(sql.split()))
        return []
    return [_record_to_dict(r) for r in rows]
