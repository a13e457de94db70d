"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

import asyncpg
from fastapi import Request

from core import db

logger = logging.getLogger(__name__)


async def get_connection(request: Request) -> AsyncIterator[asyncpg.Connection]:
    """
    Acquire one pooled connection for the request and release it afterwards.
    """
    pool: asyncpg.Pool | None = getattr(request.app.state, "db_pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. The app lifespan creates it on startup.")

    try:
        conn = await pool.acquire()
    except db.DB_ERRORS:
        logger.exception("Could not acquire a database connection.")
        raise

    try:
        yield conn
    finally:
        await pool.release(conn)
