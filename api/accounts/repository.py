"""
Account persistence helpers (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_accounts(conn: asyncpg.Connection) -> list[dict]:
    return await db.fetch_all(
        conn,
        """
        SELECT account_id, username, password
        FROM account
        """,
    )


async def create_account(conn: asyncpg.Connection, *, username: str, password: str) -> dict | None:
    return await db.fetch_one(
        conn,
        """
        INSERT INTO account (username, password)
        VALUES ($1, $2)
        RETURNING account_id, username, password
        """,
        username,
        password,
    )


async def get_account_by_credentials(
    conn: asyncpg.Connection,
    *,
    username: str,
    password: str,
) -> dict | None:
    return await db.fetch_one(
        conn,
        """
        SELECT account_id, username, password
        FROM account
        WHERE username = $1
          AND password = $2
        LIMIT 1
        """,
        username,
        password,
    )


async def get_account_by_id(conn: asyncpg.Connection, account_id: int) -> dict | None:
    return await db.fetch_one(
        conn,
        """
        SELECT account_id, username, password
        FROM account
        WHERE account_id = $1
        """,
        account_id,
    )
