"""
Message persistence helpers (raw SQL).

One statement per function; rows come back as dicts.
"""

from __future__ import annotations

import asyncpg

from core import db

_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"


async def list_messages(conn: asyncpg.Connection) -> list[dict]:
    return await db.fetch_all(
        conn,
        f"""
        SELECT {_COLUMNS}
        FROM message
        """,
    )


async def get_message_by_id(conn: asyncpg.Connection, message_id: int) -> dict | None:
    return await db.fetch_one(
        conn,
        f"""
        SELECT {_COLUMNS}
        FROM message
        WHERE message_id = $1
        """,
        message_id,
    )


async def list_messages_by_account(conn: asyncpg.Connection, account_id: int) -> list[dict]:
    return await db.fetch_all(
        conn,
        f"""
        SELECT {_COLUMNS}
        FROM message
        WHERE posted_by = $1
        """,
        account_id,
    )


async def create_message(
    conn: asyncpg.Connection,
    *,
    posted_by: int,
    message_text: str,
    time_posted_epoch: int,
) -> dict | None:
    return await db.fetch_one(
        conn,
        f"""
        INSERT INTO message (posted_by, message_text, time_posted_epoch)
        VALUES ($1, $2, $3)
        RETURNING {_COLUMNS}
        """,
        posted_by,
        message_text,
        time_posted_epoch,
    )


async def update_message_text(conn: asyncpg.Connection, message_id: int, *, message_text: str) -> dict | None:
    """
    Replace the text only. Returns None when no row has that id.
    """
    return await db.fetch_one(
        conn,
        f"""
        UPDATE message
        SET message_text = $2
        WHERE message_id = $1
        RETURNING {_COLUMNS}
        """,
        message_id,
        message_text,
    )


async def delete_message(conn: asyncpg.Connection, message_id: int) -> dict | None:
    """
    Delete and return the removed row (None if nothing matched).
    """
    return await db.fetch_one(
        conn,
        f"""
        DELETE FROM message
        WHERE message_id = $1
        RETURNING {_COLUMNS}
        """,
        message_id,
    )
