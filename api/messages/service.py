"""
Message business rules.

- post: 1..255 characters of text and an existing author account
- update: text only, same length rule, the message must exist
- delete: idempotent, returns the removed message or None
"""

from __future__ import annotations

import logging

import asyncpg

from accounts import service as account_service
from core.errors import ValidationRejected

from . import repository, schemas

MAX_MESSAGE_LENGTH = 255

logger = logging.getLogger(__name__)


def _to_message(row: dict) -> schemas.Message:
    return schemas.Message(
        message_id=int(row["message_id"]),
        posted_by=int(row["posted_by"]),
        message_text=str(row["message_text"]),
        time_posted_epoch=int(row["time_posted_epoch"]),
    )


def validate_text(message_text: str) -> None:
    if len(message_text) == 0:
        raise ValidationRejected("Message text must not be empty.")
    if len(message_text) > MAX_MESSAGE_LENGTH:
        raise ValidationRejected(f"Message text must be at most {MAX_MESSAGE_LENGTH} characters.")


async def post(conn: asyncpg.Connection, payload: schemas.MessageCreate) -> schemas.Message:
    try:
        validate_text(payload.message_text)
    except ValidationRejected as exc:
        logger.info("Post rejected: %s", exc.detail)
        raise

    author = await account_service.lookup_by_id(conn, payload.posted_by)
    if author is None:
        logger.info("Post rejected: account %s does not exist.", payload.posted_by)
        raise ValidationRejected("posted_by does not reference an existing account.")

    row = await repository.create_message(
        conn,
        posted_by=payload.posted_by,
        message_text=payload.message_text,
        time_posted_epoch=payload.time_posted_epoch,
    )
    if row is None:
        raise ValidationRejected("Message could not be created.")
    return _to_message(row)


async def get_all(conn: asyncpg.Connection) -> list[schemas.Message]:
    rows = await repository.list_messages(conn)
    return [_to_message(row) for row in rows]


async def get_by_id(conn: asyncpg.Connection, message_id: int) -> schemas.Message | None:
    row = await repository.get_message_by_id(conn, message_id)
    return _to_message(row) if row is not None else None


async def get_by_account(conn: asyncpg.Connection, account_id: int) -> list[schemas.Message]:
    rows = await repository.list_messages_by_account(conn, account_id)
    return [_to_message(row) for row in rows]


async def update(conn: asyncpg.Connection, message_id: int, message_text: str) -> schemas.Message:
    try:
        validate_text(message_text)
    except ValidationRejected as exc:
        logger.info("Update of message %s rejected: %s", message_id, exc.detail)
        raise

    row = await repository.update_message_text(conn, message_id, message_text=message_text)
    if row is None:
        logger.info("Update rejected: message %s does not exist.", message_id)
        raise ValidationRejected("Message does not exist.")
    return _to_message(row)


async def delete(conn: asyncpg.Connection, message_id: int) -> schemas.Message | None:
    row = await repository.delete_message(conn, message_id)
    return _to_message(row) if row is not None else None
