"""
Message API endpoints.

Reads and deletes of a missing message answer 200 with an empty body.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Response

from core.dependencies import get_connection

from . import schemas, service

router = APIRouter()


def _message_or_empty(message: schemas.Message | None) -> schemas.Message | Response:
    if message is None:
        return Response(status_code=200)
    return message


@router.post("/messages")
async def post_message(
    request: schemas.MessageCreate,
    conn: asyncpg.Connection = Depends(get_connection),
) -> schemas.Message:
    return await service.post(conn, request)


@router.get("/messages")
async def list_messages(
    conn: asyncpg.Connection = Depends(get_connection),
) -> list[schemas.Message]:
    return await service.get_all(conn)


@router.get("/messages/{message_id}", response_model=None)
async def get_message(
    message_id: int,
    conn: asyncpg.Connection = Depends(get_connection),
) -> schemas.Message | Response:
    return _message_or_empty(await service.get_by_id(conn, message_id))


@router.delete("/messages/{message_id}", response_model=None)
async def delete_message(
    message_id: int,
    conn: asyncpg.Connection = Depends(get_connection),
) -> schemas.Message | Response:
    return _message_or_empty(await service.delete(conn, message_id))


@router.patch("/messages/{message_id}")
async def update_message(
    message_id: int,
    request: schemas.MessageTextUpdate,
    conn: asyncpg.Connection = Depends(get_connection),
) -> schemas.Message:
    return await service.update(conn, message_id, request.message_text)


@router.get("/accounts/{account_id}/messages")
async def list_account_messages(
    account_id: int,
    conn: asyncpg.Connection = Depends(get_connection),
) -> list[schemas.Message]:
    return await service.get_by_account(conn, account_id)
