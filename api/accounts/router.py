"""
Account API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core.dependencies import get_connection

from . import schemas, service

router = APIRouter()


@router.post("/register")
async def register(
    request: schemas.Credentials,
    conn: asyncpg.Connection = Depends(get_connection),
) -> schemas.Account:
    return await service.register(conn, request)


@router.post("/login")
async def login(
    request: schemas.Credentials,
    conn: asyncpg.Connection = Depends(get_connection),
) -> schemas.Account:
    return await service.authenticate(conn, request)
