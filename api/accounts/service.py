"""
Account business rules: registration, login and id lookup.
"""

from __future__ import annotations

import logging

import asyncpg

from core.errors import AuthFailed, ValidationRejected

from . import repository, schemas

MIN_PASSWORD_LENGTH = 4

logger = logging.getLogger(__name__)


def _to_account(row: dict) -> schemas.Account:
    return schemas.Account(
        account_id=int(row["account_id"]),
        username=str(row["username"]),
        password=str(row["password"]),
    )


async def list_accounts(conn: asyncpg.Connection) -> list[schemas.Account]:
    rows = await repository.list_accounts(conn)
    return [_to_account(row) for row in rows]


async def is_username_available(conn: asyncpg.Connection, username: str) -> bool:
    # Exact value equality: no trimming, no case-folding.
    accounts = await list_accounts(conn)
    return not any(account.username == username for account in accounts)


async def register(conn: asyncpg.Connection, payload: schemas.Credentials) -> schemas.Account:
    """
    Persist a new account.

    Rejected when the username is empty, the password is shorter than
    MIN_PASSWORD_LENGTH characters, or the username is already taken.
    """
    if len(payload.username) == 0:
        logger.info("Registration rejected: empty username.")
        raise ValidationRejected("Username must not be empty.")

    if len(payload.password) < MIN_PASSWORD_LENGTH:
        logger.info("Registration rejected: password too short.")
        raise ValidationRejected(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")

    if not await is_username_available(conn, payload.username):
        logger.info("Registration rejected: username %r is taken.", payload.username)
        raise ValidationRejected("Username is already registered.")

    row = await repository.create_account(conn, username=payload.username, password=payload.password)
    if row is None:
        raise ValidationRejected("Account could not be created.")
    return _to_account(row)


async def authenticate(conn: asyncpg.Connection, payload: schemas.Credentials) -> schemas.Account:
    row = await repository.get_account_by_credentials(
        conn,
        username=payload.username,
        password=payload.password,
    )
    if row is None:
        logger.info("Login failed for username %r.", payload.username)
        raise AuthFailed()
    return _to_account(row)


async def lookup_by_id(conn: asyncpg.Connection, account_id: int) -> schemas.Account | None:
    row = await repository.get_account_by_id(conn, account_id)
    if row is None:
        return None
    return _to_account(row)
