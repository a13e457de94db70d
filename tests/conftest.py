import itertools

import pytest
from fastapi.testclient import TestClient

from accounts import repository as account_repository
from core.dependencies import get_connection
from main import create_app
from messages import repository as message_repository

ACCOUNT_FUNCTIONS = (
    "list_accounts",
    "create_account",
    "get_account_by_credentials",
    "get_account_by_id",
)
MESSAGE_FUNCTIONS = (
    "list_messages",
    "get_message_by_id",
    "list_messages_by_account",
    "create_message",
    "update_message_text",
    "delete_message",
)

# Stand-in for the asyncpg connection; the in-memory store ignores it.
FAKE_CONN = object()


class FakeConnection:
    """Records statements and returns canned rows, like an asyncpg connection would."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    async def fetchrow(self, sql, *args):
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error
        return self.rows[0] if self.rows else None

    async def fetch(self, sql, *args):
        self.calls.append((sql, args))
        if self.error is not None:
            raise self.error
        return self.rows


class InMemoryStore:
    """Replaces the SQL repositories with dict-backed tables."""

    def __init__(self):
        self.accounts: dict[int, dict] = {}
        self.messages: dict[int, dict] = {}
        self._account_ids = itertools.count(1)
        self._message_ids = itertools.count(1)

    # account table
    async def list_accounts(self, conn):
        return [dict(row) for row in self.accounts.values()]

    async def create_account(self, conn, *, username, password):
        account_id = next(self._account_ids)
        self.accounts[account_id] = {"account_id": account_id, "username": username, "password": password}
        return dict(self.accounts[account_id])

    async def get_account_by_credentials(self, conn, *, username, password):
        for row in self.accounts.values():
            if row["username"] == username and row["password"] == password:
                return dict(row)
        return None

    async def get_account_by_id(self, conn, account_id):
        row = self.accounts.get(account_id)
        return dict(row) if row is not None else None

    # message table
    async def list_messages(self, conn):
        return [dict(row) for row in self.messages.values()]

    async def get_message_by_id(self, conn, message_id):
        row = self.messages.get(message_id)
        return dict(row) if row is not None else None

    async def list_messages_by_account(self, conn, account_id):
        return [dict(row) for row in self.messages.values() if row["posted_by"] == account_id]

    async def create_message(self, conn, *, posted_by, message_text, time_posted_epoch):
        message_id = next(self._message_ids)
        self.messages[message_id] = {
            "message_id": message_id,
            "posted_by": posted_by,
            "message_text": message_text,
            "time_posted_epoch": time_posted_epoch,
        }
        return dict(self.messages[message_id])

    async def update_message_text(self, conn, message_id, *, message_text):
        row = self.messages.get(message_id)
        if row is None:
            return None
        row["message_text"] = message_text
        return dict(row)

    async def delete_message(self, conn, message_id):
        row = self.messages.pop(message_id, None)
        return dict(row) if row is not None else None


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def store(monkeypatch):
    """In-memory tables wired in place of both repositories."""
    fake = InMemoryStore()
    for name in ACCOUNT_FUNCTIONS:
        monkeypatch.setattr(account_repository, name, getattr(fake, name))
    for name in MESSAGE_FUNCTIONS:
        monkeypatch.setattr(message_repository, name, getattr(fake, name))
    return fake


@pytest.fixture()
def app(store):
    """A fresh app whose requests never touch a real database."""
    app = create_app()

    async def _fake_connection():
        yield FAKE_CONN

    app.dependency_overrides[get_connection] = _fake_connection
    return app


@pytest.fixture()
def client(app):
    # Not used as a context manager, so the lifespan (and its DB pool) never runs.
    return TestClient(app)


@pytest.fixture()
def account(client):
    response = client.post("/register", json={"username": "alice", "password": "pw12"})
    assert response.status_code == 200
    return response.json()
