"""
Account API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel


class Credentials(BaseModel):
    username: str
    password: str


class Account(BaseModel):
    account_id: int
    username: str
    password: str
