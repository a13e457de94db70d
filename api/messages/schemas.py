"""
Message API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel


class MessageCreate(BaseModel):
    posted_by: int
    message_text: str
    time_posted_epoch: int


class MessageTextUpdate(BaseModel):
    message_text: str


class Message(BaseModel):
    message_id: int
    posted_by: int
    message_text: str
    time_posted_epoch: int
