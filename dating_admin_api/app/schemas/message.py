"""Pydantic models for user-to-user messages."""

from typing import Optional

from pydantic import BaseModel, Field


class MessageRead(BaseModel):
    id: str
    channel: Optional[str] = Field(None, examples=["ch-1a2b3c4d"])
    content: Optional[str] = None
    type: Optional[str] = Field(None, examples=["text"])
    sender: Optional[str] = None
    recipient: Optional[str] = None
    read: bool = False
    deleted: bool = False
    flagged: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
