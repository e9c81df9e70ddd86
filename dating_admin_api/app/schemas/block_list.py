"""Pydantic model for block list entries (one user blocking another)."""

from typing import Optional

from pydantic import BaseModel, Field


class BlockListRead(BaseModel):
    id: str
    user_id: Optional[str] = Field(None, alias="userId")
    blocked_id: Optional[str] = Field(None, alias="blockedId")
    reason: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }
