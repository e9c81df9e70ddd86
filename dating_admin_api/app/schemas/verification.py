"""Pydantic models for identity verification submissions."""

from typing import Optional

from pydantic import BaseModel, Field

from ..core.statuses import VerificationStatus


class VerificationRead(BaseModel):
    id: str
    video: Optional[str] = Field(None, examples=["https://example.com/verification1.mp4"])
    user_id: Optional[str] = Field(None, alias="userId")
    status: Optional[str] = Field(None, examples=["pending"])
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }


class VerificationStatusUpdate(BaseModel):
    status: VerificationStatus = Field(..., examples=["approved"])
