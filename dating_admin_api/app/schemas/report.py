"""
Pydantic models for moderation reports.

A report links the reporting user (``userId``) with the reported
user (``violatorId``).  Moderators move it through the statuses in
``core.statuses.ReportStatus``.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..core.statuses import ReportStatus


class ReportRead(BaseModel):
    id: str
    user_id: Optional[str] = Field(None, alias="userId")
    violator_id: Optional[str] = Field(None, alias="violatorId")
    reason: Optional[str] = Field(None, examples=["Harassment"])
    description: Optional[str] = None
    status: Optional[str] = Field(None, examples=["pending"])
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }


class ReportStatusUpdate(BaseModel):
    status: ReportStatus = Field(..., examples=["resolved"])
