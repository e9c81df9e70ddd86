"""
Pydantic models for date events.

An event is a meetup proposed by one user (``creator_id``) to an
optional partner.  Operators only change its status.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..core.statuses import EventStatus


class EventCoordinates(BaseModel):
    lat: float = Field(..., examples=[40.7589])
    lng: float = Field(..., examples=[-73.9851])


class EventLocation(BaseModel):
    address: Optional[str] = Field(None, examples=["Starbucks, 123 Main St, New York, NY"])
    coordinates: Optional[EventCoordinates] = None


class EventRead(BaseModel):
    """Schema for reading an event from the API."""

    id: str
    title: Optional[str] = Field(None, examples=["Coffee Date"])
    description: Optional[str] = None
    start_time: Optional[str] = Field(None, examples=["2024-01-20T15:00:00+00:00"])
    location: Optional[EventLocation] = None
    creator_id: Optional[str] = None
    partner_id: Optional[str] = None
    # Kept as a plain string: stored records are not constrained.
    status: Optional[str] = Field(None, examples=["pending"])
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class EventStatusUpdate(BaseModel):
    status: EventStatus = Field(..., examples=["planned"])
