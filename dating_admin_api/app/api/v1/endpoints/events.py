"""
Date event endpoints for API v1.

Events are created by users in the app; operators can only inspect
them and change their status.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dating_admin_api.app.core.exceptions import InvalidStatusTransition
from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.event import EventRead, EventStatusUpdate
from dating_admin_api.app.services.moderation_service import EventService

router = APIRouter()


@router.get("", response_model=List[EventRead])
async def list_events(store: MemStore = Depends(get_store)) -> List[EventRead]:
    return await EventService.list_events(store)


@router.get("/{event_id}", response_model=EventRead)
async def get_event(event_id: str, store: MemStore = Depends(get_store)) -> EventRead:
    event = await EventService.get_event(store, event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.put("/{event_id}", response_model=EventRead)
async def update_event_status(
    event_id: str,
    body: EventStatusUpdate,
    store: MemStore = Depends(get_store),
) -> EventRead:
    """Change an event's status (planned, canceled, declined)."""
    try:
        event = await EventService.update_status(store, event_id, body.status.value)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event
