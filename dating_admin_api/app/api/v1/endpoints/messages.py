"""
Message endpoints for API v1.

Operators can browse user messages and flag a message for review.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.message import MessageRead
from dating_admin_api.app.services.message_service import MessageService

router = APIRouter()


@router.get("", response_model=List[MessageRead])
async def list_messages(store: MemStore = Depends(get_store)) -> List[MessageRead]:
    return await MessageService.list_messages(store)


@router.post("/{message_id}/flag", response_model=MessageRead)
async def flag_message(message_id: str, store: MemStore = Depends(get_store)) -> MessageRead:
    message = await MessageService.flag_message(store, message_id)
    if message is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return message
