"""
Identity verification endpoints for API v1.

Reviewers approve or reject the video submissions users send to get a
verified badge.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dating_admin_api.app.core.exceptions import InvalidStatusTransition
from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.verification import VerificationRead, VerificationStatusUpdate
from dating_admin_api.app.services.moderation_service import VerificationService

router = APIRouter()


@router.get("", response_model=List[VerificationRead])
async def list_verifications(store: MemStore = Depends(get_store)) -> List[VerificationRead]:
    return await VerificationService.list_verifications(store)


@router.put("/{verification_id}", response_model=VerificationRead)
async def update_verification_status(
    verification_id: str,
    body: VerificationStatusUpdate,
    store: MemStore = Depends(get_store),
) -> VerificationRead:
    try:
        verification = await VerificationService.update_status(store, verification_id, body.status.value)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    if verification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Verification not found")
    return verification
