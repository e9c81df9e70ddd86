"""
User endpoints for API v1.

Operators can list users with the dashboard filters, open a single
profile and edit it.  Edits are partial: only fields present in the
body change.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.user import UserRead, UserUpdate
from dating_admin_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(
    status_filter: Optional[str] = Query(None, alias="status", description="Active, Inactive or All Users"),
    verification: Optional[str] = Query(None, description="Verified, Unverified or All"),
    subscription: Optional[str] = Query(None, description="Accepted for dashboard compatibility; not applied"),
    store: MemStore = Depends(get_store),
) -> List[UserRead]:
    """List users, optionally filtered by activity and verification."""
    return await UserService.list_users(
        store,
        status=status_filter,
        verification=verification,
        subscription=subscription,
    )


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, store: MemStore = Depends(get_store)) -> UserRead:
    user = await UserService.get_user(store, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    updates: UserUpdate,
    store: MemStore = Depends(get_store),
) -> UserRead:
    """Update a user's profile or flags.

    Fields omitted from the body are left untouched; a ``location``
    in the body replaces the stored location entirely.
    """
    user = await UserService.update_user(store, user_id, updates.model_dump(exclude_unset=True))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
