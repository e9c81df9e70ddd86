"""API call log endpoint for API v1."""

from typing import List

from fastapi import APIRouter, Depends

from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.api_key import ApiLogRead
from dating_admin_api.app.services.api_key_service import ApiLogService

router = APIRouter()


@router.get("", response_model=List[ApiLogRead])
async def list_api_logs(store: MemStore = Depends(get_store)) -> List[ApiLogRead]:
    """Return every recorded API call in the order it was logged."""
    return await ApiLogService.list_logs(store)
