"""Block list endpoint for API v1 (read only)."""

from typing import List

from fastapi import APIRouter, Depends

from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.block_list import BlockListRead
from dating_admin_api.app.services.api_key_service import BlockListService

router = APIRouter()


@router.get("", response_model=List[BlockListRead])
async def list_block_lists(store: MemStore = Depends(get_store)) -> List[BlockListRead]:
    return await BlockListService.list_block_lists(store)
