"""
API key endpoints for API v1.

Keys are issued to partner integrations.  Revoking a key sets it
inactive; there is no hard delete.  ``DELETE /apikeys/{key}``, which the
dashboard sends from its delete button, revokes the key the same way
so its call log entries keep pointing at an existing record.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.api_key import ApiKeyCreate, ApiKeyRead, ApiKeyUpdate
from dating_admin_api.app.services.api_key_service import ApiKeyService

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="API key not found")


@router.get("", response_model=List[ApiKeyRead])
async def list_api_keys(store: MemStore = Depends(get_store)) -> List[ApiKeyRead]:
    return await ApiKeyService.list_keys(store)


@router.post("", response_model=ApiKeyRead, status_code=status.HTTP_201_CREATED)
async def create_api_key(body: ApiKeyCreate, store: MemStore = Depends(get_store)) -> ApiKeyRead:
    return await ApiKeyService.create_key(store, body.name, body.email)


@router.put("/{key}", response_model=ApiKeyRead)
async def update_api_key(key: str, body: ApiKeyUpdate, store: MemStore = Depends(get_store)) -> ApiKeyRead:
    """Rename a key or change its contact email."""
    api_key = await ApiKeyService.update_key(store, key, body.model_dump(exclude_unset=True))
    if api_key is None:
        raise _not_found()
    return api_key


@router.patch("/{key}/revoke", response_model=ApiKeyRead)
async def revoke_api_key(key: str, store: MemStore = Depends(get_store)) -> ApiKeyRead:
    api_key = await ApiKeyService.set_active(store, key, False)
    if api_key is None:
        raise _not_found()
    return api_key


@router.delete("/{key}", response_model=ApiKeyRead)
async def delete_api_key(key: str, store: MemStore = Depends(get_store)) -> ApiKeyRead:
    api_key = await ApiKeyService.set_active(store, key, False)
    if api_key is None:
        raise _not_found()
    return api_key


@router.patch("/{key}/reactivate", response_model=ApiKeyRead)
async def reactivate_api_key(key: str, store: MemStore = Depends(get_store)) -> ApiKeyRead:
    api_key = await ApiKeyService.set_active(store, key, True)
    if api_key is None:
        raise _not_found()
    return api_key
