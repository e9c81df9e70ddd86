"""Payment transaction endpoints for API v1 (read only)."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.transaction import TransactionRead
from dating_admin_api.app.services.payment_service import PaymentService

router = APIRouter()


@router.get("", response_model=List[TransactionRead])
async def list_transactions(store: MemStore = Depends(get_store)) -> List[TransactionRead]:
    return await PaymentService.list_transactions(store)


@router.get("/{transaction_id}", response_model=TransactionRead)
async def get_transaction(transaction_id: str, store: MemStore = Depends(get_store)) -> TransactionRead:
    transaction = await PaymentService.get_transaction(store, transaction_id)
    if transaction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return transaction
