"""
Read access to payment transactions.

Transactions are written by the payment provider integration; the
back office only lists them.  Revenue and failure counts live in the
dashboard statistics.
"""

from typing import List, Optional

from ..core.store import MemStore
from ..schemas.transaction import TransactionRead


class PaymentService:
    """Service for payment transactions."""

    @classmethod
    async def list_transactions(cls, store: MemStore) -> List[TransactionRead]:
        return [TransactionRead.model_validate(t) for t in store.get_all_transactions()]

    @classmethod
    async def get_transaction(cls, store: MemStore, transaction_id: str) -> Optional[TransactionRead]:
        record = store.get_transaction(transaction_id)
        return TransactionRead.model_validate(record) if record is not None else None
