"""
Pydantic models for payment transactions.

``amount`` stays a decimal string exactly as recorded by the payment
provider; it is only parsed when revenue is aggregated.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TransactionRead(BaseModel):
    id: str = Field(..., examples=["TXN-001"])
    amount: Optional[str] = Field(None, examples=["29.99"])
    reference_id: Optional[str] = Field(None, alias="referenceId", examples=["REF-001"])
    narration: Optional[str] = None
    plan: Optional[str] = Field(None, examples=["Premium Monthly"])
    subscribed: bool = False
    user_id: Optional[str] = Field(None, alias="userId")
    approved_by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }
