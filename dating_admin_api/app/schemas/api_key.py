"""
Pydantic models for API keys and the API call log.

A key record is identified by the key string itself.  Log entries are
written by the request recorder middleware and are never modified.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ApiKeyRead(BaseModel):
    apikey: str = Field(..., examples=["loveapp_0123456789abcdef0123456789abcdef"])
    name: Optional[str] = Field(None, examples=["Mobile App Production"])
    email: Optional[str] = Field(None, examples=["dev@loveapp.com"])
    active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ApiKeyCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Partner Integration"])
    email: Optional[str] = Field(None, examples=["partner@loveapp.com"])


class ApiKeyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None

    model_config = {
        "extra": "forbid",
    }


class ApiLogRead(BaseModel):
    id: str
    apikey: Optional[str] = None
    url: Optional[str] = Field(None, examples=["/api/users"])
    type: Optional[str] = Field(None, examples=["GET"])
    ip: Optional[str] = Field(None, examples=["192.168.1.100"])
    duration: Optional[str] = Field(None, examples=["143ms"])
    location: Optional[str] = None
    by: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
