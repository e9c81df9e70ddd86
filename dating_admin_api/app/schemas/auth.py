"""
Pydantic models for administrator login.

The stored password hash never leaves the service layer; responses
only carry ``AdminRead``.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., examples=["admin@loveadmin.com"])
    password: str = Field(..., min_length=1)


class AdminRead(BaseModel):
    id: str
    name: str
    email: str
    role: str


class LoginResponse(BaseModel):
    admin: AdminRead
    token: str
