"""
Administrator authentication endpoints for API v1.

``POST /auth/login`` exchanges email and password for a bearer token,
``GET /auth/me`` resolves the token back to the admin, and
``POST /auth/logout`` exists for the dashboard's sign-out button;
tokens are stateless, so the client simply discards its copy.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from dating_admin_api.app.core.security import get_current_admin
from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.auth import AdminRead, LoginRequest, LoginResponse
from dating_admin_api.app.services.auth_service import AuthService

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, store: MemStore = Depends(get_store)) -> LoginResponse:
    result = await AuthService.login(store, body.email, body.password)
    if result is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return result


@router.post("/logout")
async def logout() -> Dict[str, bool]:
    return {"success": True}


@router.get("/me", response_model=AdminRead)
async def read_current_admin(admin: Dict[str, Any] = Depends(get_current_admin)) -> AdminRead:
    return AdminRead.model_validate(admin)
