"""
Administrator authentication.

Admins are looked up by email and their password is checked against
the stored salted hash.  Inactive admins cannot log in.  A successful
login returns a signed bearer token.
"""

import logging
from typing import Optional

from ..core.security import create_access_token, verify_password
from ..core.store import MemStore
from ..schemas.auth import AdminRead, LoginResponse


logger = logging.getLogger(__name__)


class AuthService:
    """Login for back-office administrators."""

    @classmethod
    async def authenticate(cls, store: MemStore, email: str, password: str) -> Optional[AdminRead]:
        """Return the admin if the credentials match, otherwise ``None``."""
        admin = store.get_admin_by_email(email)
        if admin is None:
            logger.info("Login failed for unknown email %s", email)
            return None
        if not verify_password(password, admin.get("password")):
            logger.info("Login failed for %s: wrong password", email)
            return None
        if not admin.get("active", False):
            logger.info("Login refused for inactive admin %s", email)
            return None
        return AdminRead.model_validate(admin)

    @classmethod
    async def login(cls, store: MemStore, email: str, password: str) -> Optional[LoginResponse]:
        admin = await cls.authenticate(store, email, password)
        if admin is None:
            return None
        token = create_access_token({"sub": admin.email, "admin_id": admin.id, "role": admin.role})
        logger.info("Admin %s logged in", admin.email)
        return LoginResponse(admin=admin, token=token)
