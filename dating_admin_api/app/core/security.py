"""
Administrator password hashing and bearer tokens.

Passwords are stored as ``pbkdf2_sha256$<iterations>$<salthex>$<hashhex>``
so the work factor can be raised later without invalidating existing
hashes.  Tokens are compact HS256 JWTs signed with
``settings.secret_key``; the ``sub`` claim carries the administrator's
email and ``exp`` bounds the lifetime.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .store import MemStore
from ..dependencies import get_store


logger = logging.getLogger(__name__)

HASH_SCHEME = "pbkdf2_sha256"
PBKDF2_ITERATIONS = 100_000


def _segment(obj: Dict[str, Any]) -> str:
    raw = json.dumps(obj, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _unpad(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def _signature(header: str, payload: str) -> bytes:
    message = f"{header}.{payload}".encode("ascii")
    return hmac.new(settings.secret_key.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Sign ``data`` into a bearer token.

    ``expires_delta`` is the lifetime in seconds and defaults to
    ``ACCESS_TOKEN_EXPIRE_MINUTES``.
    """
    lifetime = expires_delta or settings.access_token_expire_minutes * 60
    claims = dict(data, exp=int(time.time()) + lifetime)
    header = _segment({"alg": "HS256", "typ": "JWT"})
    payload = _segment(claims)
    signature = base64.urlsafe_b64encode(_signature(header, payload)).rstrip(b"=").decode("ascii")
    return f"{header}.{payload}.{signature}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Return the claims of a valid, unexpired token, otherwise ``None``."""
    try:
        header, payload, signature = token.split(".")
        if not hmac.compare_digest(_signature(header, payload), _unpad(signature)):
            return None
        claims = json.loads(_unpad(payload))
    except ValueError:
        # Wrong segment count, bad base64 or bad JSON.
        return None
    if not isinstance(claims, dict) or "exp" not in claims:
        return None
    if int(claims["exp"]) < time.time():
        return None
    return claims


def hash_password(password: str, iterations: int = PBKDF2_ITERATIONS) -> str:
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{HASH_SCHEME}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Constant-time check of a password against a stored hash.

    Missing or malformed hashes, including plain text passwords, never
    match.
    """
    try:
        scheme, iterations, salt_hex, digest_hex = (hashed_password or "").split("$")
        if scheme != HASH_SCHEME:
            return False
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
        rounds = int(iterations)
    except ValueError:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, rounds)
    return hmac.compare_digest(digest, expected)


bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    store: MemStore = Depends(get_store),
) -> Dict[str, Any]:
    """Resolve the bearer token to an active administrator record, or answer 401."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    claims = decode_access_token(credentials.credentials)
    if claims is None:
        raise _unauthorized("Invalid or expired token")
    admin = store.get_admin_by_email(claims.get("sub", ""))
    if admin is None or not admin.get("active", False):
        logger.warning("Token presented for unknown or inactive admin %s", claims.get("sub"))
        raise _unauthorized("Admin account unavailable")
    return admin
