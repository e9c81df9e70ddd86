"""
Business logic for API keys, the API call log and block lists.

Keys are created with a generated ``loveapp_`` key string and are
revoked or reactivated by toggling ``active``; they are never deleted,
so call log entries always point at an existing key.  The call log is
append-only: ``record_call`` is the only writer.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.store import MemStore
from ..schemas.api_key import ApiKeyRead, ApiLogRead
from ..schemas.block_list import BlockListRead


logger = logging.getLogger(__name__)


class ApiKeyService:
    """API key management for external integrations."""

    @classmethod
    async def list_keys(cls, store: MemStore) -> List[ApiKeyRead]:
        return [ApiKeyRead.model_validate(k) for k in store.get_all_api_keys()]

    @classmethod
    async def create_key(cls, store: MemStore, name: str, email: Optional[str] = None) -> ApiKeyRead:
        record = store.create_api_key({"name": name, "email": email, "active": True})
        logger.info("Issued API key %s for %s", record["apikey"][:12], name)
        return ApiKeyRead.model_validate(record)

    @classmethod
    async def update_key(cls, store: MemStore, key: str, updates: Dict[str, Any]) -> Optional[ApiKeyRead]:
        record = store.update_api_key(key, updates)
        return ApiKeyRead.model_validate(record) if record is not None else None

    @classmethod
    async def set_active(cls, store: MemStore, key: str, active: bool) -> Optional[ApiKeyRead]:
        """Revoke (``active=False``) or reactivate a key."""
        record = store.update_api_key(key, {"active": active})
        if record is None:
            return None
        logger.info("API key %s %s", key[:12], "reactivated" if active else "revoked")
        return ApiKeyRead.model_validate(record)


class ApiLogService:
    """Append-only log of calls made with API keys."""

    @classmethod
    async def list_logs(cls, store: MemStore) -> List[ApiLogRead]:
        return [ApiLogRead.model_validate(entry) for entry in store.get_all_api_logs()]

    @classmethod
    def record_call(
        cls,
        store: MemStore,
        key: str,
        method: str,
        path: str,
        ip: Optional[str],
        duration_ms: float,
        location: str = "Unknown",
    ) -> Optional[Dict[str, Any]]:
        """Append a log entry for a call made with ``key``.

        Calls made with a key the store does not know are not logged
        and ``None`` is returned.
        """
        api_key = store.get_api_key(key)
        if api_key is None:
            logger.debug("Ignoring call with unknown API key on %s %s", method, path)
            return None
        return store.create_api_log(
            {
                "apikey": key,
                "url": path,
                "type": method,
                "ip": ip,
                "duration": f"{round(duration_ms)}ms",
                "location": location,
                "by": api_key.get("name"),
            }
        )


class BlockListService:
    @classmethod
    async def list_block_lists(cls, store: MemStore) -> List[BlockListRead]:
        return [BlockListRead.model_validate(b) for b in store.get_all_block_lists()]
