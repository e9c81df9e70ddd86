"""
Business logic for platform users.

Users arrive through the mobile sign-up flow, so the back office only
lists, reads and edits them.  Records are never deleted here;
deactivation goes through ``is_active``.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.store import MemStore
from ..schemas.user import UserRead


logger = logging.getLogger(__name__)


class UserService:
    """Operations on the user collection."""

    @classmethod
    async def list_users(
        cls,
        store: MemStore,
        status: Optional[str] = None,
        verification: Optional[str] = None,
        subscription: Optional[str] = None,
    ) -> List[UserRead]:
        """Return users matching the dashboard filters.

        ``status`` takes ``Active``/``Inactive``, ``verification`` takes
        ``Verified``/``Unverified``; both combine with AND.  The
        ``subscription`` filter is passed through but has no effect.
        """
        records = store.get_users_with_filters(
            status=status,
            verification=verification,
            subscription=subscription,
        )
        return [UserRead.model_validate(record) for record in records]

    @classmethod
    async def get_user(cls, store: MemStore, user_id: str) -> Optional[UserRead]:
        record = store.get_user(user_id)
        if record is None:
            return None
        return UserRead.model_validate(record)

    @classmethod
    async def update_user(cls, store: MemStore, user_id: str, updates: Dict[str, Any]) -> Optional[UserRead]:
        """Apply a partial update and return the new record, or ``None`` if absent."""
        record = store.update_user(user_id, updates)
        if record is None:
            return None
        logger.info("Updated user %s fields=%s", user_id, sorted(updates))
        return UserRead.model_validate(record)
