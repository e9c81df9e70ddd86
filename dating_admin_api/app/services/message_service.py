"""
Service layer for user messages.

Operators can browse every message and flag one for review.  Flagging
sets the message's ``flagged`` attribute; the dashboard's
"flagged messages" counter is derived from reports instead (see
``MemStore.get_dashboard_stats``).
"""

import logging
from typing import List, Optional

from ..core.store import MemStore
from ..schemas.message import MessageRead


logger = logging.getLogger(__name__)


class MessageService:
    """Service for user-to-user messages."""

    @classmethod
    async def list_messages(cls, store: MemStore) -> List[MessageRead]:
        return [MessageRead.model_validate(m) for m in store.get_all_messages()]

    @classmethod
    async def flag_message(cls, store: MemStore, message_id: str) -> Optional[MessageRead]:
        """Mark a message as flagged.  Returns ``None`` if it does not exist."""
        record = store.flag_message(message_id)
        if record is None:
            return None
        logger.info("Message %s flagged", message_id)
        return MessageRead.model_validate(record)
