"""
Business logic for moderation: reports, verifications and events.

All three share one shape: list everything, and move a single record
to a new status.  The store accepts any status string, so the checks
against the allowed transitions in ``core.statuses`` happen here before
anything is written.
"""

import logging
from typing import Callable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..core.statuses import validate_transition
from ..core.store import MemStore, Record
from ..schemas.event import EventRead
from ..schemas.report import ReportRead
from ..schemas.verification import VerificationRead


logger = logging.getLogger(__name__)

ReadModel = TypeVar("ReadModel", bound=BaseModel)


async def _change_status(
    kind: str,
    record_id: str,
    status: str,
    getter: Callable[[str], Optional[Record]],
    writer: Callable[[str, str], Optional[Record]],
    schema: Type[ReadModel],
) -> Optional[ReadModel]:
    current = getter(record_id)
    if current is None:
        return None
    validate_transition(kind, current.get("status"), status)
    updated = writer(record_id, status)
    if updated is None:
        return None
    logger.info("%s %s: %s -> %s", kind.capitalize(), record_id, current.get("status"), status)
    return schema.model_validate(updated)


class ReportService:
    """Moderation reports filed by users against other users."""

    @classmethod
    async def list_reports(cls, store: MemStore) -> List[ReportRead]:
        return [ReportRead.model_validate(r) for r in store.get_all_reports()]

    @classmethod
    async def update_status(cls, store: MemStore, report_id: str, status: str) -> Optional[ReportRead]:
        """Move a report to ``status``.

        Returns ``None`` for an unknown report and raises
        ``InvalidStatusTransition`` for a move that is not allowed.
        """
        return await _change_status(
            "report", report_id, status, store.get_report, store.update_report_status, ReportRead
        )


class VerificationService:
    """Identity verification submissions."""

    @classmethod
    async def list_verifications(cls, store: MemStore) -> List[VerificationRead]:
        return [VerificationRead.model_validate(v) for v in store.get_all_verifications()]

    @classmethod
    async def update_status(
        cls, store: MemStore, verification_id: str, status: str
    ) -> Optional[VerificationRead]:
        return await _change_status(
            "verification",
            verification_id,
            status,
            store.get_verification,
            store.update_verification_status,
            VerificationRead,
        )


class EventService:
    """Date events proposed between users."""

    @classmethod
    async def list_events(cls, store: MemStore) -> List[EventRead]:
        return [EventRead.model_validate(e) for e in store.get_all_events()]

    @classmethod
    async def get_event(cls, store: MemStore, event_id: str) -> Optional[EventRead]:
        record = store.get_event(event_id)
        return EventRead.model_validate(record) if record is not None else None

    @classmethod
    async def update_status(cls, store: MemStore, event_id: str, status: str) -> Optional[EventRead]:
        return await _change_status(
            "event", event_id, status, store.get_event, store.update_event_status, EventRead
        )
