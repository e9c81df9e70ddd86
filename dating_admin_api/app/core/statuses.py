"""
Status vocabularies and allowed transitions.

The store keeps statuses as plain strings; the service layer calls
``validate_transition`` before writing so that only the moves listed in
``TRANSITIONS`` reach the store.  Re-applying the current status is
always allowed and leaves the record unchanged apart from
``updated_at``.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional, Type

from .exceptions import InvalidStatusTransition, UnknownStatus


class EventStatus(str, Enum):
    PENDING = "pending"
    PLANNED = "planned"
    CANCELED = "canceled"
    DECLINED = "declined"


class ReportStatus(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    BANNED = "banned"
    WARNED = "warned"
    DISMISSED = "dismissed"


class VerificationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


STATUS_ENUMS: Dict[str, Type[Enum]] = {
    "event": EventStatus,
    "report": ReportStatus,
    "verification": VerificationStatus,
}

TRANSITIONS: Dict[str, Dict[str, FrozenSet[str]]] = {
    "event": {
        "pending": frozenset({"planned", "canceled", "declined"}),
        "planned": frozenset({"canceled"}),
        "canceled": frozenset(),
        "declined": frozenset(),
    },
    "report": {
        "pending": frozenset({"resolved", "banned", "warned", "dismissed"}),
        # A warning can still escalate to a ban or be closed.
        "warned": frozenset({"banned", "resolved"}),
        "resolved": frozenset(),
        "banned": frozenset(),
        "dismissed": frozenset(),
    },
    "verification": {
        "pending": frozenset({"approved", "rejected"}),
        # Rejected users may resubmit.
        "rejected": frozenset({"pending"}),
        "approved": frozenset(),
    },
}


def validate_transition(kind: str, current: Optional[str], new: str) -> str:
    """Return ``new`` if ``kind`` may move from ``current`` to ``new``.

    Raises ``UnknownStatus`` if ``new`` is not part of the vocabulary
    and ``InvalidStatusTransition`` if the move is not allowed.  A
    record whose stored status is outside the vocabulary (seeded or
    written before validation existed) may only move to ``pending``.
    """
    members = {member.value for member in STATUS_ENUMS[kind]}
    if new not in members:
        raise UnknownStatus(kind, current, new)
    if current == new:
        return new
    allowed = TRANSITIONS[kind].get(current or "")
    if allowed is None:
        allowed = frozenset({"pending"})
    if new not in allowed:
        raise InvalidStatusTransition(kind, current, new)
    return new
