"""
In-memory repository store.

``MemStore`` holds every entity type as an independent keyed
``Collection`` of plain dict records and exposes create/read/update
operations plus two derived reads: the filtered user listing and the
dashboard statistics.  Nothing is persisted; the store lives for as
long as the object does and ``close()`` drops everything.

Lookups of unknown keys return ``None``.  Reads hand out deep copies,
so callers can never change stored state except through ``update``.
A single re-entrant lock guards the whole store, which keeps the
aggregate statistics consistent when sync code runs in a threadpool.
"""

from __future__ import annotations

import copy
import logging
import math
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Dict, Iterator, List, Optional
from zoneinfo import ZoneInfo

from .exceptions import DuplicateKeyError


logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Clock = Callable[[], datetime]

# Filter values that mean "do not filter".
_ALL_STATUSES = {"all", "All", "All Users"}
_ALL_VERIFICATIONS = {"all", "All"}

FLAGGED_REPORT_REASON = "Inappropriate Content"
PREMIUM_PLAN_MARKER = "Premium"
API_KEY_PREFIX = "loveapp_"


def _uuid_key() -> str:
    return str(uuid.uuid4())


def generate_api_key() -> str:
    return API_KEY_PREFIX + uuid.uuid4().hex[:32]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Collection:
    """A keyed set of records of one entity type.

    Records keep insertion order.  ``stamp`` produces the value written
    to ``created_at``/``updated_at``; collections differ in whether they
    use date-only or full ISO timestamps.
    """

    def __init__(
        self,
        name: str,
        lock: threading.RLock,
        stamp: Callable[[], str],
        key_field: str = "id",
        key_factory: Callable[[], str] = _uuid_key,
    ) -> None:
        self.name = name
        self.key_field = key_field
        self._lock = lock
        self._stamp = stamp
        self._key_factory = key_factory
        self._records: Dict[str, Record] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._records

    def _iter(self) -> Iterator[Record]:
        # Internal, uncopied view; callers must hold the lock.
        return iter(self._records.values())

    def get(self, key: str) -> Optional[Record]:
        with self._lock:
            record = self._records.get(key)
            return copy.deepcopy(record) if record is not None else None

    def get_all(self) -> List[Record]:
        with self._lock:
            return [copy.deepcopy(record) for record in self._records.values()]

    def find(self, predicate: Callable[[Record], bool]) -> Optional[Record]:
        """Return a copy of the first record matching ``predicate``."""
        with self._lock:
            for record in self._records.values():
                if predicate(record):
                    return copy.deepcopy(record)
            return None

    def count(self, predicate: Optional[Callable[[Record], bool]] = None) -> int:
        with self._lock:
            if predicate is None:
                return len(self._records)
            return sum(1 for record in self._records.values() if predicate(record))

    def insert(self, record: Record) -> Record:
        """Store ``record`` as given, timestamps included.

        Used for loading fixed data.  The record must carry its key.
        """
        key = record[self.key_field]
        with self._lock:
            if key in self._records:
                raise DuplicateKeyError(self.name, key)
            self._records[key] = copy.deepcopy(record)
            return copy.deepcopy(record)

    def create(self, data: Record) -> Record:
        """Create a record from ``data`` with a fresh key and timestamps.

        A key present in ``data`` is kept if unused; an existing one
        raises ``DuplicateKeyError``.
        """
        record = copy.deepcopy(data)
        with self._lock:
            key = record.get(self.key_field) or self._key_factory()
            if key in self._records:
                raise DuplicateKeyError(self.name, key)
            now = self._stamp()
            record[self.key_field] = key
            record["created_at"] = now
            record["updated_at"] = now
            self._records[key] = record
            logger.debug("Created %s %s", self.name, key)
            return copy.deepcopy(record)

    def update(self, key: str, changes: Record) -> Optional[Record]:
        """Shallow-merge ``changes`` into the record stored under ``key``.

        Nested values are replaced, not merged.  The key itself cannot be
        changed.  Returns ``None`` when no record exists.
        """
        with self._lock:
            current = self._records.get(key)
            if current is None:
                return None
            merged = dict(current)
            for field, value in changes.items():
                if field == self.key_field:
                    continue
                merged[field] = copy.deepcopy(value)
            merged["updated_at"] = self._stamp()
            self._records[key] = merged
            logger.debug("Updated %s %s fields=%s", self.name, key, sorted(changes))
            return copy.deepcopy(merged)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


@dataclass(frozen=True)
class DashboardStats:
    total_users: int
    active_users: int
    total_revenue: float
    pending_reports: int
    premium_subscribers: int
    failed_payments: int
    total_messages: int
    today_messages: int
    flagged_messages: int
    image_messages: int
    total_api_requests: int
    active_api_keys: int


def round_cents(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class MemStore:
    """Process-local store for all back-office entities.

    Parameters
    ----------
    clock : callable, optional
        Returns the current time as an aware ``datetime``.  Defaults to
        UTC wall clock; tests pass a fixed clock.
    tz : str
        IANA zone that decides the calendar date used for date-only
        timestamps and the same-day message count.
    """

    def __init__(self, clock: Optional[Clock] = None, tz: str = "UTC") -> None:
        self._clock = clock or _utcnow
        self._tz = ZoneInfo(tz)
        self._lock = threading.RLock()

        def collection(name: str, stamp: Callable[[], str], **kwargs: Any) -> Collection:
            return Collection(name, self._lock, stamp, **kwargs)

        self.users = collection("users", self.today)
        self.admins = collection("admins", self.today)
        self.events = collection("events", self.now_iso)
        self.messages = collection("messages", self.today)
        self.transactions = collection("transactions", self.today)
        self.reports = collection("reports", self.now_iso)
        self.verifications = collection("verifications", self.now_iso)
        self.api_logs = collection("api_logs", self.today)
        self.api_keys = collection("api_keys", self.today, key_field="apikey", key_factory=generate_api_key)
        self.block_lists = collection("block_lists", self.today)

    # ------------------------------------------------------------------
    # Clock helpers
    # ------------------------------------------------------------------
    def now(self) -> datetime:
        return self._clock().astimezone(self._tz)

    def now_iso(self) -> str:
        return self.now().isoformat()

    def today(self) -> str:
        return self.now().date().isoformat()

    def _collections(self) -> List[Collection]:
        return [
            self.users,
            self.admins,
            self.events,
            self.messages,
            self.transactions,
            self.reports,
            self.verifications,
            self.api_logs,
            self.api_keys,
            self.block_lists,
        ]

    def close(self) -> None:
        """Drop every record.  The store stays usable but empty."""
        with self._lock:
            for coll in self._collections():
                coll.clear()
        logger.info("Store closed")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def get_user(self, user_id: str) -> Optional[Record]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[Record]:
        return self.users.find(lambda u: u.get("username") == username)

    def get_user_by_email(self, email: str) -> Optional[Record]:
        return self.users.find(lambda u: u.get("email") == email)

    def create_user(self, data: Record) -> Record:
        return self.users.create(data)

    def update_user(self, user_id: str, changes: Record) -> Optional[Record]:
        return self.users.update(user_id, changes)

    def get_all_users(self) -> List[Record]:
        return self.users.get_all()

    def get_users_with_filters(
        self,
        status: Optional[str] = None,
        verification: Optional[str] = None,
        subscription: Optional[str] = None,
    ) -> List[Record]:
        """Return users matching every supplied filter, in insertion order.

        ``status`` is ``"Active"`` or ``"Inactive"``; ``verification`` is
        ``"Verified"`` or ``"Unverified"``.  ``None`` or an "all" value
        skips the filter, as does any unrecognised value.
        ``subscription`` is accepted but not applied.
        """
        if subscription:
            logger.debug("Ignoring subscription filter %r", subscription)
        users = self.users.get_all()
        if status and status not in _ALL_STATUSES:
            if status == "Active":
                users = [u for u in users if u.get("is_active")]
            elif status == "Inactive":
                users = [u for u in users if not u.get("is_active")]
        if verification and verification not in _ALL_VERIFICATIONS:
            if verification == "Verified":
                users = [u for u in users if u.get("is_verified")]
            elif verification == "Unverified":
                users = [u for u in users if not u.get("is_verified")]
        return users

    # ------------------------------------------------------------------
    # Admins
    # ------------------------------------------------------------------
    def get_admin(self, admin_id: str) -> Optional[Record]:
        return self.admins.get(admin_id)

    def get_admin_by_email(self, email: str) -> Optional[Record]:
        return self.admins.find(lambda a: a.get("email") == email)

    def create_admin(self, data: Record) -> Record:
        return self.admins.create(data)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def get_all_events(self) -> List[Record]:
        return self.events.get_all()

    def get_event(self, event_id: str) -> Optional[Record]:
        return self.events.get(event_id)

    def create_event(self, data: Record) -> Record:
        return self.events.create(data)

    def update_event_status(self, event_id: str, status: str) -> Optional[Record]:
        return self.events.update(event_id, {"status": status})

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------
    def get_all_messages(self) -> List[Record]:
        return self.messages.get_all()

    def get_message(self, message_id: str) -> Optional[Record]:
        return self.messages.get(message_id)

    def create_message(self, data: Record) -> Record:
        return self.messages.create(data)

    def flag_message(self, message_id: str) -> Optional[Record]:
        return self.messages.update(message_id, {"flagged": True})

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------
    def get_all_transactions(self) -> List[Record]:
        return self.transactions.get_all()

    def get_transaction(self, transaction_id: str) -> Optional[Record]:
        return self.transactions.get(transaction_id)

    def create_transaction(self, data: Record) -> Record:
        return self.transactions.create(data)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def get_all_reports(self) -> List[Record]:
        return self.reports.get_all()

    def get_report(self, report_id: str) -> Optional[Record]:
        return self.reports.get(report_id)

    def create_report(self, data: Record) -> Record:
        return self.reports.create(data)

    def update_report_status(self, report_id: str, status: str) -> Optional[Record]:
        return self.reports.update(report_id, {"status": status})

    # ------------------------------------------------------------------
    # Verifications
    # ------------------------------------------------------------------
    def get_all_verifications(self) -> List[Record]:
        return self.verifications.get_all()

    def get_verification(self, verification_id: str) -> Optional[Record]:
        return self.verifications.get(verification_id)

    def create_verification(self, data: Record) -> Record:
        return self.verifications.create(data)

    def update_verification_status(self, verification_id: str, status: str) -> Optional[Record]:
        return self.verifications.update(verification_id, {"status": status})

    # ------------------------------------------------------------------
    # API logs (append-only) and keys
    # ------------------------------------------------------------------
    def get_all_api_logs(self) -> List[Record]:
        return self.api_logs.get_all()

    def create_api_log(self, data: Record) -> Record:
        return self.api_logs.create(data)

    def get_all_api_keys(self) -> List[Record]:
        return self.api_keys.get_all()

    def get_api_key(self, key: str) -> Optional[Record]:
        return self.api_keys.get(key)

    def create_api_key(self, data: Record) -> Record:
        return self.api_keys.create(data)

    def update_api_key(self, key: str, changes: Record) -> Optional[Record]:
        return self.api_keys.update(key, changes)

    # ------------------------------------------------------------------
    # Block lists
    # ------------------------------------------------------------------
    def get_all_block_lists(self) -> List[Record]:
        return self.block_lists.get_all()

    def create_block_list(self, data: Record) -> Record:
        return self.block_lists.create(data)

    # ------------------------------------------------------------------
    # Dashboard statistics
    # ------------------------------------------------------------------
    def _total_revenue(self) -> float:
        total = 0.0
        for txn in self.transactions._iter():
            try:
                amount = float(txn.get("amount"))
            except (TypeError, ValueError):
                amount = math.nan
            if not math.isfinite(amount):
                logger.warning(
                    "Skipping transaction %s with unparseable amount %r",
                    txn.get("id"),
                    txn.get("amount"),
                )
                continue
            total += amount
        return round_cents(total)

    def get_dashboard_stats(self) -> DashboardStats:
        """Compute the dashboard counters from the current records.

        Every call recomputes from scratch under the store lock.
        "Today" is the current date in the store's zone, compared as a
        string against each message's ``created_at``.
        """
        with self._lock:
            today = self.today()
            return DashboardStats(
                total_users=self.users.count(),
                active_users=self.users.count(lambda u: bool(u.get("is_active"))),
                total_revenue=self._total_revenue(),
                pending_reports=self.reports.count(lambda r: r.get("status") == "pending"),
                premium_subscribers=self.transactions.count(
                    lambda t: bool(t.get("subscribed")) and PREMIUM_PLAN_MARKER in (t.get("plan") or "")
                ),
                failed_payments=self.transactions.count(lambda t: not t.get("subscribed")),
                total_messages=self.messages.count(),
                today_messages=self.messages.count(lambda m: m.get("created_at") == today),
                flagged_messages=self.reports.count(lambda r: r.get("reason") == FLAGGED_REPORT_REASON),
                image_messages=self.messages.count(lambda m: m.get("type") == "image"),
                total_api_requests=self.api_logs.count(),
                active_api_keys=self.api_keys.count(lambda k: bool(k.get("active"))),
            )
