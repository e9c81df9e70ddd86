"""
Exceptions raised by the store and service layers.

A missing record is never an exception: lookups return ``None`` and
the HTTP layer answers 404.  ``StoreError`` is the separate failure
kind for operations that could not complete at all.
"""

from typing import Optional


class StoreError(Exception):
    """Base class for failures inside the repository store."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DuplicateKeyError(StoreError):
    """Raised when a caller-supplied key already exists in a collection."""

    def __init__(self, collection: str, key: str):
        super().__init__(
            message=f"Duplicate key {key!r} in {collection}",
            details={"collection": collection, "key": key},
        )


class InvalidStatusTransition(ValueError):
    """Raised when a status change is not allowed for an entity."""

    def __init__(self, kind: str, current: Optional[str], new: str):
        self.kind = kind
        self.current = current
        self.new = new
        super().__init__(f"Cannot move {kind} from {current!r} to {new!r}")


class UnknownStatus(InvalidStatusTransition):
    """Raised when the requested status is not a member of the entity's status set."""

    def __init__(self, kind: str, current: Optional[str], new: str):
        super().__init__(kind, current, new)
        self.args = (f"{new!r} is not a valid {kind} status",)
