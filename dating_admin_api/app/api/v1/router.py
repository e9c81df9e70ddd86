"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers used by the admin
dashboard.  When a new resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    api_keys,
    auth,
    block_lists,
    events,
    logs,
    messages,
    reports,
    stats,
    transactions,
    users,
    verifications,
)

router = APIRouter()

router.include_router(stats.router, prefix="/stats", tags=["stats"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(reports.router, prefix="/reports", tags=["reports"])
router.include_router(verifications.router, prefix="/verifications", tags=["verifications"])
router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(logs.router, prefix="/logs", tags=["logs"])
router.include_router(api_keys.router, prefix="/apikeys", tags=["apikeys"])
router.include_router(block_lists.router, prefix="/blocklists", tags=["blocklists"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
