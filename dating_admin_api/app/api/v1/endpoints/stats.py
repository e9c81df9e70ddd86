"""
Dashboard statistics endpoint for API v1.

Returns the counters shown on the dashboard home page.  Values are
recomputed on every request.
"""

from fastapi import APIRouter, Depends

from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.stats import DashboardStatsRead
from dating_admin_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("", response_model=DashboardStatsRead)
async def get_stats(store: MemStore = Depends(get_store)) -> DashboardStatsRead:
    """Return dashboard totals: users, revenue, reports, messages and API usage."""
    return await StatisticsService.overview(store)
