"""
Service layer for dashboard statistics.

The store computes the counters in a single pass under its lock; this
service only turns the snapshot into the response schema.
"""

from dataclasses import asdict

from ..core.store import MemStore
from ..schemas.stats import DashboardStatsRead


class StatisticsService:
    """Service providing the aggregated dashboard counters."""

    @classmethod
    async def overview(cls, store: MemStore) -> DashboardStatsRead:
        return DashboardStatsRead(**asdict(store.get_dashboard_stats()))
