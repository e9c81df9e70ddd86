"""
Moderation report endpoints for API v1.

Moderators list reports and resolve them by moving them to a new
status (resolved, banned, warned, dismissed).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from dating_admin_api.app.core.exceptions import InvalidStatusTransition
from dating_admin_api.app.core.store import MemStore
from dating_admin_api.app.dependencies import get_store
from dating_admin_api.app.schemas.report import ReportRead, ReportStatusUpdate
from dating_admin_api.app.services.moderation_service import ReportService

router = APIRouter()


@router.get("", response_model=List[ReportRead])
async def list_reports(store: MemStore = Depends(get_store)) -> List[ReportRead]:
    return await ReportService.list_reports(store)


@router.put("/{report_id}", response_model=ReportRead)
async def update_report_status(
    report_id: str,
    body: ReportStatusUpdate,
    store: MemStore = Depends(get_store),
) -> ReportRead:
    """Change a report's status.  Illegal moves answer 409."""
    try:
        report = await ReportService.update_status(store, report_id, body.status.value)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    if report is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Report not found")
    return report
