"""
Dashboard API
"""

from fastapi import APIRouter, Depends

from taskboard.core.dependencies import get_dashboard_service
from taskboard.services.dashboard_service import DashboardService
from taskboard.schemas.task import DashboardResponse


router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"]
)


@router.get("", response_model=DashboardResponse, response_model_by_alias=True)
def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """
    Overdue, nearing-deadline and in-progress buckets plus the task total.

    Buckets may overlap; done tasks are never overdue or nearing.
    """
    return DashboardResponse.from_buckets(service.get_dashboard())
