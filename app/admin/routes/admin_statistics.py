"""Statistics routes for admin dashboard."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.admin.schemas.admin_statistics import DashboardSummaryResponse
from app.admin.services.statistics import DashboardService
from app.auth.dependencies import get_current_principal
from app.auth.schemas.auth import Principal
from app.core.schemas import ApiResponse, success_response
from app.db.session import get_db

router = APIRouter(prefix="/statistics", tags=["admin-statistics"])


@router.get("/dashboard", response_model=ApiResponse[DashboardSummaryResponse])
async def get_dashboard_summary(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> ApiResponse[DashboardSummaryResponse]:
    """
    Get the admin dashboard summary.

    Returns:
    - Totals (courses, certificates, revenue as the sum of course fees)
    - Certificates issued this month and this year
    - Certificate counts per status
    - Five most recent certificates by issue date
    - Certificates per course
    - Certificates per month for the last six months
    """
    return success_response(DashboardService.get_summary(db))
