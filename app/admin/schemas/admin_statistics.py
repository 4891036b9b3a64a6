"""Statistics schemas for admin dashboard."""

from uuid import UUID

from pydantic import BaseModel, Field

from app.certificates.schemas.certificate import CertificateResponse
from app.core.schemas import MoneyDecimal


class StatusBreakdown(BaseModel):
    """Certificate counts per status."""

    valid: int = 0
    expired: int = 0
    revoked: int = 0


class CourseCertificateStat(BaseModel):
    """Certificates issued for one course, matched on course title."""

    course_id: UUID
    name: str
    certificates: int


class MonthlyTrendPoint(BaseModel):
    """Certificates issued in one calendar month."""

    month: str = Field(description="Short month name, e.g. 'Jan'")
    year: int
    count: int


class DashboardSummaryResponse(BaseModel):
    """Complete dashboard summary for the admin panel."""

    total_courses: int
    total_certificates: int
    total_revenue: MoneyDecimal = Field(description="Sum of all course fees")
    certificates_this_month: int = Field(description="Certificates issued this month")
    certificates_this_year: int = Field(description="Certificates issued this year")
    status_breakdown: StatusBreakdown
    recent_certificates: list[CertificateResponse]
    course_stats: list[CourseCertificateStat]
    monthly_trends: list[MonthlyTrendPoint] = Field(description="Oldest month first")
