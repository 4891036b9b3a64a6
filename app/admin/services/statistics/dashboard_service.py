"""Dashboard statistics service."""

from collections import Counter
from datetime import UTC, date, datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.admin.schemas.admin_statistics import (
    CourseCertificateStat,
    DashboardSummaryResponse,
    MonthlyTrendPoint,
    StatusBreakdown,
)
from app.admin.services.statistics.base import (
    month_label,
    month_start,
    shift_months,
    to_money,
    year_start,
)
from app.certificates.models.certificate import Certificate, CertificateStatus
from app.certificates.schemas.certificate import CertificateResponse
from app.courses.models.course import Course

RECENT_CERTIFICATES_LIMIT = 5
TREND_MONTHS = 6


class DashboardService:
    """Service for dashboard summary aggregation."""

    @staticmethod
    def count_issued_between(db: Session, start: date, end: date) -> int:
        """Count certificates with ``start <= issue_date < end``."""
        result: int = (
            db.query(func.count(Certificate.id))
            .filter(Certificate.issue_date >= start, Certificate.issue_date < end)
            .scalar()
            or 0
        )
        return result

    @staticmethod
    def get_status_breakdown(db: Session) -> StatusBreakdown:
        rows = (
            db.query(Certificate.status, func.count(Certificate.id))
            .group_by(Certificate.status)
            .all()
        )
        counts = {status: count for status, count in rows}
        return StatusBreakdown(
            valid=counts.get(CertificateStatus.VALID, 0),
            expired=counts.get(CertificateStatus.EXPIRED, 0),
            revoked=counts.get(CertificateStatus.REVOKED, 0),
        )

    @staticmethod
    def get_course_stats(db: Session) -> list[CourseCertificateStat]:
        """Certificates per course; certificates reference courses by name only."""
        per_name = dict(
            db.query(Certificate.course_name, func.count(Certificate.id))
            .group_by(Certificate.course_name)
            .all()
        )
        courses = db.query(Course).order_by(Course.title).all()
        return [
            CourseCertificateStat(
                course_id=course.id,
                name=course.title,
                certificates=per_name.get(course.title, 0),
            )
            for course in courses
        ]

    @staticmethod
    def get_monthly_trends(db: Session, today: date) -> list[MonthlyTrendPoint]:
        first_month = shift_months(today, -(TREND_MONTHS - 1))
        next_month = shift_months(today, 1)

        issue_dates = (
            db.query(Certificate.issue_date)
            .filter(Certificate.issue_date >= first_month, Certificate.issue_date < next_month)
            .all()
        )
        per_month = Counter((d.year, d.month) for (d,) in issue_dates)

        points = []
        for offset in range(TREND_MONTHS):
            month = shift_months(first_month, offset)
            points.append(
                MonthlyTrendPoint(
                    month=month_label(month),
                    year=month.year,
                    count=per_month.get((month.year, month.month), 0),
                )
            )
        return points

    @staticmethod
    def get_summary(db: Session, today: date | None = None) -> DashboardSummaryResponse:
        """Get the dashboard summary.

        Args:
            db: Database session.
            today: Reference date for the month/year windows; defaults to the
                current UTC date.

        Returns:
            DashboardSummaryResponse with totals, breakdowns and trends.
        """
        today = today or datetime.now(UTC).date()

        total_courses = db.query(func.count(Course.id)).scalar() or 0
        total_certificates = db.query(func.count(Certificate.id)).scalar() or 0
        total_revenue = to_money(db.query(func.sum(Course.fees)).scalar())

        recent = (
            db.query(Certificate)
            .order_by(Certificate.issue_date.desc(), Certificate.created_at.desc())
            .limit(RECENT_CERTIFICATES_LIMIT)
            .all()
        )

        return DashboardSummaryResponse(
            total_courses=total_courses,
            total_certificates=total_certificates,
            total_revenue=total_revenue,
            certificates_this_month=DashboardService.count_issued_between(
                db, month_start(today), shift_months(today, 1)
            ),
            certificates_this_year=DashboardService.count_issued_between(
                db, year_start(today), date(today.year + 1, 1, 1)
            ),
            status_breakdown=DashboardService.get_status_breakdown(db),
            recent_certificates=[CertificateResponse.model_validate(c) for c in recent],
            course_stats=DashboardService.get_course_stats(db),
            monthly_trends=DashboardService.get_monthly_trends(db, today),
        )
