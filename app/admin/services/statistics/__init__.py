"""Statistics for the admin dashboard.

- base: month arithmetic and money helpers
- dashboard_service: dashboard summary built from courses and certificates
"""

from app.admin.services.statistics.base import (
    month_label,
    month_start,
    shift_months,
    to_money,
    year_start,
)
from app.admin.services.statistics.dashboard_service import DashboardService

__all__ = [
    # Base utilities
    "month_label",
    "month_start",
    "shift_months",
    "to_money",
    "year_start",
    # Services
    "DashboardService",
]
