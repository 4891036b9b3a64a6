"""Course models."""

from app.courses.models.course import Course

__all__ = ["Course"]
