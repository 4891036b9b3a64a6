"""Course schemas."""

from app.courses.schemas.course import CourseCreate, CourseResponse, CourseUpdate

__all__ = ["CourseCreate", "CourseResponse", "CourseUpdate"]
