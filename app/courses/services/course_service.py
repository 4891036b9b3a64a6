import logging
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.core.repository import BaseRepository
from app.courses.models.course import Course
from app.courses.schemas.course import CourseCreate, CourseUpdate

logger = logging.getLogger(__name__)

# Columns that may not be cleared through a partial update
REQUIRED_FIELDS = ("title", "description", "duration", "fees")


class CourseRepository(BaseRepository[Course]):
    def __init__(self, db: Session):
        super().__init__(db, Course)


class CourseService:
    def __init__(self, db: Session):
        self.repository = CourseRepository(db)

    def list_courses(self) -> list[Course]:
        return self.repository.list_newest_first()

    def get_course(self, course_id: UUID) -> Course:
        course = self.repository.get_by_id(course_id)
        if course is None:
            raise NotFoundError("Course not found", resource="course")
        return course

    def create_course(self, payload: CourseCreate) -> Course:
        course = self.repository.create(**payload.model_dump())
        logger.info("Created course %s", course.id)
        return course

    def update_course(self, course_id: UUID, payload: CourseUpdate) -> Course:
        course = self.get_course(course_id)

        changes = payload.model_dump(exclude_unset=True)
        for field in REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                raise ValidationError(f"{field} cannot be empty", field=field)

        # An empty body still counts as an update
        course = self.repository.update(course, **changes, updated_at=datetime.now(UTC))
        logger.info("Updated course %s (%s)", course.id, ", ".join(sorted(changes)) or "no fields")
        return course

    def delete_course(self, course_id: UUID) -> None:
        course = self.get_course(course_id)
        self.repository.delete(course)
        logger.info("Deleted course %s", course_id)
