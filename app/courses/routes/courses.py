from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_principal
from app.auth.schemas.auth import Principal
from app.core.schemas import (
    ApiResponse,
    ListResponse,
    MessageResponse,
    list_response,
    success_response,
)
from app.courses.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from app.courses.services.course_service import CourseService
from app.db.session import get_db

router = APIRouter()


def get_course_service(db: Session = Depends(get_db)) -> CourseService:
    return CourseService(db)


@router.get("", response_model=ListResponse[CourseResponse])
async def list_courses(
    service: CourseService = Depends(get_course_service),
) -> ListResponse[CourseResponse]:
    """List all courses, newest first (public endpoint)."""
    courses = service.list_courses()
    return list_response([CourseResponse.model_validate(c) for c in courses])


@router.get("/{course_id}", response_model=ApiResponse[CourseResponse])
async def get_course(
    course_id: UUID,
    service: CourseService = Depends(get_course_service),
) -> ApiResponse[CourseResponse]:
    course = service.get_course(course_id)
    return success_response(CourseResponse.model_validate(course))


@router.post(
    "",
    response_model=ApiResponse[CourseResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_course(
    payload: CourseCreate,
    service: CourseService = Depends(get_course_service),
    principal: Principal = Depends(get_current_principal),
) -> ApiResponse[CourseResponse]:
    course = service.create_course(payload)
    return success_response(
        CourseResponse.model_validate(course), message="Course created successfully"
    )


@router.put("/{course_id}", response_model=ApiResponse[CourseResponse])
async def update_course(
    course_id: UUID,
    payload: CourseUpdate,
    service: CourseService = Depends(get_course_service),
    principal: Principal = Depends(get_current_principal),
) -> ApiResponse[CourseResponse]:
    course = service.update_course(course_id, payload)
    return success_response(
        CourseResponse.model_validate(course), message="Course updated successfully"
    )


@router.delete("/{course_id}", response_model=MessageResponse)
async def delete_course(
    course_id: UUID,
    service: CourseService = Depends(get_course_service),
    principal: Principal = Depends(get_current_principal),
) -> MessageResponse:
    service.delete_course(course_id)
    return MessageResponse(message="Course deleted successfully")
