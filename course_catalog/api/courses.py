"""
Course Catalog — Courses API

Reads are public. POST/PUT/DELETE are gated by AccessGuardMiddleware
before they reach these handlers.
"""
from fastapi import APIRouter, Depends, status

from course_catalog.api.deps import get_course_service
from course_catalog.schemas.auth import ErrorResponse
from course_catalog.schemas.course import CourseRequest, CourseResponse, MessageResponse
from course_catalog.services.course_service import CourseService

router = APIRouter(prefix="/api/courses", tags=["courses"])

_GUARDED = {401: {"model": ErrorResponse}}


@router.get("", response_model=list[CourseResponse])
async def list_courses(service: CourseService = Depends(get_course_service)):
    """All courses, newest first."""
    return await service.list()


@router.post(
    "",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, **_GUARDED},
)
async def create_course(payload: CourseRequest, service: CourseService = Depends(get_course_service)):
    return await service.create(payload.course_name, payload.course_description, payload.instructor)


@router.put(
    "/{course_id}",
    response_model=CourseResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, **_GUARDED},
)
async def update_course(
    course_id: str, payload: CourseRequest, service: CourseService = Depends(get_course_service)
):
    """Replace name, description and instructor. id and createdAt never change."""
    return await service.update(
        course_id, payload.course_name, payload.course_description, payload.instructor
    )


@router.delete(
    "/{course_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, **_GUARDED},
)
async def delete_course(course_id: str, service: CourseService = Depends(get_course_service)):
    return await service.delete(course_id)
