"""
Course Catalog — Course service

Validation and not-found handling over the course store. Authentication is
enforced in front of this layer by the access guard middleware.
"""
import logging

from course_catalog.core.errors import NotFoundError, ValidationError
from course_catalog.db.course_store import CourseStore
from course_catalog.models.course import Course

logger = logging.getLogger(__name__)


def _require_fields(*values: str | None) -> None:
    if not all(values):
        raise ValidationError("All fields are required")


class CourseService:
    def __init__(self, store: CourseStore):
        self.store = store

    async def create(
        self, course_name: str | None, course_description: str | None, instructor: str | None
    ) -> Course:
        _require_fields(course_name, course_description, instructor)
        course = await self.store.create(course_name, course_description, instructor)
        logger.info("Created course %s", course.id)
        return course

    async def list(self) -> list[Course]:
        """All courses, newest first. No pagination."""
        return await self.store.list_newest_first()

    async def update(
        self,
        course_id: str,
        course_name: str | None,
        course_description: str | None,
        instructor: str | None,
    ) -> Course:
        course = await self.store.get(course_id)
        if course is None:
            raise NotFoundError("Course not found")
        _require_fields(course_name, course_description, instructor)

        course = await self.store.replace_fields(course, course_name, course_description, instructor)
        logger.info("Updated course %s", course.id)
        return course

    async def delete(self, course_id: str) -> dict[str, str]:
        course = await self.store.get(course_id)
        if course is None:
            raise NotFoundError("Course not found")

        await self.store.delete(course)
        logger.info("Deleted course %s", course_id)
        return {"message": "Course deleted successfully"}
