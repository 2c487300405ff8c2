"""
Course Catalog — Client course view state

Keeps the fetched course list plus search/filter state. Filtering is
always local. Mutations touch the local list only after the server
confirms; on failure the server's message is kept in ``error`` and the
list is left as it was.
"""
import logging
from dataclasses import dataclass
from typing import Any

from course_catalog.client.api import ApiError, CourseCatalogClient

logger = logging.getLogger(__name__)


@dataclass
class CourseForm:
    course_name: str = ""
    course_description: str = ""
    instructor: str = ""

    def is_complete(self) -> bool:
        return bool(self.course_name and self.course_description and self.instructor)


class CourseView:
    def __init__(self, client: CourseCatalogClient):
        self.client = client
        self.courses: list[dict[str, Any]] = []
        self.search = ""
        self.instructor_filter = ""
        self.error = ""
        self.loading = False

    async def load(self) -> None:
        self.loading = True
        try:
            self.courses = await self.client.list_courses()
        except ApiError as exc:
            logger.warning("Course list fetch failed: %s", exc.message)
        finally:
            self.loading = False

    @property
    def instructors(self) -> list[str]:
        return sorted({c["instructor"] for c in self.courses})

    @property
    def filtered(self) -> list[dict[str, Any]]:
        term = self.search.strip().lower()

        def matches(course: dict[str, Any]) -> bool:
            match_search = (
                not term
                or term in course["courseName"].lower()
                or term in course["instructor"].lower()
                or term in course["courseDescription"].lower()
            )
            match_instructor = not self.instructor_filter or course["instructor"] == self.instructor_filter
            return match_search and match_instructor

        return [c for c in self.courses if matches(c)]

    @property
    def summary(self) -> dict[str, int]:
        return {
            "total": len(self.courses),
            "instructors": len(self.instructors),
            "showing": len(self.filtered),
        }

    async def create(self, form: CourseForm) -> bool:
        self.error = ""
        if not form.is_complete():
            self.error = "All fields are required"
            return False
        try:
            course = await self.client.create_course(form.course_name, form.course_description, form.instructor)
        except ApiError as exc:
            self.error = exc.message
            return False
        self.courses = [course, *self.courses]
        return True

    async def update(self, course_id: str, form: CourseForm) -> bool:
        self.error = ""
        if not form.is_complete():
            self.error = "All fields are required"
            return False
        try:
            updated = await self.client.update_course(
                course_id, form.course_name, form.course_description, form.instructor
            )
        except ApiError as exc:
            self.error = exc.message
            return False
        self.courses = [updated if c["id"] == updated["id"] else c for c in self.courses]
        return True

    async def delete(self, course_id: str) -> bool:
        self.error = ""
        try:
            await self.client.delete_course(course_id)
        except ApiError as exc:
            self.error = exc.message
            return False
        self.courses = [c for c in self.courses if c["id"] != course_id]
        return True
