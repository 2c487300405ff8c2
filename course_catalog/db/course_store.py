"""
Course Catalog — Course store

Plain reads and writes, no locking. Concurrent writers resolve as last
write wins; an update that loses a race against a delete reports the
course as not found, whether the row was gone at get() or at commit.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from course_catalog.core.errors import NotFoundError
from course_catalog.models.course import Course


class CourseStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_newest_first(self) -> list[Course]:
        result = await self.db.execute(select(Course).order_by(Course.created_at.desc()))
        return list(result.scalars().all())

    async def get(self, course_id: str) -> Course | None:
        result = await self.db.execute(select(Course).where(Course.id == course_id))
        return result.scalar_one_or_none()

    async def create(self, course_name: str, course_description: str, instructor: str) -> Course:
        course = Course(
            course_name=course_name,
            course_description=course_description,
            instructor=instructor,
        )
        self.db.add(course)
        await self.db.commit()
        await self.db.refresh(course)
        return course

    async def replace_fields(
        self, course: Course, course_name: str, course_description: str, instructor: str
    ) -> Course:
        course.course_name = course_name
        course.course_description = course_description
        course.instructor = instructor
        try:
            await self.db.commit()
        except StaleDataError:
            # Row deleted by another request after we loaded it
            await self.db.rollback()
            raise NotFoundError("Course not found") from None
        await self.db.refresh(course)
        return course

    async def delete(self, course: Course) -> None:
        await self.db.delete(course)
        await self.db.commit()
