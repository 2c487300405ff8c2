"""
Course Catalog — Credential store (students)
"""
import logging
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.core.errors import ConflictError
from course_catalog.models.student import Student

logger = logging.getLogger(__name__)


class StudentStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Student | None:
        result = await self.db.execute(select(Student).where(Student.email == email))
        return result.scalar_one_or_none()

    async def create(self, name: str, email: str, hashed_password: str) -> Student:
        student = Student(name=name, email=email, hashed_password=hashed_password)
        self.db.add(student)
        try:
            await self.db.commit()
        except IntegrityError:
            # A concurrent registration won the unique(email) race
            await self.db.rollback()
            logger.info("Duplicate registration rejected by unique constraint for %s", email)
            raise ConflictError() from None
        await self.db.refresh(student)
        return student
