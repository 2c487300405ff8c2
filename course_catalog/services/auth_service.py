"""
Course Catalog — Auth service (registration and login)
"""
import logging
from typing import Any

from passlib.context import CryptContext

from course_catalog.core.errors import AuthError, ConflictError, ValidationError
from course_catalog.core.security import TokenIssuer, hash_password, verify_password
from course_catalog.db.student_store import StudentStore
from course_catalog.models.student import Student

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: StudentStore, issuer: TokenIssuer, pwd_context: CryptContext):
        self.store = store
        self.issuer = issuer
        self.pwd_context = pwd_context

    def _session_for(self, student: Student) -> dict[str, Any]:
        identity = {"id": student.id, "name": student.name, "email": student.email}
        return {"token": self.issuer.issue(identity), "student": identity}

    async def register(self, name: str | None, email: str | None, password: str | None) -> dict[str, Any]:
        if not name or not email or not password:
            raise ValidationError("All fields are required")

        if await self.store.find_by_email(email) is not None:
            raise ConflictError("Email already registered")

        student = await self.store.create(
            name=name, email=email, hashed_password=hash_password(self.pwd_context, password)
        )
        logger.info("Registered student %s (%s)", student.id, student.email)
        return self._session_for(student)

    async def login(self, email: str | None, password: str | None) -> dict[str, Any]:
        if not email or not password:
            raise ValidationError("Email and password are required")

        student = await self.store.find_by_email(email)
        # Same message for unknown email and wrong password
        if student is None or not verify_password(self.pwd_context, password, student.hashed_password):
            logger.info("Failed login for %s", email)
            raise AuthError("Invalid credentials")

        logger.info("Student %s logged in", student.id)
        return self._session_for(student)
