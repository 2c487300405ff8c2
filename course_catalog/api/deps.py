"""
Course Catalog — Request dependencies

Stores and services are built per request from the components the app
factory placed on app.state.
"""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.db.course_store import CourseStore
from course_catalog.db.database import get_db
from course_catalog.db.student_store import StudentStore
from course_catalog.services.auth_service import AuthService
from course_catalog.services.course_service import CourseService


def get_auth_service(request: Request, db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(
        store=StudentStore(db),
        issuer=request.app.state.token_issuer,
        pwd_context=request.app.state.pwd_context,
    )


def get_course_service(db: AsyncSession = Depends(get_db)) -> CourseService:
    return CourseService(CourseStore(db))
