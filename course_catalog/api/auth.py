"""
Course Catalog — Auth API routes
"""
from fastapi import APIRouter, Depends, status

from course_catalog.api.deps import get_auth_service
from course_catalog.schemas.auth import AuthResponse, ErrorResponse, LoginRequest, RegisterRequest
from course_catalog.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Register a new student and issue a session token."""
    return await service.register(payload.name, payload.email, payload.password)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
)
async def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Validate student credentials and issue a session token."""
    return await service.login(payload.email, payload.password)
