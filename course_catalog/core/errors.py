"""
Course Catalog — Error taxonomy

Every failure that reaches a client is a ServiceError subclass carrying a
kind tag, an HTTP status and a message that is safe to display. Diagnostic
detail stays in the server log.
"""
import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    CONFLICT = "conflict"
    AUTH = "auth_error"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    STORE = "store_error"


class ServiceError(Exception):
    kind: ErrorKind = ErrorKind.STORE
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        return {"message": self.message, "error": self.kind.value}


class ValidationError(ServiceError):
    kind = ErrorKind.VALIDATION
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required"


class ConflictError(ServiceError):
    kind = ErrorKind.CONFLICT
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already registered"


class AuthError(ServiceError):
    kind = ErrorKind.AUTH
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class Unauthenticated(ServiceError):
    kind = ErrorKind.UNAUTHENTICATED
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized, token missing or invalid"


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Course not found"


class StoreError(ServiceError):
    kind = ErrorKind.STORE
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"


def error_response(exc: ServiceError, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return error_response(exc, headers)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected malformed body on %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(ValidationError("Invalid request body"))


async def _store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(StoreError())


def register_error_handlers(app: FastAPI) -> None:
    """Convert every service-layer failure into a JSON body at the request boundary."""
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, _store_error_handler)
