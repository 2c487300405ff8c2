"""
Course Catalog — Access guard middleware
Requires a valid Bearer token on every mutating course request; returns 401 otherwise.
"""
import logging
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from course_catalog.core.errors import Unauthenticated, error_response
from course_catalog.core.security import InvalidToken, TokenIssuer

logger = logging.getLogger(__name__)

GUARDED_PREFIX = "/api/courses"
MUTATING_METHODS = {"POST", "PUT", "PATCH", "DELETE"}


def is_guarded(method: str, path: str) -> bool:
    if method not in MUTATING_METHODS:
        return False
    return path == GUARDED_PREFIX or path.startswith(GUARDED_PREFIX + "/")


class AccessGuardMiddleware(BaseHTTPMiddleware):
    """
    Intercepts mutating course requests and verifies the Bearer token.
    Reads stay public. No ownership check and no identity is attached to
    the request: any valid token may change any course.
    """

    def __init__(self, app: ASGIApp, issuer: TokenIssuer):
        super().__init__(app)
        self.issuer = issuer

    async def dispatch(self, request: Request, call_next) -> Response:
        if not is_guarded(request.method, request.url.path):
            return await call_next(request)

        auth_header = request.headers.get("Authorization", "")
        scheme, _, token = auth_header.partition(" ")
        if scheme != "Bearer" or not token.strip():
            return self._reject()

        try:
            self.issuer.verify(token.strip())
        except InvalidToken as exc:
            logger.debug("Rejected token on %s %s: %s", request.method, request.url.path, exc)
            return self._reject()

        return await call_next(request)

    @staticmethod
    def _reject() -> Response:
        return error_response(Unauthenticated(), headers={"WWW-Authenticate": "Bearer"})
