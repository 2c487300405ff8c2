"""
Course Catalog — HTTP client for the REST API
"""
import logging
from typing import Any

import httpx

from course_catalog.client.session import SessionState

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A non-2xx response, carrying the server's message when it sent one."""

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class CourseCatalogClient:
    """
    Thin async client. Register/login populate the session; mutating
    course calls attach its Bearer token.
    """

    def __init__(
        self,
        base_url: str,
        session: SessionState | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self.session = session or SessionState()
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "CourseCatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, url: str, fallback: str, **kwargs) -> Any:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(None, fallback) from exc

        if response.is_success:
            return response.json()

        try:
            message = response.json().get("message") or fallback
        except (ValueError, AttributeError):
            message = fallback
        raise ApiError(response.status_code, message)

    # ─── Auth ──────────────────────────────────────────────────────────────────

    async def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        data = await self._request(
            "POST", "/api/auth/register", "Registration failed",
            json={"name": name, "email": email, "password": password},
        )
        self.session.login(data["token"], data["student"])
        return data

    async def login(self, email: str, password: str) -> dict[str, Any]:
        data = await self._request(
            "POST", "/api/auth/login", "Login failed", json={"email": email, "password": password}
        )
        self.session.login(data["token"], data["student"])
        return data

    def logout(self) -> None:
        self.session.logout()

    # ─── Courses ───────────────────────────────────────────────────────────────

    async def list_courses(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/courses", "Failed to load courses")

    async def create_course(self, course_name: str, course_description: str, instructor: str) -> dict[str, Any]:
        return await self._request(
            "POST", "/api/courses", "Failed to create course",
            json={"courseName": course_name, "courseDescription": course_description, "instructor": instructor},
            headers=self.session.auth_headers(),
        )

    async def update_course(
        self, course_id: str, course_name: str, course_description: str, instructor: str
    ) -> dict[str, Any]:
        return await self._request(
            "PUT", f"/api/courses/{course_id}", "Failed to update course",
            json={"courseName": course_name, "courseDescription": course_description, "instructor": instructor},
            headers=self.session.auth_headers(),
        )

    async def delete_course(self, course_id: str) -> dict[str, Any]:
        return await self._request(
            "DELETE", f"/api/courses/{course_id}", "Failed to delete course",
            headers=self.session.auth_headers(),
        )
