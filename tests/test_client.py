"""
Client session state, API client and course view against the real app.
"""
import httpx
import pytest
import pytest_asyncio

from conftest import ANN
from course_catalog.client.api import ApiError, CourseCatalogClient
from course_catalog.client.course_view import CourseForm, CourseView
from course_catalog.client.session import SessionState, resolve_route


@pytest_asyncio.fixture
async def api(app):
    async with CourseCatalogClient("http://test", transport=httpx.ASGITransport(app=app)) as c:
        yield c


# ─── Session state ─────────────────────────────────────────────────────────────

def test_session_login_logout():
    session = SessionState()
    assert not session.is_authenticated
    assert session.auth_headers() == {}

    session.login("tok", {"id": "1", "name": "Ann", "email": "a@x.com"})
    assert session.is_authenticated
    assert session.auth_headers() == {"Authorization": "Bearer tok"}

    session.logout()
    assert not session.is_authenticated
    assert session.student is None


def test_session_survives_restart_through_token_file(tmp_path):
    token_file = tmp_path / "session.json"
    SessionState(token_file).login("tok", {"id": "1", "name": "Ann", "email": "a@x.com"})
    assert oct(token_file.stat().st_mode & 0o777) == "0o600"

    restored = SessionState(token_file)
    assert restored.token == "tok"
    assert restored.student["name"] == "Ann"

    restored.logout()
    assert not token_file.exists()
    assert not SessionState(token_file).is_authenticated


def test_existing_token_file_is_tightened_before_write(tmp_path):
    token_file = tmp_path / "session.json"
    token_file.write_text("{}", encoding="utf-8")
    token_file.chmod(0o644)

    SessionState(token_file).login("tok", {"id": "1", "name": "Ann", "email": "a@x.com"})
    assert oct(token_file.stat().st_mode & 0o777) == "0o600"
    assert SessionState(token_file).token == "tok"


@pytest.mark.parametrize("content", ["[1, 2]", '"tok"', "null", "not json"])
def test_malformed_token_file_starts_signed_out(tmp_path, content):
    token_file = tmp_path / "session.json"
    token_file.write_text(content, encoding="utf-8")

    session = SessionState(token_file)
    assert not session.is_authenticated
    assert session.student is None


@pytest.mark.parametrize("path, signed_in, expected", [
    ("/", False, "/login"),
    ("/", True, "/dashboard"),
    ("/dashboard", False, "/login"),
    ("/dashboard", True, "/dashboard"),
    ("/login", True, "/dashboard"),
    ("/register", False, "/register"),
    ("/nowhere", True, "/dashboard"),
])
def test_route_guarding(path, signed_in, expected):
    session = SessionState()
    if signed_in:
        session.login("tok", {"id": "1"})
    assert resolve_route(session, path) == expected


# ─── API client ────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_register_populates_session(api):
    data = await api.register(**ANN)
    assert api.session.token == data["token"]
    assert api.session.student["email"] == "a@x.com"


@pytest.mark.asyncio
async def test_login_failure_surfaces_server_message(api):
    await api.register(**ANN)
    api.logout()
    with pytest.raises(ApiError) as info:
        await api.login("a@x.com", "wrong")
    assert info.value.status_code == 401
    assert info.value.message == "Invalid credentials"
    assert not api.session.is_authenticated


@pytest.mark.asyncio
async def test_fallback_message_when_server_sends_none():
    transport = httpx.MockTransport(lambda request: httpx.Response(502, text="<html>bad gateway</html>"))
    async with CourseCatalogClient("http://test", transport=transport) as c:
        with pytest.raises(ApiError) as info:
            await c.login("a@x.com", "pw")
    assert info.value.status_code == 502
    assert info.value.message == "Login failed"


# ─── Course view ───────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_view_create_update_delete_after_server_confirms(api):
    await api.register(**ANN)
    view = CourseView(api)
    await view.load()
    assert view.courses == []

    assert await view.create(CourseForm("Algo", "Sorting", "Dr. X"))
    assert await view.create(CourseForm("Databases", "SQL", "Dr. Y"))
    assert [c["courseName"] for c in view.courses] == ["Databases", "Algo"]

    algo_id = view.courses[1]["id"]
    assert await view.update(algo_id, CourseForm("Algo II", "Graphs", "Dr. X"))
    assert view.courses[1]["courseName"] == "Algo II"

    assert await view.delete(algo_id)
    assert [c["courseName"] for c in view.courses] == ["Databases"]

    await view.load()
    assert [c["courseName"] for c in view.courses] == ["Databases"]


@pytest.mark.asyncio
async def test_view_keeps_state_when_server_rejects(api):
    await api.register(**ANN)
    view = CourseView(api)
    await view.create(CourseForm("Algo", "Sorting", "Dr. X"))
    before = list(view.courses)

    api.logout()
    assert not await view.create(CourseForm("Other", "Desc", "Dr. Z"))
    assert view.error == "Not authorized, token missing or invalid"
    assert not await view.delete(before[0]["id"])
    assert view.courses == before


@pytest.mark.asyncio
async def test_view_requires_complete_form_before_calling_server(api):
    view = CourseView(api)
    assert not await view.create(CourseForm("Algo", "", "Dr. X"))
    assert view.error == "All fields are required"
    assert await api.list_courses() == []


@pytest.mark.asyncio
async def test_view_search_and_instructor_filter_are_local(api):
    view = CourseView(api)
    view.courses = [
        {"id": "1", "courseName": "Intro to React", "courseDescription": "Hooks", "instructor": "Dr. Smith"},
        {"id": "2", "courseName": "Algorithms", "courseDescription": "Graphs and react-ive systems", "instructor": "Dr. Jones"},
        {"id": "3", "courseName": "Databases", "courseDescription": "SQL", "instructor": "Dr. Smith"},
    ]
    assert view.instructors == ["Dr. Jones", "Dr. Smith"]

    view.search = "  REACT "
    assert [c["id"] for c in view.filtered] == ["1", "2"]

    view.instructor_filter = "Dr. Smith"
    assert [c["id"] for c in view.filtered] == ["1"]

    view.search = "smith"
    assert [c["id"] for c in view.filtered] == ["1", "3"]
    assert view.summary == {"total": 3, "instructors": 2, "showing": 2}
