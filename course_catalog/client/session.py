"""
Course Catalog — Client session state

Holds the current token and student identity, optionally mirrored to a
token file so a restart keeps the session.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

LOGIN_ROUTE = "/login"
REGISTER_ROUTE = "/register"
DASHBOARD_ROUTE = "/dashboard"


class SessionState:
    def __init__(self, token_file: Path | None = None):
        self.token_file = token_file
        self.token: str | None = None
        self.student: dict[str, Any] | None = None
        if token_file is not None:
            self._load()

    @property
    def is_authenticated(self) -> bool:
        # No local expiry check: the server rejects expired tokens
        return bool(self.token)

    def login(self, token: str, student: dict[str, Any]) -> None:
        self.token = token
        self.student = student
        self._save()

    def logout(self) -> None:
        self.token = None
        self.student = None
        if self.token_file is not None and self.token_file.exists():
            self.token_file.unlink()
            logger.info("Session cleared")

    def auth_headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def _load(self) -> None:
        if not self.token_file.exists():
            return
        try:
            data = json.loads(self.token_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("Failed to load session from %s: %s", self.token_file, e)
            return
        if not isinstance(data, dict):
            logger.error("Ignoring malformed session file %s", self.token_file)
            return
        self.token = data.get("token")
        self.student = data.get("student")

    def _save(self) -> None:
        if self.token_file is None:
            return
        self.token_file.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.token_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        # open() mode only applies on creation; tighten an existing file before writing
        os.fchmod(fd, 0o600)  # rw-------
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump({"token": self.token, "student": self.student}, fh, indent=2)


def resolve_route(session: SessionState, path: str) -> str:
    """Return the route to show for ``path`` given the session."""
    if path in (LOGIN_ROUTE, REGISTER_ROUTE):
        return DASHBOARD_ROUTE if session.is_authenticated else path
    if path == DASHBOARD_ROUTE:
        return path if session.is_authenticated else LOGIN_ROUTE
    if path == "/":
        return DASHBOARD_ROUTE if session.is_authenticated else LOGIN_ROUTE
    return resolve_route(session, "/")
