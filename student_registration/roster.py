"""
Registered students list for the admin view.

The roster only ever holds a full snapshot from the backend: each refresh
replaces it wholesale, and a failed refresh leaves the previous one in place.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from core.exceptions import FetchError

logger = logging.getLogger(__name__)

TABLE_HEADERS = ["Student Name", "Parent Name", "Email", "Phone", "Course", "Grade"]


def _text(value):
    return "" if value is None else str(value)


@dataclass(frozen=True)
class StudentRecord:
    student_name: str = ""
    parent_name: str = ""
    email: str = ""
    phone: str = ""
    course: str = ""
    grade: str = ""
    id: Optional[Any] = None

    @classmethod
    def from_api(cls, data: dict) -> "StudentRecord":
        """
        Build a record from one backend entry.

        The backend stores the POST schema, so full_name / instrument /
        experience_level stand in when the display names are absent.
        """
        return cls(
            student_name=_text(data.get("student_name") or data.get("full_name")),
            parent_name=_text(data.get("parent_name")),
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
            course=_text(data.get("course") or data.get("instrument")),
            grade=_text(data.get("grade") or data.get("experience_level")),
            id=data.get("id"),
        )

    @property
    def row_key(self):
        return _text(self.id or self.email)


class RosterState(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


class StudentRoster:
    """Cached snapshot of registered students, refreshed on demand."""

    def __init__(self, client):
        self.client = client
        self.records: list[StudentRecord] = []
        self.loading = False
        self.error: Optional[str] = None

    @property
    def state(self) -> RosterState:
        if self.loading:
            return RosterState.LOADING
        if not self.records:
            return RosterState.EMPTY
        return RosterState.POPULATED

    @contextmanager
    def _loading(self):
        self.loading = True
        try:
            yield
        finally:
            self.loading = False

    def refresh(self) -> list[StudentRecord]:
        """
        Fetch the list again. Returns the current snapshot.

        On failure the message lands in ``self.error`` and the old snapshot stays.
        """
        self.error = None
        with self._loading():
            try:
                items = self.client.list_students()
            except FetchError as exc:
                logger.warning("Could not load students: %s", exc.message)
                self.error = f"Could not load students: {exc.message}"
                return self.records
        self.records = [StudentRecord.from_api(item) for item in items]
        return self.records
