from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from qr_attendance.attendance.model import AttendanceRecord, NewAttendance
from qr_attendance.container import build_container
from qr_attendance.core.enums import MarkedBy, Role
from qr_attendance.main import create_app
from qr_attendance.users.model import User


class InMemoryAttendance:
    """Stand-in for the attendance table with the same ordering rules."""

    def __init__(self, rows: Optional[list[AttendanceRecord]] = None):
        self.rows: list[AttendanceRecord] = list(rows or [])
        self._id = len(self.rows)
        self.calls: list[tuple] = []
        self.fail_updates = False

    def add(self, **fields) -> AttendanceRecord:
        self._id += 1
        data = {
            "id": f"r{self._id}",
            "student_id": "A100",
            "student_name": "Student Sam",
            "subject": "GIS",
            "year": "Third Year",
            "date": "2025-06-14",
            "time": "09:30",
            "qr_code_value": None,
            "marked_by": MarkedBy.STUDENT.value,
        }
        data.update(fields)
        rec = AttendanceRecord(**data)
        self.rows.append(rec)
        return rec

    def _sorted(self, rows):
        return sorted(rows, key=lambda r: r.date, reverse=True)

    def insert_attendance(self, record: NewAttendance) -> AttendanceRecord:
        self.calls.append(("insert", record))
        return self.add(**record.to_dict())

    def get_attendance_for_student(self, student_id: str):
        self.calls.append(("student", student_id))
        return self._sorted(r for r in self.rows if r.student_id == student_id)

    def get_attendance_for_faculty(self, date=None, year=None, subject=None):
        self.calls.append(("faculty", date, year, subject))
        rows = self.rows
        if date:
            rows = [r for r in rows if r.date == date]
        if year:
            rows = [r for r in rows if r.year == year]
        if subject:
            rows = [r for r in rows if r.subject == subject]
        return self._sorted(rows)

    def update_attendance_mark(self, record_id: str, present: bool):
        self.calls.append(("update", record_id, present))
        if self.fail_updates:
            raise ConnectionError("store unavailable")
        for i, r in enumerate(self.rows):
            if r.id == record_id:
                self.rows[i] = replace(r, marked_by=MarkedBy.FACULTY.value if present else None)
                return self.rows[i]
        return None


@pytest.fixture
def memory_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def student() -> User:
    return User(role=Role.STUDENT, name="Student Sam", email="student@demo.com", roll="A100", prn="1234567890123")


@pytest.fixture
def container(memory_repo):
    return build_container(attendance_repo=memory_repo)


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Log the test client in as one of the demo accounts."""

    def _login(role: Role):
        return client.post(
            "/auth",
            data={"mode": "login", "role": role.value, "email": f"{role.value}@demo.com", "password": "pass123"},
        )

    return _login
