from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, NewAttendance


class AttendanceRepository(Protocol):
    """Access functions for the ``attendance`` table.

    Each call is a single round trip; nothing is cached or retried and store
    errors propagate to the caller.
    """

    def insert_attendance(self, record: NewAttendance) -> AttendanceRecord:
        raise NotImplementedError

    def get_attendance_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        """Rows for one student, newest date first."""

        raise NotImplementedError

    def get_attendance_for_faculty(
        self,
        date: Optional[str] = None,
        year: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Rows matching every non-empty filter, newest date first."""

        raise NotImplementedError

    def update_attendance_mark(self, record_id: str, present: bool) -> Optional[AttendanceRecord]:
        """Set ``marked_by`` to faculty (present) or null; None if no such row."""

        raise NotImplementedError
