from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.math_utils import percentage
from ..common.validators import is_hh_mm, is_iso_date, require_non_empty
from ..core.constants import ACADEMIC_YEARS
from ..core.enums import AttendanceMark, MarkedBy
from ..core.exceptions import ValidationError
from ..qr.payload import decode_payload
from ..sessions.model import Session
from ..sessions.reconcile import matches_session
from ..users.model import User
from .model import AttendanceRecord, NewAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentHistory:
    records: list[AttendanceRecord]
    percentage: int

    @property
    def attended(self) -> int:
        return sum(1 for r in self.records if r.mark is not AttendanceMark.ABSENT)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def record_scan(self, user: User, code: str, year: str) -> AttendanceRecord:
        """Student confirms a scanned session code."""

        payload = decode_payload(code)
        year = require_non_empty(year, "Academic year")
        if year not in ACADEMIC_YEARS:
            raise ValidationError(f"Unknown academic year: {year}")

        student_id = user.student_id
        for existing in self._attendance.get_attendance_for_student(student_id):
            if matches_session(payload.subject, year, payload.date, payload.time, existing):
                raise ValidationError("Attendance already marked for this session")

        record = self._attendance.insert_attendance(
            NewAttendance(
                student_id=student_id,
                student_name=user.name,
                subject=payload.subject,
                year=year,
                date=payload.date,
                time=payload.time,
                qr_code_value=code.strip(),
                marked_by=MarkedBy.STUDENT.value,
            )
        )
        logger.info("student %s marked %s on %s %s", student_id, record.subject, record.date, record.time)
        return record

    def mark_manually(self, session: Session, *, student_id: str, student_name: str) -> AttendanceRecord:
        """Faculty marks a student present who never scanned."""

        student_id = require_non_empty(student_id, "Student ID")
        student_name = require_non_empty(student_name, "Student name")
        if not is_iso_date(session.date):
            raise ValidationError(f"Invalid session date: {session.date!r}")
        if not is_hh_mm(session.time):
            raise ValidationError(f"Invalid session time: {session.time!r}")
        return self._attendance.insert_attendance(
            NewAttendance(
                student_id=student_id,
                student_name=student_name,
                subject=session.subject,
                year=session.year,
                date=session.date,
                time=session.time,
                qr_code_value=session.code_value,
                marked_by=MarkedBy.FACULTY.value,
            )
        )

    def set_mark(self, record_id: str, present: bool) -> Optional[AttendanceRecord]:
        """Write the mark; None when the update failed or the row is gone.

        Failures are logged only, the caller keeps its current state.
        """

        try:
            return self._attendance.update_attendance_mark(record_id, present)
        except Exception:
            logger.exception("attendance toggle failed for record %s", record_id)
            return None

    def toggle_mark(self, record: AttendanceRecord) -> AttendanceRecord:
        """Flip Present <-> Absent; the record is unchanged if the store fails."""

        updated = self.set_mark(record.id, not record.is_present)
        if updated is None:
            return record
        return record.with_marked_by(updated.marked_by)

    def student_history(self, user: User) -> StudentHistory:
        records = list(self._attendance.get_attendance_for_student(user.student_id))
        attended = sum(1 for r in records if r.mark is not AttendanceMark.ABSENT)
        return StudentHistory(records=records, percentage=percentage(attended, len(records)))
