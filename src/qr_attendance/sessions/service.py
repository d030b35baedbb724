from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_iso
from ..common.validators import is_hh_mm
from ..core.constants import ACADEMIC_YEARS, YEAR_SUBJECTS
from ..core.exceptions import ValidationError
from ..qr.payload import encode_payload
from .model import Session, SessionView
from .reconcile import attendees, matches_session, prune_pending, reconcile


@dataclass(frozen=True)
class SessionHistory:
    sessions: list[SessionView]
    pending: list[Session]
    total: int


class SessionService:
    """Faculty session history built on top of the attendance rows."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    @staticmethod
    def subjects_for_year(year: str) -> Sequence[str]:
        return YEAR_SUBJECTS.get(year, ())

    def create_session(self, *, year: str, subject: str, time: str, today: Optional[str] = None) -> Session:
        """New pending session for today; nothing is written to the store."""

        if not year or not subject or not time:
            raise ValidationError("All fields required.")
        if year not in ACADEMIC_YEARS:
            raise ValidationError(f"Unknown academic year: {year}")
        if subject not in self.subjects_for_year(year):
            raise ValidationError("No subjects available for this year.")
        if not is_hh_mm(time):
            raise ValidationError("Time must be HH:MM")

        date = today or today_iso()
        return Session(
            id=uuid.uuid4().hex,
            subject=subject,
            year=year,
            date=date,
            time=time,
            code_value=encode_payload(subject, date, time),
            pending=True,
        )

    def build_history(
        self,
        rows: Sequence[AttendanceRecord],
        pending: Iterable[Session],
        *,
        limit: Optional[int] = None,
    ) -> SessionHistory:
        still_pending = prune_pending(rows, list(pending))
        sessions = reconcile(rows, still_pending)
        total = len(sessions)
        if limit is not None:
            sessions = sessions[:limit]
        return SessionHistory(
            sessions=[SessionView(session=s, students=attendees(s, rows)) for s in sessions],
            pending=still_pending,
            total=total,
        )

    def history(self, pending: Iterable[Session], *, limit: Optional[int] = None) -> SessionHistory:
        rows = list(self._attendance.get_attendance_for_faculty())
        return self.build_history(rows, pending, limit=limit)

    def session_attendance(self, *, subject: str, year: str, date: str, time: str) -> list[AttendanceRecord]:
        rows = self._attendance.get_attendance_for_faculty(date, year, subject)
        return [r for r in rows if matches_session(subject, year, date, time, r)]

    def find_record(self, record_id: str) -> Optional[AttendanceRecord]:
        for r in self._attendance.get_attendance_for_faculty():
            if r.id == str(record_id):
                return r
        return None
