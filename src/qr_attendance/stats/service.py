from __future__ import annotations

from dataclasses import dataclass

from ..attendance.repository import AttendanceRepository
from ..common.math_utils import percentage
from ..sessions.reconcile import record_key


@dataclass(frozen=True)
class SubjectStat:
    subject: str
    present: int
    total: int
    sessions: int

    @property
    def percent(self) -> int:
        return percentage(self.present, self.total)


@dataclass(frozen=True)
class YearOverview:
    year: str
    subjects: list[SubjectStat]

    @property
    def is_empty(self) -> bool:
        return not self.subjects


class StatsService:
    """Department-level aggregates for the HOD dashboard."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def year_overview(self, year: str) -> YearOverview:
        rows = self._attendance.get_attendance_for_faculty(year=year)

        present: dict[str, int] = {}
        total: dict[str, int] = {}
        sessions: dict[str, set] = {}
        for r in rows:
            total[r.subject] = total.get(r.subject, 0) + 1
            if r.is_present:
                present[r.subject] = present.get(r.subject, 0) + 1
            sessions.setdefault(r.subject, set()).add(record_key(r))

        subjects = [
            SubjectStat(subject=s, present=present.get(s, 0), total=total[s], sessions=len(sessions[s]))
            for s in sorted(total)
        ]
        return YearOverview(year=year, subjects=subjects)
