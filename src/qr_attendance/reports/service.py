from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import parse_iso_date
from ..sessions.model import SessionView

logger = logging.getLogger(__name__)

REPORT_HEADER = "Session ID,Subject,Date,Time,Student Name,Present"


def _quoted(value: str) -> str:
    """Subject and name are always quoted, the other columns never are, so lines are joined by hand."""
    return '"' + (value or "").replace('"', '""') + '"'


@dataclass(frozen=True)
class Report:
    text: str
    sessions: int
    rows: int


class ReportService:
    """CSV export of the faculty session history."""

    @staticmethod
    def in_range(view: SessionView, start: Optional[date], end: Optional[date]) -> bool:
        if not start and not end:
            return True
        try:
            session_date = parse_iso_date(view.session.date)
        except ValueError:
            logger.warning("skipping session %s with invalid date %r", view.session.id, view.session.date)
            return False
        if start and session_date < start:
            return False
        if end and session_date > end:
            return False
        return True

    def build_report(
        self,
        views: Iterable[SessionView],
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Report:
        selected = [v for v in views if self.in_range(v, start, end)]

        lines = [REPORT_HEADER]
        for view in selected:
            s = view.session
            for student in view.students:
                lines.append(
                    ",".join(
                        [
                            s.id,
                            _quoted(s.subject),
                            s.date,
                            s.time,
                            _quoted(student.student_name),
                            "Yes" if student.is_present else "No",
                        ]
                    )
                )

        return Report(text="\n".join(lines) + "\n", sessions=len(selected), rows=len(lines) - 1)
