from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional

from ..core.enums import AttendanceMark


@dataclass(frozen=True)
class NewAttendance:
    """Fields accepted by ``insert_attendance``."""

    student_id: str
    student_name: str
    subject: str
    year: str
    date: str
    time: str
    qr_code_value: Optional[str] = None
    marked_by: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AttendanceRecord:
    """One row of the ``attendance`` table."""

    id: str
    student_id: str
    student_name: str
    subject: str
    year: str
    date: str
    time: str
    qr_code_value: Optional[str] = None
    marked_by: Optional[str] = None

    @property
    def mark(self) -> AttendanceMark:
        return AttendanceMark.from_marked_by(self.marked_by)

    @property
    def is_present(self) -> bool:
        return self.mark is AttendanceMark.PRESENT

    def with_marked_by(self, marked_by: Optional[str]) -> "AttendanceRecord":
        return replace(self, marked_by=marked_by)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["mark"] = self.mark.value
        return data

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            id=str(row["id"]),
            student_id=str(row.get("student_id") or ""),
            student_name=str(row.get("student_name") or ""),
            subject=str(row.get("subject") or ""),
            year=str(row.get("year") or ""),
            date=str(row.get("date") or ""),
            time=str(row.get("time") or ""),
            qr_code_value=row.get("qr_code_value"),
            marked_by=row.get("marked_by"),
        )
