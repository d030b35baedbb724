from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """User roles, each with its own dashboard."""

    STUDENT = "student"
    FACULTY = "faculty"
    HOD = "hod"


class MarkedBy(str, Enum):
    """Values stored in the ``marked_by`` column."""

    STUDENT = "student"
    FACULTY = "faculty"


class AttendanceMark(str, Enum):
    """Attendance state derived from ``marked_by``.

    ``UNMARKED`` is a self-reported scan that faculty has not reviewed yet,
    ``ABSENT`` is anything else that is not a faculty confirmation.
    """

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNMARKED = "UNMARKED"

    @classmethod
    def from_marked_by(cls, marked_by: Optional[str]) -> "AttendanceMark":
        if marked_by == MarkedBy.FACULTY.value:
            return cls.PRESENT
        if marked_by == MarkedBy.STUDENT.value:
            return cls.UNMARKED
        return cls.ABSENT

    @property
    def label(self) -> str:
        return {
            AttendanceMark.PRESENT: "Present",
            AttendanceMark.ABSENT: "Absent",
            AttendanceMark.UNMARKED: "Unmarked",
        }[self]
