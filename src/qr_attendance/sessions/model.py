from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

SessionKey = tuple[str, str, str, str]


@dataclass(frozen=True)
class Session:
    """A class meeting identified by (subject, year, date, time).

    Sessions are never stored on their own: they are either grouped from
    attendance rows or created by faculty before anyone has scanned.
    """

    id: str
    subject: str
    year: str
    date: str
    time: str
    code_value: str
    pending: bool = False

    @property
    def key(self) -> SessionKey:
        return (self.subject, self.year, self.date, self.time)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Session":
        return cls(
            id=str(data["id"]),
            subject=str(data["subject"]),
            year=str(data["year"]),
            date=str(data["date"]),
            time=str(data["time"]),
            code_value=str(data["code_value"]),
            pending=bool(data.get("pending", False)),
        )


@dataclass(frozen=True)
class SessionView:
    """A session together with the rows of the students who attended it."""

    session: Session
    students: list

    @property
    def present_count(self) -> int:
        return sum(1 for r in self.students if r.is_present)
