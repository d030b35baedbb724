"""Derive the faculty session history from flat attendance rows.

Everything here is pure: callers fetch rows and pass them in after every
fetch, together with the sessions faculty created locally.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..qr.payload import build_code_value
from .model import Session, SessionKey


def record_key(record: AttendanceRecord) -> SessionKey:
    return (record.subject, record.year, record.date, record.time)


def session_from_record(record: AttendanceRecord) -> Session:
    return Session(
        id=record.id,
        subject=record.subject,
        year=record.year,
        date=record.date,
        time=record.time,
        code_value=build_code_value(record.subject, record.date, record.time),
    )


def reconcile(remote_rows: Iterable[AttendanceRecord], pending_sessions: Iterable[Session]) -> list[Session]:
    """Merge row-derived sessions with pending ones.

    One session per identity key. The first row seen for a key supplies the
    session id, and a pending session is only kept when no row shares its key.
    Ordered by date then time, newest first.
    """

    by_key: dict[SessionKey, Session] = {}

    for row in remote_rows:
        key = record_key(row)
        if key not in by_key:
            by_key[key] = session_from_record(row)

    for pending in pending_sessions:
        if pending.key not in by_key:
            by_key[pending.key] = pending

    return sorted(by_key.values(), key=lambda s: (s.date, s.time), reverse=True)


def prune_pending(remote_rows: Iterable[AttendanceRecord], pending_sessions: Sequence[Session]) -> list[Session]:
    """Drop pending sessions that a stored row now backs."""

    known = {record_key(r) for r in remote_rows}
    return [s for s in pending_sessions if s.key not in known]


def trim_pending(pending_sessions: Sequence[Session], *, today: str, limit: int) -> list[Session]:
    """Keep at most ``limit`` pending sessions, none dated before ``today``."""

    return [s for s in pending_sessions if s.date >= today][:limit]


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def matches_session(
    subject: Optional[str],
    year: Optional[str],
    date: Optional[str],
    time: Optional[str],
    record: AttendanceRecord,
) -> bool:
    """Whether ``record`` belongs to the selected session.

    Subject, year and time compare trimmed and case-folded; the date is only
    trimmed since it is always machine generated.
    """

    return (
        _norm(record.time) == _norm(time)
        and _norm(record.subject) == _norm(subject)
        and _norm(record.year) == _norm(year)
        and (record.date or "").strip() == (date or "").strip()
    )


def attendees(session: Session, rows: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
    return [r for r in rows if matches_session(session.subject, session.year, session.date, session.time, r)]
