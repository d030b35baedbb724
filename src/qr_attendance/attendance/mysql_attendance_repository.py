from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import MarkedBy
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, NewAttendance
from .repository import AttendanceRepository

_COLUMNS = "id, student_id, student_name, subject, year, date, time, qr_code_value, marked_by"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert_attendance(self, record: NewAttendance) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, student_name, subject, year, date, time, qr_code_value, marked_by)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.student_id,
                    record.student_name,
                    record.subject,
                    record.year,
                    record.date,
                    record.time,
                    record.qr_code_value,
                    record.marked_by,
                ),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE id=%s", (cur.lastrowid,))
            return AttendanceRecord.from_row(fetchone(cur))

    def get_attendance_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE student_id=%s
                ORDER BY date DESC
                """,
                (student_id or "",),
            )
            return [AttendanceRecord.from_row(r) for r in fetchall(cur)]

    def get_attendance_for_faculty(
        self,
        date: Optional[str] = None,
        year: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []

        for column, value in (("date", date), ("year", year), ("subject", subject)):
            if value:
                clauses.append(f"{column}=%s")
                params.append(value)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                {where}
                ORDER BY date DESC
                """,
                tuple(params),
            )
            return [AttendanceRecord.from_row(r) for r in fetchall(cur)]

    def update_attendance_mark(self, record_id: str, present: bool) -> Optional[AttendanceRecord]:
        marked_by = MarkedBy.FACULTY.value if present else None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE attendance SET marked_by=%s WHERE id=%s", (marked_by, record_id))
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE id=%s", (record_id,))
            row = fetchone(cur)
            return AttendanceRecord.from_row(row) if row else None
