from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DatabaseConnection, DBConfig
from .reports.service import ReportService
from .sessions.service import SessionService
from .stats.service import StatsService
from .users.memory_directory import InMemoryUserDirectory
from .users.repository import UserDirectory
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository
    users: UserDirectory

    auth_service: AuthService
    attendance_service: AttendanceService
    session_service: SessionService
    report_service: ReportService
    stats_service: StatsService


def build_container(
    *,
    db_config: Optional[dict] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
    users: Optional[UserDirectory] = None,
) -> Container:
    """Wire repositories into services.

    Either ``db_config`` (MySQL) or an ``attendance_repo`` must be given.
    """

    conn = None
    if attendance_repo is None:
        if db_config is None:
            raise ValueError("db_config is required when no attendance_repo is given")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        attendance_repo = MySQLAttendanceRepository(conn)

    users = users if users is not None else InMemoryUserDirectory.with_demo_users()

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        users=users,
        auth_service=AuthService(users),
        attendance_service=AttendanceService(attendance_repo),
        session_service=SessionService(attendance_repo),
        report_service=ReportService(),
        stats_service=StatsService(attendance_repo),
    )
