import pytest

from qr_attendance.core.exceptions import ValidationError
from qr_attendance.sessions.service import SessionService


def test_create_session_uses_today_and_builds_code(memory_repo):
    svc = SessionService(memory_repo)

    session = svc.create_session(year="Third Year", subject="GIS", time="09:30", today="2025-06-14")

    assert session.pending is True
    assert session.date == "2025-06-14"
    assert session.code_value == "GIS@2025-06-14@09:30"
    assert memory_repo.calls == []


@pytest.mark.parametrize(
    "year,subject,time",
    [
        ("", "GIS", "09:30"),
        ("Third Year", "", "09:30"),
        ("Third Year", "GIS", ""),
        ("First Year", "GIS", "09:30"),
        ("Third Year", "GIS", "9:30am"),
    ],
)
def test_create_session_rejects_incomplete_or_unknown_input(memory_repo, year, subject, time):
    with pytest.raises(ValidationError):
        SessionService(memory_repo).create_session(year=year, subject=subject, time=time, today="2025-06-14")


def test_history_merges_pending_and_prunes_superseded(memory_repo):
    svc = SessionService(memory_repo)
    waiting = svc.create_session(year="Third Year", subject="GIS", time="09:30", today="2025-06-14")
    later = svc.create_session(year="Third Year", subject="Machine Learning", time="11:00", today="2025-06-14")
    memory_repo.add(student_id="A100")
    memory_repo.add(student_id="A101", subject="gis")

    history = svc.history([waiting, later])

    assert [v.session.id for v in history.sessions] == [later.id, "r1", "r2"]
    assert [s.id for s in history.pending] == [later.id]
    gis = history.sessions[1]
    assert [r.student_id for r in gis.students] == ["A100", "A101"]


def test_history_limit_caps_sessions_but_keeps_total(memory_repo):
    for i in range(20):
        memory_repo.add(time=f"{i:02d}:00")

    history = SessionService(memory_repo).history([], limit=15)

    assert len(history.sessions) == 15
    assert history.total == 20
    assert history.sessions[0].session.time == "19:00"


def test_session_attendance_filters_store_rows_with_matching(memory_repo):
    memory_repo.add(student_id="A100")
    memory_repo.add(student_id="A101", time="10:30")

    records = SessionService(memory_repo).session_attendance(
        subject="GIS", year="Third Year", date="2025-06-14", time="09:30"
    )

    assert [r.student_id for r in records] == ["A100"]
    assert memory_repo.calls[-1] == ("faculty", "2025-06-14", "Third Year", "GIS")
