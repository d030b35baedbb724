from qr_attendance.attendance.model import AttendanceRecord
from qr_attendance.sessions.model import Session
from qr_attendance.sessions.reconcile import attendees, matches_session, prune_pending, reconcile, trim_pending


def _row(id, subject="GIS", year="Third Year", date="2025-06-14", time="09:30", **kw):
    return AttendanceRecord(
        id=id,
        student_id=kw.get("student_id", "A100"),
        student_name=kw.get("student_name", "Student Sam"),
        subject=subject,
        year=year,
        date=date,
        time=time,
        marked_by=kw.get("marked_by"),
    )


def _pending(id, subject="GIS", year="Third Year", date="2025-06-14", time="09:30"):
    return Session(
        id=id,
        subject=subject,
        year=year,
        date=date,
        time=time,
        code_value=f"{subject}@{date}@{time}",
        pending=True,
    )


def test_remote_row_wins_over_pending_with_same_key():
    sessions = reconcile([_row("r1")], [_pending("local-1")])

    assert len(sessions) == 1
    assert sessions[0].id == "r1"
    assert sessions[0].pending is False
    assert sessions[0].code_value == "GIS@2025-06-14@09:30"


def test_rows_sharing_a_key_collapse_to_first_row_id():
    rows = [
        _row("r7", student_id="A101"),
        _row("r3", student_id="A102"),
        _row("r9", student_id="A103"),
    ]

    sessions = reconcile(rows, [])

    assert [s.id for s in sessions] == ["r7"]


def test_pending_without_rows_is_kept():
    sessions = reconcile([_row("r1")], [_pending("p1", subject="Machine Learning")])

    assert {s.id for s in sessions} == {"r1", "p1"}


def test_sorted_by_date_then_time_descending():
    rows = [
        _row("a", date="2025-06-13", time="11:00"),
        _row("b", date="2025-06-14", time="09:30"),
        _row("c", date="2025-06-14", time="14:00"),
    ]
    pending = [_pending("p", date="2025-06-15", time="08:00")]

    sessions = reconcile(rows, pending)

    assert [s.id for s in sessions] == ["p", "c", "b", "a"]


def test_same_subject_different_year_are_distinct_sessions():
    sessions = reconcile([_row("a", year="Third Year"), _row("b", year="Fourth Year")], [])

    assert len(sessions) == 2


def test_prune_pending_drops_superseded_placeholders():
    kept = prune_pending([_row("r1")], [_pending("p1"), _pending("p2", time="11:00")])

    assert [s.id for s in kept] == ["p2"]


def test_match_ignores_case_and_padding_on_subject_year_time():
    rec = _row("r1", subject="physics", year="third year", time="09:30")

    assert matches_session("Physics ", " Third Year", "2025-06-14", " 09:30 ", rec)


def test_match_date_is_whitespace_insensitive_only():
    rec = _row("r1", date="2025-06-15")

    assert not matches_session("GIS", "Third Year", "2025-06-14", "09:30", rec)
    assert matches_session("GIS", "Third Year", " 2025-06-15 ", "09:30", rec)


def test_match_requires_all_four_fields():
    rec = _row("r1")

    assert not matches_session("GIS", "Third Year", "2025-06-14", "10:30", rec)
    assert not matches_session("GIS", "Second Year", "2025-06-14", "09:30", rec)
    assert not matches_session("ML", "Third Year", "2025-06-14", "09:30", rec)


def test_match_treats_missing_values_as_empty():
    rec = _row("r1", subject="", time="")

    assert matches_session(None, "Third Year", "2025-06-14", None, rec)


def test_attendees_filters_rows_for_one_session():
    rows = [_row("r1"), _row("r2", time="11:00"), _row("r3", subject="gis ")]
    session = next(s for s in reconcile(rows, []) if s.id == "r1")

    assert [r.id for r in attendees(session, rows)] == ["r1", "r3"]


def test_trim_pending_drops_past_sessions_and_caps_count():
    pending = [_pending(f"p{i}", time=f"{9 + i:02d}:00", date="2025-06-14") for i in range(4)]
    pending.append(_pending("old", date="2025-06-13"))

    kept = trim_pending(pending, today="2025-06-14", limit=3)

    assert [s.id for s in kept] == ["p0", "p1", "p2"]
