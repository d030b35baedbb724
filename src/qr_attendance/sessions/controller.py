from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..common.datetime_utils import parse_iso_date, today_iso
from ..container import Container
from ..core.constants import (
    ACADEMIC_YEARS,
    DEFAULT_SESSION_HISTORY_LIMIT,
    MAX_PENDING_SESSIONS,
    PENDING_SESSIONS_KEY,
    REPORT_FILENAME,
    SESSION_HISTORY_LIMITS,
    YEAR_SUBJECTS,
)
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.guards import role_required
from .model import Session
from .reconcile import trim_pending

logger = logging.getLogger(__name__)


def load_pending() -> list[Session]:
    return [Session.from_dict(d) for d in session.get(PENDING_SESSIONS_KEY, [])]


def save_pending(pending: list[Session]) -> None:
    """Store pending sessions, dropping stale ones and the oldest past the cap."""
    kept = trim_pending(pending, today=today_iso(), limit=MAX_PENDING_SESSIONS)
    session[PENDING_SESSIONS_KEY] = [s.to_dict() for s in kept]


def register(app: Flask, container: Container) -> None:
    def _history_limit() -> int:
        try:
            limit = int(request.args.get("limit", DEFAULT_SESSION_HISTORY_LIMIT))
        except ValueError:
            return DEFAULT_SESSION_HISTORY_LIMIT
        return limit if limit in SESSION_HISTORY_LIMITS else DEFAULT_SESSION_HISTORY_LIMIT

    def _load_history(limit=None):
        try:
            history = container.session_service.history(load_pending(), limit=limit)
        except Exception:
            logger.exception("could not load session history")
            flash("Could not load attendance records", "warning")
            history = container.session_service.build_history([], load_pending(), limit=limit)
        save_pending(history.pending)
        return history

    @app.route("/faculty", endpoint="faculty_dashboard")
    @role_required(Role.FACULTY)
    def faculty_dashboard():
        limit = _history_limit()
        history = _load_history(limit)
        return render_template(
            "faculty/dashboard.html",
            user=g.current_user,
            history=history,
            limit=limit,
            limits=SESSION_HISTORY_LIMITS,
            years=ACADEMIC_YEARS,
            year_subjects=YEAR_SUBJECTS,
            today=today_iso(),
            start=request.args.get("start", ""),
            end=request.args.get("end", ""),
        )

    @app.route("/faculty/sessions", methods=["POST"], endpoint="faculty_create_session")
    @role_required(Role.FACULTY)
    def faculty_create_session():
        form = request.form
        try:
            created = container.session_service.create_session(
                year=form.get("year", ""),
                subject=form.get("subject", ""),
                time=form.get("time", ""),
            )
            save_pending([created] + load_pending())
            flash("QR Code generated!", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        return redirect(url_for("faculty_dashboard"))

    @app.route("/faculty/sessions/detail", endpoint="faculty_session_detail")
    @role_required(Role.FACULTY)
    def faculty_session_detail():
        args = request.args
        subject = args.get("subject", "")
        year = args.get("year", "")
        date = args.get("date", "")
        time = args.get("time", "")

        try:
            records = container.session_service.session_attendance(subject=subject, year=year, date=date, time=time)
        except Exception:
            logger.exception("attendance fetch failed for %s %s %s", subject, date, time)
            records = []

        return render_template(
            "faculty/session.html",
            user=g.current_user,
            subject=subject,
            year=year,
            date=date,
            time=time,
            records=records,
        )

    @app.route("/faculty/report.csv", endpoint="faculty_report_csv")
    @role_required(Role.FACULTY)
    def faculty_report_csv():
        try:
            start = parse_iso_date(request.args["start"]) if request.args.get("start") else None
            end = parse_iso_date(request.args["end"]) if request.args.get("end") else None
        except ValueError:
            flash("Dates must be YYYY-MM-DD", "warning")
            return redirect(url_for("faculty_dashboard"))

        history = _load_history()
        report = container.report_service.build_report(history.sessions, start=start, end=end)
        if not report.sessions:
            flash("No sessions to report in range.", "warning")
            return redirect(url_for("faculty_dashboard"))

        return app.response_class(
            report.text.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={REPORT_FILENAME}"},
        )
