from __future__ import annotations

import logging
from urllib.parse import urlsplit

from flask import Flask, flash, g, jsonify, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import ACADEMIC_YEARS
from ..core.enums import Role
from ..core.exceptions import MalformedPayload, ValidationError
from ..qr.payload import encode_payload
from ..sessions.model import Session
from ..users.guards import role_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/student", endpoint="student_dashboard")
    @role_required(Role.STUDENT)
    def student_dashboard():
        try:
            history = container.attendance_service.student_history(g.current_user)
        except Exception:
            logger.exception("could not load attendance for %s", g.current_user.student_id)
            flash("Could not load your attendance records", "warning")
            history = None

        return render_template(
            "student/dashboard.html",
            user=g.current_user,
            history=history,
            years=ACADEMIC_YEARS,
        )

    @app.route("/api/student/scan", methods=["POST"], endpoint="api_student_scan")
    @role_required(Role.STUDENT)
    def api_student_scan():
        """Record a scanned session code once the student confirms it."""
        data = request.get_json(silent=True) or {}
        code = str(data.get("code") or "")
        year = str(data.get("year") or "")

        try:
            record = container.attendance_service.record_scan(g.current_user, code, year)
            return jsonify({"success": True, "message": "Attendance marked!", "record": record.to_dict()}), 200
        except MalformedPayload as e:
            return jsonify({"success": False, "message": f"Scan error. Try again. ({e})", "reset": True}), 400
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("scan failed for %s", g.current_user.student_id)
            return jsonify({"success": False, "message": "Could not mark attendance"}), 500

    @app.route("/api/faculty/attendance/<record_id>/toggle", methods=["POST"], endpoint="api_toggle_attendance")
    @role_required(Role.FACULTY)
    def api_toggle_attendance(record_id: str):
        data = request.get_json(silent=True) or {}
        present = bool(data.get("present"))

        updated = container.attendance_service.set_mark(record_id, present)
        if updated is None:
            return jsonify({"success": False, "record": None}), 200
        return jsonify({"success": True, "record": updated.to_dict()}), 200

    @app.route("/faculty/attendance/<record_id>/toggle", methods=["POST"], endpoint="faculty_toggle_attendance")
    @role_required(Role.FACULTY)
    def faculty_toggle_attendance(record_id: str):
        record = container.session_service.find_record(record_id)
        if record is not None:
            container.attendance_service.toggle_mark(record)
        target = request.form.get("next") or ""
        parts = urlsplit(target)
        if parts.scheme or parts.netloc or not target.startswith("/") or target.startswith("/\\"):
            target = url_for("faculty_dashboard")
        return redirect(target)

    @app.route("/faculty/sessions/mark", methods=["POST"], endpoint="faculty_mark_student")
    @role_required(Role.FACULTY)
    def faculty_mark_student():
        form = request.form
        subject = form.get("subject", "")
        date = form.get("date", "")
        time = form.get("time", "")
        try:
            session = Session(
                id="",
                subject=subject,
                year=form.get("year", ""),
                date=date,
                time=time,
                code_value=encode_payload(subject, date, time),
            )
            container.attendance_service.mark_manually(
                session,
                student_id=form.get("student_id", ""),
                student_name=form.get("student_name", ""),
            )
            flash("Student marked present", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            logger.exception("manual mark failed")
            flash("Could not mark the student", "danger")

        return redirect(
            url_for(
                "faculty_session_detail",
                subject=subject,
                year=form.get("year", ""),
                date=date,
                time=time,
            )
        )
