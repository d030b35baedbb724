from __future__ import annotations

import logging

from flask import Flask, flash, g, render_template, request

from ..container import Container
from ..core.constants import ACADEMIC_YEARS, DEFAULT_HOD_YEAR
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..qr.payload import encode_payload
from ..users.guards import role_required
from .service import YearOverview

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/hod", methods=["GET", "POST"], endpoint="hod_dashboard")
    @role_required(Role.HOD)
    def hod_dashboard():
        year = request.args.get("year", DEFAULT_HOD_YEAR)
        if year not in ACADEMIC_YEARS:
            year = DEFAULT_HOD_YEAR

        try:
            overview = container.stats_service.year_overview(year)
        except Exception:
            logger.exception("could not load statistics for %s", year)
            flash("Could not load attendance statistics", "warning")
            overview = YearOverview(year=year, subjects=[])

        qr = {"subject": "", "date": "", "time": ""}
        code_value = None
        if request.method == "POST":
            qr = {k: request.form.get(k, "").strip() for k in qr}
            try:
                code_value = encode_payload(qr["subject"], qr["date"], qr["time"])
                flash("QR Code generated!", "success")
            except ValidationError as e:
                flash(str(e), "warning")

        return render_template(
            "hod/dashboard.html",
            user=g.current_user,
            years=ACADEMIC_YEARS,
            year=year,
            overview=overview,
            qr=qr,
            code_value=code_value,
        )
