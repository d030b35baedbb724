from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .current_user import CurrentUserStore
from .guards import home_endpoint

logger = logging.getLogger(__name__)


def _selected_role() -> Role:
    try:
        return Role(request.form.get("role") or request.args.get("role") or Role.STUDENT.value)
    except ValueError:
        return Role.STUDENT


def register(app: Flask, container: Container) -> None:
    users = CurrentUserStore()

    @app.route("/", endpoint="index")
    def index():
        return render_template("index.html")

    @app.route("/auth", methods=["GET", "POST"], endpoint="auth")
    def auth():
        mode = request.values.get("mode", "login")
        role = _selected_role()

        if request.method == "POST":
            form = request.form
            try:
                if mode == "signup":
                    user = container.auth_service.signup(
                        role=role,
                        name=form.get("name", ""),
                        email=form.get("email", ""),
                        password=form.get("password", ""),
                        roll=form.get("roll"),
                        prn=form.get("prn"),
                    )
                else:
                    user = container.auth_service.authenticate(role, form.get("email", ""), form.get("password", ""))

                users.write(user)
                return redirect(url_for(home_endpoint(user.role)))
            except (AuthenticationError, ValidationError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("login failed")
                flash("Something went wrong while signing in", "danger")

        return render_template("auth.html", mode=mode, role=role.value, roles=list(Role))

    @app.route("/auth/demo", methods=["POST"], endpoint="demo_login")
    def demo_login():
        role = _selected_role()
        user = container.auth_service.demo_login(role, request.form.get("email", ""), request.form.get("name"))
        users.write(user)
        return redirect(url_for(home_endpoint(user.role)))

    @app.route("/logout", endpoint="logout")
    def logout():
        users.clear()
        return redirect(url_for("auth"))
