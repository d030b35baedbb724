from __future__ import annotations

from functools import wraps

from flask import g, redirect, url_for

from ..core.enums import Role
from .current_user import CurrentUserStore

HOME_ENDPOINTS = {
    Role.STUDENT: "student_dashboard",
    Role.FACULTY: "faculty_dashboard",
    Role.HOD: "hod_dashboard",
}


def home_endpoint(role: Role) -> str:
    return HOME_ENDPOINTS[role]


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = CurrentUserStore().read()
        if user is None:
            return redirect(url_for("auth"))
        g.current_user = user
        return view(*args, **kwargs)

    return wrapper


def role_required(role: Role):
    """Only let ``role`` through; everyone else goes back to the auth page."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = CurrentUserStore().read()
            if user is None or user.role is not role:
                return redirect(url_for("auth"))
            g.current_user = user
            return view(*args, **kwargs)

        return wrapper

    return decorator
