from __future__ import annotations

from typing import Optional

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .model import Account, User
from .repository import UserDirectory

DEMO_PASSWORD = "pass123"

DEMO_USERS = (
    User(role=Role.HOD, name="HOD Admin", email="hod@demo.com"),
    User(role=Role.FACULTY, name="Faculty John", email="faculty@demo.com"),
    User(role=Role.STUDENT, name="Student Sam", email="student@demo.com", roll="A100", prn="1234567890123"),
)


class InMemoryUserDirectory(UserDirectory):
    """Process-local account list. Sign-ups are lost on restart."""

    def __init__(self):
        self._accounts: dict[tuple[Role, str], Account] = {}

    def get(self, role: Role, email: str) -> Optional[Account]:
        return self._accounts.get((role, email.strip().lower()))

    def add(self, account: Account) -> None:
        self._accounts[(account.user.role, account.user.email.strip().lower())] = account

    @classmethod
    def with_demo_users(cls) -> "InMemoryUserDirectory":
        directory = cls()
        for user in DEMO_USERS:
            directory.add(Account(user=user, password_hash=generate_password_hash(DEMO_PASSWORD)))
        return directory
