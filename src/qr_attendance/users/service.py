from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_exact_length, require_non_empty
from ..core.constants import PRN_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import Account, User
from .repository import UserDirectory

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials. Try the demo accounts or signup."
INVALID_SIGNUP = "Please fill all fields correctly."


class AuthService:
    """Use cases: login, signup and the one-click demo login.

    Not a security boundary; the directory is a demo stand-in.
    """

    def __init__(self, users: UserDirectory):
        self._users = users

    def authenticate(self, role: Role, email: str, password: str) -> User:
        account = self._users.get(role, email or "")
        if not account:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(account.password_hash, password or "")
        except ValueError:
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS)
        return account.user

    def signup(
        self,
        *,
        role: Role,
        name: str,
        email: str,
        password: str,
        roll: Optional[str] = None,
        prn: Optional[str] = None,
    ) -> User:
        try:
            name = require_non_empty(name, "Name")
            email = require_non_empty(email, "Email")
            require_non_empty(password, "Password")
            if role is Role.STUDENT:
                roll = require_non_empty(roll, "Roll number")
                prn = require_exact_length(require_non_empty(prn, "PRN"), "PRN", PRN_LENGTH)
            else:
                roll = prn = None
        except ValidationError as e:
            logger.info("signup rejected: %s", e)
            raise ValidationError(INVALID_SIGNUP) from e

        user = User(role=role, name=name, email=email, roll=roll, prn=prn)
        self._users.add(Account(user=user, password_hash=generate_password_hash(password)))
        return user

    @staticmethod
    def demo_login(role: Role, email: str, name: Optional[str] = None) -> User:
        email = (email or "").strip()
        return User(role=role, name=(name or "").strip() or email.split("@")[0], email=email)
