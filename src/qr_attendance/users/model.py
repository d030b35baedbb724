from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Logged-in user as kept in the Flask session.

    This is a plain data object, it carries no credentials.
    """

    role: Role
    name: str
    email: str
    roll: Optional[str] = None
    prn: Optional[str] = None

    @property
    def student_id(self) -> str:
        """Identifier written to ``attendance.student_id``."""
        return self.roll or self.email

    def to_dict(self) -> dict:
        data = {"role": self.role.value, "name": self.name, "email": self.email}
        if self.roll:
            data["roll"] = self.roll
        if self.prn:
            data["prn"] = self.prn
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            role=Role(data["role"]),
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            roll=data.get("roll") or None,
            prn=data.get("prn") or None,
        )


@dataclass(frozen=True)
class Account:
    """Directory entry used by the demo login."""

    user: User
    password_hash: str
