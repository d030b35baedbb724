from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import Account


class UserDirectory(Protocol):
    def get(self, role: Role, email: str) -> Optional[Account]:
        raise NotImplementedError

    def add(self, account: Account) -> None:
        raise NotImplementedError
