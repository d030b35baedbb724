from __future__ import annotations

from typing import MutableMapping, Optional

from ..core.constants import CURRENT_USER_KEY
from .model import User


class CurrentUserStore:
    """Read/write/clear the logged-in user in a session mapping.

    Defaults to ``flask.session``; any mutable mapping works for tests.
    """

    def __init__(self, storage: Optional[MutableMapping] = None, *, key: str = CURRENT_USER_KEY):
        self._storage = storage
        self._key = key

    @property
    def _data(self) -> MutableMapping:
        if self._storage is not None:
            return self._storage
        from flask import session

        return session

    def read(self) -> Optional[User]:
        raw = self._data.get(self._key)
        if not raw:
            return None
        try:
            return User.from_dict(raw)
        except (KeyError, TypeError, ValueError):
            return None

    def write(self, user: User) -> None:
        self._data[self._key] = user.to_dict()

    def clear(self) -> None:
        """Log out: empties the whole session mapping, pending sessions included."""
        self._data.clear()
