from qr_attendance.core.constants import CURRENT_USER_KEY
from qr_attendance.core.enums import Role
from qr_attendance.users.current_user import CurrentUserStore
from qr_attendance.users.model import User


def test_write_read_clear_roundtrip():
    storage = {}
    store = CurrentUserStore(storage)
    user = User(role=Role.STUDENT, name="Sam", email="s@demo.com", roll="A100", prn="1234567890123")

    assert store.read() is None
    store.write(user)
    assert storage[CURRENT_USER_KEY]["role"] == "student"
    assert store.read() == user

    store.clear()
    assert store.read() is None


def test_unreadable_blob_counts_as_logged_out():
    assert CurrentUserStore({CURRENT_USER_KEY: {"role": "janitor"}}).read() is None
    assert CurrentUserStore({CURRENT_USER_KEY: {"name": "x"}}).read() is None
