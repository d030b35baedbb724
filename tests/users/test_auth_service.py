import pytest

from qr_attendance.core.enums import Role
from qr_attendance.core.exceptions import AuthenticationError, ValidationError
from qr_attendance.users.memory_directory import InMemoryUserDirectory
from qr_attendance.users.service import AuthService


@pytest.fixture
def auth():
    return AuthService(InMemoryUserDirectory.with_demo_users())


def test_demo_account_logs_in(auth):
    user = auth.authenticate(Role.FACULTY, "faculty@demo.com", "pass123")

    assert user.name == "Faculty John"
    assert user.role is Role.FACULTY


def test_wrong_password_raises(auth):
    with pytest.raises(AuthenticationError):
        auth.authenticate(Role.FACULTY, "faculty@demo.com", "wrong")


def test_role_must_match_account(auth):
    with pytest.raises(AuthenticationError):
        auth.authenticate(Role.HOD, "faculty@demo.com", "pass123")


def test_student_signup_requires_roll_and_13_char_prn(auth):
    with pytest.raises(ValidationError):
        auth.signup(role=Role.STUDENT, name="Jane", email="jane@demo.com", password="pw", roll="A1", prn="123")

    user = auth.signup(
        role=Role.STUDENT, name="Jane", email="jane@demo.com", password="pw", roll="A1", prn="1234567890123"
    )

    assert user.student_id == "A1"
    assert auth.authenticate(Role.STUDENT, "jane@demo.com", "pw") == user


def test_faculty_signup_drops_student_fields(auth):
    user = auth.signup(role=Role.FACULTY, name="Ann", email="ann@demo.com", password="pw", roll="X", prn="Y")

    assert user.roll is None and user.prn is None


@pytest.mark.parametrize("field", ["name", "email", "password"])
def test_signup_requires_basic_fields(auth, field):
    data = {"name": "Ann", "email": "ann@demo.com", "password": "pw"}
    data[field] = ""

    with pytest.raises(ValidationError, match="Please fill all fields correctly."):
        auth.signup(role=Role.HOD, **data)


def test_demo_login_defaults_name_to_email_local_part():
    user = AuthService.demo_login(Role.HOD, "head@college.edu")

    assert user.name == "head"
    assert user.to_dict() == {"role": "hod", "name": "head", "email": "head@college.edu"}
