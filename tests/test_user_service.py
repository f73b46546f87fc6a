from datetime import date
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.core.exceptions import RepositoryError
from app.core.security import decode_token, verify_password
from app.models import Booking, User
from app.models.base.enums import UserRole
from app.repositories.user import UserRepository
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services.auth import AuthService
from app.services.base import ErrorCode
from app.services.user import UserService


@pytest.fixture
def user_service(db_session):
    return UserService(UserRepository(db_session), db_session)


@pytest.fixture
def auth_service(db_session):
    return AuthService(UserRepository(db_session), db_session)


def register_request(**overrides) -> RegisterRequest:
    data = {
        "email": "jane@example.com",
        "name": "Jane Doe",
        "phone_number": "555-0199",
        "password": "correct-horse",
    }
    data.update(overrides)
    return RegisterRequest(**data)


class TestRegister:
    def test_defaults_to_user_role(self, user_service, db_session):
        result = user_service.register(register_request())

        assert result.is_success
        assert result.data.role == "USER"
        stored = db_session.query(User).one()
        assert stored.password_hash != "correct-horse"
        assert verify_password("correct-horse", stored.password_hash)

    def test_explicit_admin_role(self, user_service):
        result = user_service.register(register_request(role="admin"))

        assert result.data.role == "ADMIN"

    def test_duplicate_email(self, user_service):
        user_service.register(register_request())

        result = user_service.register(register_request(name="Someone Else"))

        assert result.error_code == ErrorCode.ALREADY_EXISTS
        assert result.status_code == 400
        assert "jane@example.com" in result.error.message

    def test_duplicate_email_ignores_case(self, user_service):
        user_service.register(register_request())

        result = user_service.register(register_request(email="JANE@example.com"))

        assert result.error_code == ErrorCode.ALREADY_EXISTS

    def test_response_never_carries_password(self, user_service):
        dumped = user_service.register(register_request()).data.model_dump()

        assert "password" not in dumped
        assert "password_hash" not in dumped

    def test_unknown_role_rejected_by_schema(self):
        with pytest.raises(ValueError):
            register_request(role="MANAGER")

    def test_password_whitespace_is_kept(self):
        assert register_request(password="  secret pw  ").password == "  secret pw  "

    def test_padding_counts_towards_minimum_length(self):
        assert register_request(password=" " * 8 + "x").password == "        x"

    def test_whitespace_only_password_rejected(self):
        with pytest.raises(ValueError):
            register_request(password=" " * 10)


class TestQueries:
    def test_get_all_users(self, user_service, make_user):
        first = make_user()
        second = make_user()

        assert [u.id for u in user_service.get_all_users().data] == [second.id, first.id]

    def test_get_user_by_id(self, user_service, make_user):
        user = make_user(email="kim@example.com")

        assert user_service.get_user_by_id(user.id).data.email == "kim@example.com"

    def test_get_missing_user(self, user_service):
        assert user_service.get_user_by_id(99).error_code == ErrorCode.USER_NOT_FOUND

    def test_get_my_info(self, user_service, make_user):
        user = make_user(email="kim@example.com")

        assert user_service.get_my_info("kim@example.com").data.id == user.id

    def test_booking_history_includes_rooms(self, user_service, make_user, make_room, make_booking):
        user = make_user()
        room = make_room("Suite")
        make_booking(room, user, date(2024, 6, 1), date(2024, 6, 5))

        result = user_service.get_user_booking_history(user.id)

        assert result.is_success
        assert len(result.data.bookings) == 1
        assert result.data.bookings[0].room.room_type == "Suite"


class TestMutations:
    def test_update_role(self, user_service, make_user):
        user = make_user()

        result = user_service.update_role(user.id, UserRole.ADMIN)

        assert result.data.role == "ADMIN"

    def test_update_role_missing_user(self, user_service):
        assert user_service.update_role(5, UserRole.ADMIN).error_code == ErrorCode.USER_NOT_FOUND

    def test_delete_user_removes_bookings(self, user_service, make_user, make_room, make_booking, db_session):
        user = make_user()
        make_booking(make_room(), user, date(2024, 6, 1), date(2024, 6, 5))

        assert user_service.delete_user(user.id).is_success
        assert db_session.query(User).count() == 0
        assert db_session.query(Booking).count() == 0

    def test_delete_missing_user(self, user_service):
        assert user_service.delete_user(5).error_code == ErrorCode.USER_NOT_FOUND


class TestLogin:
    def test_login_issues_token(self, auth_service, make_user):
        user = make_user(email="kim@example.com", password="hunter2-long")

        result = auth_service.login(LoginRequest(email="kim@example.com", password="hunter2-long"))

        assert result.is_success
        assert result.data.role == "USER"
        assert result.data.expiration_time == "7 Days"
        payload = decode_token(result.data.token)
        assert payload["sub"] == "kim@example.com"
        assert payload["uid"] == user.id

    def test_wrong_password(self, auth_service, make_user):
        make_user(email="kim@example.com", password="hunter2-long")

        result = auth_service.login(LoginRequest(email="kim@example.com", password="wrong-password"))

        assert result.error_code == ErrorCode.AUTHENTICATION_FAILED
        assert result.status_code == 401
        assert result.error.message == "Bad credentials"

    def test_unknown_email(self, auth_service):
        result = auth_service.login(LoginRequest(email="nobody@example.com", password="whatever"))

        assert result.error_code == ErrorCode.USER_NOT_FOUND

    def test_padded_password_must_match_exactly(self, user_service, auth_service):
        user_service.register(register_request(password="  secret pw  "))

        padded = auth_service.login(LoginRequest(email="jane@example.com", password="  secret pw  "))
        trimmed = auth_service.login(LoginRequest(email="jane@example.com", password="secret pw"))

        assert padded.is_success
        assert trimmed.error_code == ErrorCode.AUTHENTICATION_FAILED


class TestStorageErrors:
    @pytest.fixture
    def broken_session(self):
        session = MagicMock(spec=Session)
        session.scalars.side_effect = OperationalError("SELECT", {}, Exception("database is locked"))
        return session

    def test_email_lookup_wraps_driver_error(self, broken_session):
        with pytest.raises(RepositoryError):
            UserRepository(broken_session).find_by_email("kim@example.com")

    def test_booking_history_wraps_driver_error(self, broken_session):
        with pytest.raises(RepositoryError):
            UserRepository(broken_session).find_with_bookings(1)

    def test_profile_lookup_reports_storage_failure(self, broken_session):
        service = UserService(UserRepository(broken_session), broken_session)

        result = service.get_my_info("kim@example.com")

        assert result.error_code == ErrorCode.STORAGE_FAILURE
        assert result.status_code == 500
