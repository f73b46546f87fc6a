"""Tests for the booking ledger."""

from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from app.core.exceptions import RepositoryError
from app.models import Booking
from app.repositories.booking import BookingRepository
from app.schemas.booking import BookingCreate
from app.services.base import ErrorCode
from app.services.booking import BookingService


def stay(check_in: date, check_out: date, adults: int = 2, children: int = 0) -> BookingCreate:
    return BookingCreate(
        check_in_date=check_in,
        check_out_date=check_out,
        num_of_adults=adults,
        num_of_children=children,
    )


@pytest.fixture
def room(make_room):
    return make_room("Suite", "250.00")


@pytest.fixture
def guest(make_user):
    return make_user()


@pytest.fixture
def june_booking(booking_service, room, guest):
    result = booking_service.create_booking(room.id, guest.id, stay(date(2024, 6, 1), date(2024, 6, 5)))
    assert result.is_success
    return result.data


class TestCreateBooking:
    def test_returns_confirmation_code(self, booking_service, room, guest, db_session):
        result = booking_service.create_booking(room.id, guest.id, stay(date(2024, 6, 1), date(2024, 6, 5)))

        assert result.is_success
        assert len(result.data) == 10
        booking = db_session.query(Booking).one()
        assert booking.booking_confirmation_code == result.data
        assert booking.room_id == room.id
        assert booking.user_id == guest.id

    def test_total_guests_is_adults_plus_children(self, booking_service, room, guest, db_session):
        booking_service.create_booking(room.id, guest.id, stay(date(2024, 6, 1), date(2024, 6, 3), adults=2, children=3))

        assert db_session.query(Booking).one().total_num_of_guests == 5

    @pytest.mark.parametrize(
        "check_in, check_out",
        [
            (date(2024, 6, 5), date(2024, 6, 5)),
            (date(2024, 6, 5), date(2024, 6, 1)),
        ],
    )
    def test_checkout_must_follow_checkin(self, booking_service, room, guest, db_session, check_in, check_out):
        result = booking_service.create_booking(room.id, guest.id, stay(check_in, check_out))

        assert not result.is_success
        assert result.error_code == ErrorCode.INVALID_DATE_RANGE
        assert result.status_code == 400
        assert db_session.query(Booking).count() == 0

    def test_unknown_room(self, booking_service, guest):
        result = booking_service.create_booking(999, guest.id, stay(date(2024, 6, 1), date(2024, 6, 5)))

        assert result.error_code == ErrorCode.ROOM_NOT_FOUND
        assert result.status_code == 404

    def test_unknown_user(self, booking_service, room):
        result = booking_service.create_booking(room.id, 999, stay(date(2024, 6, 1), date(2024, 6, 5)))

        assert result.error_code == ErrorCode.USER_NOT_FOUND

    def test_date_range_checked_before_lookups(self, booking_service):
        result = booking_service.create_booking(999, 999, stay(date(2024, 6, 5), date(2024, 6, 1)))

        assert result.error_code == ErrorCode.INVALID_DATE_RANGE


class TestAvailabilityRule:
    def test_overlapping_request_rejected(self, booking_service, room, guest, june_booking, db_session):
        result = booking_service.create_booking(room.id, guest.id, stay(date(2024, 6, 3), date(2024, 6, 7)))

        assert result.error_code == ErrorCode.ROOM_UNAVAILABLE
        assert result.status_code == 409
        assert db_session.query(Booking).count() == 1

    def test_checkin_on_previous_checkout_accepted(self, booking_service, room, guest, june_booking):
        result = booking_service.create_booking(room.id, guest.id, stay(date(2024, 6, 5), date(2024, 6, 10)))

        assert result.is_success

    def test_checkout_on_existing_checkin_accepted(self, booking_service, room, guest, june_booking):
        result = booking_service.create_booking(room.id, guest.id, stay(date(2024, 5, 1), date(2024, 6, 1)))

        assert result.is_success

    def test_other_rooms_unaffected(self, booking_service, make_room, guest, june_booking):
        other = make_room("Single", "80.00")

        result = booking_service.create_booking(other.id, guest.id, stay(date(2024, 6, 1), date(2024, 6, 5)))

        assert result.is_success

    def test_sequential_bookings_never_overlap(self, booking_service, room, guest, db_session):
        start = date(2024, 1, 1)
        requests = [(start + timedelta(days=offset), start + timedelta(days=offset + length))
                    for offset, length in [(0, 3), (2, 2), (3, 4), (5, 1), (7, 2), (8, 5), (6, 1)]]
        for check_in, check_out in requests:
            booking_service.create_booking(room.id, guest.id, stay(check_in, check_out))

        bookings = db_session.query(Booking).filter_by(room_id=room.id).all()
        for i, first in enumerate(bookings):
            for second in bookings[i + 1:]:
                assert not (first.check_in_date < second.check_out_date
                            and first.check_out_date > second.check_in_date)

    def test_cancelled_booking_frees_dates(self, booking_service, room, guest, june_booking, db_session):
        booking_id = db_session.query(Booking).one().id
        assert booking_service.cancel(booking_id).is_success

        result = booking_service.create_booking(room.id, guest.id, stay(date(2024, 6, 2), date(2024, 6, 4)))

        assert result.is_success


class TestLookupAndListing:
    def test_find_by_confirmation_code(self, booking_service, room, guest, june_booking):
        result = booking_service.find_by_confirmation_code(june_booking)

        assert result.is_success
        view = result.data
        assert view.booking_confirmation_code == june_booking
        assert view.check_in_date == date(2024, 6, 1)
        assert view.check_out_date == date(2024, 6, 5)
        assert view.total_num_of_guests == 2
        assert view.room.id == room.id
        assert view.room.room_type == "Suite"
        assert view.user.email == guest.email

    def test_unknown_confirmation_code(self, booking_service):
        result = booking_service.find_by_confirmation_code("NOPE000000")

        assert result.error_code == ErrorCode.BOOKING_NOT_FOUND
        assert result.status_code == 404

    def test_list_all_newest_first(self, booking_service, room, guest):
        codes = []
        for month in (1, 2, 3):
            result = booking_service.create_booking(room.id, guest.id, stay(date(2024, month, 1), date(2024, month, 3)))
            codes.append(result.data)

        result = booking_service.list_all()

        assert result.is_success
        assert [b.booking_confirmation_code for b in result.data] == list(reversed(codes))
        ids = [b.id for b in result.data]
        assert ids == sorted(ids, reverse=True)

    def test_list_all_empty(self, booking_service):
        assert booking_service.list_all().data == []


class TestCancel:
    def test_cancel_removes_booking(self, booking_service, june_booking, db_session):
        booking_id = db_session.query(Booking).one().id

        result = booking_service.cancel(booking_id)

        assert result.is_success
        assert result.data is True
        assert db_session.query(Booking).count() == 0

    def test_cancel_twice_fails_second_time(self, booking_service, june_booking, db_session):
        booking_id = db_session.query(Booking).one().id

        assert booking_service.cancel(booking_id).is_success
        second = booking_service.cancel(booking_id)

        assert second.error_code == ErrorCode.BOOKING_NOT_FOUND

    def test_cancel_unknown_id(self, booking_service):
        assert booking_service.cancel(12345).error_code == ErrorCode.BOOKING_NOT_FOUND


class TestStorageFailures:
    def test_repository_error_becomes_storage_failure(self, db_session, room, guest):
        repository = MagicMock(spec=BookingRepository)
        repository.list_for_room.side_effect = RepositoryError("connection lost")
        service = BookingService(repository, db_session)

        result = service.create_booking(room.id, guest.id, stay(date(2024, 6, 1), date(2024, 6, 5)))

        assert not result.is_success
        assert result.error_code == ErrorCode.STORAGE_FAILURE
        assert result.status_code == 500

    def test_listing_failure_is_reported_not_raised(self, db_session):
        repository = MagicMock(spec=BookingRepository)
        repository.find_all_with_relations.side_effect = RepositoryError("disk full")
        service = BookingService(repository, db_session)

        result = service.list_all()

        assert result.error_code == ErrorCode.STORAGE_FAILURE
