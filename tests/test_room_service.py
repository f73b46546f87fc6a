from datetime import date
from decimal import Decimal

import pytest

from app.models import Booking, Room
from app.repositories.room import RoomRepository
from app.schemas.room import RoomCreate, RoomUpdate
from app.services.base import ErrorCode
from app.services.room import RoomService


@pytest.fixture
def room_service(db_session):
    return RoomService(RoomRepository(db_session), db_session)


def test_add_room(room_service, db_session):
    result = room_service.add_room(
        RoomCreate(room_type="Suite", room_price=Decimal("250.00"), room_description="Sea view")
    )

    assert result.is_success
    assert result.data.id is not None
    assert result.data.room_type == "Suite"
    assert db_session.query(Room).count() == 1


def test_list_all_newest_first(room_service, make_room):
    first = make_room("Single")
    second = make_room("Double")

    result = room_service.list_all()

    assert [r.id for r in result.data] == [second.id, first.id]


def test_room_types_are_distinct(room_service, make_room):
    make_room("Suite")
    make_room("Double")
    make_room("Suite")

    assert sorted(room_service.get_room_types().data) == ["Double", "Suite"]


def test_get_room_includes_bookings(room_service, make_room, make_user, make_booking):
    room = make_room()
    make_booking(room, make_user(), date(2024, 6, 1), date(2024, 6, 5))

    result = room_service.get_room_by_id(room.id)

    assert result.is_success
    assert len(result.data.bookings) == 1
    assert result.data.bookings[0].booking_confirmation_code == "SEEDED0001"


def test_get_missing_room(room_service):
    result = room_service.get_room_by_id(42)

    assert result.error_code == ErrorCode.ROOM_NOT_FOUND
    assert "42" in result.error.message


def test_rooms_without_bookings(room_service, make_room, make_user, make_booking):
    booked = make_room()
    free = make_room()
    make_booking(booked, make_user(), date(2024, 6, 1), date(2024, 6, 5))

    assert [r.id for r in room_service.get_all_available_rooms().data] == [free.id]


class TestListAvailable:
    @pytest.fixture
    def rooms(self, make_room, make_user, make_booking):
        suite = make_room("Suite")
        double = make_room("Double")
        make_booking(suite, make_user(), date(2024, 6, 1), date(2024, 6, 5))
        return suite, double

    def test_excludes_overlapping_rooms(self, room_service, rooms):
        suite, double = rooms

        result = room_service.list_available(date(2024, 6, 3), date(2024, 6, 7))

        assert [r.id for r in result.data] == [double.id]

    def test_back_to_back_stay_is_free(self, room_service, rooms):
        suite, double = rooms

        result = room_service.list_available(date(2024, 6, 5), date(2024, 6, 8))

        assert {r.id for r in result.data} == {suite.id, double.id}

    def test_filters_by_room_type(self, room_service, rooms):
        suite, _ = rooms

        result = room_service.list_available(date(2024, 7, 1), date(2024, 7, 3), room_type="Suite")

        assert [r.id for r in result.data] == [suite.id]

    def test_blank_room_type_matches_any(self, room_service, rooms):
        result = room_service.list_available(date(2024, 7, 1), date(2024, 7, 3), room_type="  ")

        assert len(result.data) == 2

    def test_rejects_inverted_range(self, room_service, rooms):
        result = room_service.list_available(date(2024, 7, 3), date(2024, 7, 1))

        assert result.error_code == ErrorCode.INVALID_DATE_RANGE


def test_update_room_keeps_omitted_fields(room_service, make_room):
    room = make_room("Single", "80.00")

    result = room_service.update_room(room.id, RoomUpdate(room_price=Decimal("95.50")))

    assert result.is_success
    assert result.data.room_type == "Single"
    assert result.data.room_price == Decimal("95.50")


def test_update_missing_room(room_service):
    assert room_service.update_room(7, RoomUpdate(room_type="Suite")).error_code == ErrorCode.ROOM_NOT_FOUND


def test_delete_room_removes_its_bookings(room_service, make_room, make_user, make_booking, db_session):
    room = make_room()
    make_booking(room, make_user(), date(2024, 6, 1), date(2024, 6, 5))

    result = room_service.delete_room(room.id)

    assert result.is_success
    assert db_session.query(Room).count() == 0
    assert db_session.query(Booking).count() == 0


def test_delete_missing_room(room_service):
    assert room_service.delete_room(3).error_code == ErrorCode.ROOM_NOT_FOUND
