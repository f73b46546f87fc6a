"""
Room inventory service: CRUD, room types and availability search.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.services.base import (
    BaseService,
    ServiceResult,
    ErrorCode,
    ErrorSeverity,
    track_performance,
)
from app.repositories.room import RoomRepository
from app.models.room.room import Room as RoomModel
from app.schemas.room.room_base import RoomCreate, RoomUpdate
from app.schemas.room.room_response import RoomDetailResponse, RoomResponse
from app.utils.date_utils import is_valid_stay


class RoomService(BaseService[RoomModel, RoomRepository]):
    """
    Room directory.

    Rooms carry no availability state of their own; availability is
    derived from the bookings held against each room.
    """

    def __init__(self, repository: RoomRepository, db_session: Session):
        super().__init__(repository, db_session)

    @track_performance("add_room")
    def add_room(self, request: RoomCreate) -> ServiceResult[RoomResponse]:
        """
        Add a room to the inventory.

        Args:
            request: Room type, price, description and photo URI

        Returns:
            ServiceResult containing the created room or error
        """
        try:
            room = RoomModel(
                room_type=request.room_type,
                room_price=request.room_price,
                room_description=request.room_description,
                room_photo_url=request.room_photo_url,
            )
            room = self.repository.create(room)
            self._log_operation("add room", room.id, {"room_type": room.room_type})
            return ServiceResult.success(RoomResponse.model_validate(room), message="successful")
        except Exception as e:
            return self._handle_exception(e, "add room")

    def list_all(self) -> ServiceResult[List[RoomResponse]]:
        try:
            rooms = self.repository.find_all(newest_first=True)
            return ServiceResult.success(
                [RoomResponse.model_validate(r) for r in rooms],
                message="successful",
            )
        except Exception as e:
            return self._handle_exception(e, "list rooms")

    def get_room_types(self) -> ServiceResult[List[str]]:
        """Distinct room types, alphabetically."""
        try:
            return ServiceResult.success(self.repository.find_distinct_room_types(), message="successful")
        except Exception as e:
            return self._handle_exception(e, "list room types")

    def get_room_by_id(self, room_id: int) -> ServiceResult[RoomDetailResponse]:
        """Room with its bookings."""
        try:
            room = self.repository.find_with_bookings(room_id)
            if not room:
                return ServiceResult.not_found("Room", room_id, code=ErrorCode.ROOM_NOT_FOUND)
            return ServiceResult.success(RoomDetailResponse.model_validate(room), message="successful")
        except Exception as e:
            return self._handle_exception(e, "get room", room_id)

    def get_all_available_rooms(self) -> ServiceResult[List[RoomResponse]]:
        """Rooms without any booking."""
        try:
            rooms = self.repository.find_without_bookings()
            return ServiceResult.success(
                [RoomResponse.model_validate(r) for r in rooms],
                message="successful",
            )
        except Exception as e:
            return self._handle_exception(e, "list unbooked rooms")

    @track_performance("list_available_rooms")
    def list_available(
        self,
        check_in_date: date,
        check_out_date: date,
        room_type: Optional[str] = None,
    ) -> ServiceResult[List[RoomResponse]]:
        """
        Rooms free for the whole stay, optionally of one type.

        Args:
            check_in_date: Requested arrival date
            check_out_date: Requested departure date (exclusive)
            room_type: Exact room type to match; blank means any

        Returns:
            ServiceResult containing matching rooms or error
        """
        try:
            if not is_valid_stay(check_in_date, check_out_date):
                return ServiceResult.fail(
                    ErrorCode.INVALID_DATE_RANGE,
                    "Check-out date must come after check-in date",
                    field="check_out_date",
                    severity=ErrorSeverity.WARNING,
                )

            room_type = room_type.strip() if room_type else None
            rooms = self.repository.find_available(check_in_date, check_out_date, room_type)
            return ServiceResult.success(
                [RoomResponse.model_validate(r) for r in rooms],
                message="successful",
                metadata={"count": len(rooms)},
            )
        except Exception as e:
            return self._handle_exception(e, "search available rooms")

    @track_performance("update_room")
    def update_room(self, room_id: int, request: RoomUpdate) -> ServiceResult[RoomResponse]:
        """Apply the fields present in ``request``; others keep their value."""
        try:
            room = self.repository.find_by_id(room_id)
            if not room:
                return ServiceResult.not_found("Room", room_id, code=ErrorCode.ROOM_NOT_FOUND)

            changes = request.model_dump(exclude_none=True)
            room = self.repository.update(room, changes)
            self._log_operation("update room", room_id, {"fields": sorted(changes)})
            return ServiceResult.success(RoomResponse.model_validate(room), message="successful")
        except Exception as e:
            return self._handle_exception(e, "update room", room_id)

    @track_performance("delete_room")
    def delete_room(self, room_id: int) -> ServiceResult[bool]:
        """Delete a room together with its bookings."""
        try:
            if not self.repository.delete(room_id):
                return ServiceResult.not_found("Room", room_id, code=ErrorCode.ROOM_NOT_FOUND)
            self._log_operation("delete room", room_id)
            return ServiceResult.success(True, message="successful")
        except Exception as e:
            return self._handle_exception(e, "delete room", room_id)
