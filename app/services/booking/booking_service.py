"""
Booking ledger: create, look up, list and cancel room bookings.

A room accepts a new booking only when the requested stay does not
overlap any booking it already holds. Stays are half-open date ranges,
so a guest may check in on the day the previous guest checks out.

The room's bookings are loaded and checked before the insert in the
same session, but the check and the insert are not serialized against
other sessions booking the same room.
"""

from typing import Optional, List

from sqlalchemy.orm import Session

from app.services.base import (
    BaseService,
    ServiceResult,
    ErrorCode,
    ErrorSeverity,
    track_performance,
)
from app.repositories.booking import BookingRepository
from app.repositories.room import RoomRepository
from app.repositories.user import UserRepository
from app.models.booking.booking import Booking as BookingModel
from app.schemas.booking.booking_base import BookingCreate
from app.schemas.booking.booking_response import BookingResponse
from app.utils.date_utils import is_valid_stay, room_is_available
from app.utils.string_utils import generate_confirmation_code


class BookingService(BaseService[BookingModel, BookingRepository]):
    """
    Core booking operations.

    Responsibilities:
    - Enforcing the no-overlap rule per room
    - Issuing confirmation codes
    - Booking lookup, listing and cancellation
    """

    def __init__(
        self,
        repository: BookingRepository,
        db_session: Session,
        room_repository: Optional[RoomRepository] = None,
        user_repository: Optional[UserRepository] = None,
    ):
        super().__init__(repository, db_session)
        self.room_repository = room_repository or RoomRepository(db_session)
        self.user_repository = user_repository or UserRepository(db_session)

    # -------------------------------------------------------------------------
    # Create Operations
    # -------------------------------------------------------------------------

    @track_performance("create_booking")
    def create_booking(
        self,
        room_id: int,
        user_id: int,
        request: BookingCreate,
    ) -> ServiceResult[str]:
        """
        Book a room for a user.

        Args:
            room_id: Room to book
            user_id: Booking owner
            request: Stay dates and guest counts

        Returns:
            ServiceResult containing the confirmation code or error
        """
        try:
            if not is_valid_stay(request.check_in_date, request.check_out_date):
                return ServiceResult.fail(
                    ErrorCode.INVALID_DATE_RANGE,
                    "Check-out date must come after check-in date",
                    field="check_out_date",
                    details={
                        "check_in_date": request.check_in_date.isoformat(),
                        "check_out_date": request.check_out_date.isoformat(),
                    },
                    severity=ErrorSeverity.WARNING,
                )

            room = self.room_repository.find_by_id(room_id)
            if not room:
                return ServiceResult.not_found("Room", room_id, code=ErrorCode.ROOM_NOT_FOUND)

            user = self.user_repository.find_by_id(user_id)
            if not user:
                return ServiceResult.not_found("User", user_id, code=ErrorCode.USER_NOT_FOUND)

            existing_bookings = self.repository.list_for_room(room_id)
            if not room_is_available(request.check_in_date, request.check_out_date, existing_bookings):
                self._logger.info(
                    f"Room {room_id} unavailable for {request.check_in_date} - {request.check_out_date}",
                    extra={"room_id": room_id, "user_id": user_id},
                )
                return ServiceResult.fail(
                    ErrorCode.ROOM_UNAVAILABLE,
                    "Room not available for selected date range",
                    details={
                        "room_id": room_id,
                        "check_in_date": request.check_in_date.isoformat(),
                        "check_out_date": request.check_out_date.isoformat(),
                    },
                    severity=ErrorSeverity.WARNING,
                )

            booking = BookingModel(
                check_in_date=request.check_in_date,
                check_out_date=request.check_out_date,
                num_of_adults=request.num_of_adults,
                num_of_children=request.num_of_children,
                booking_confirmation_code=generate_confirmation_code(),
                room=room,
                user=user,
            )
            booking.calculate_total_num_of_guests()
            booking = self.repository.create(booking)

            self._logger.info(
                f"Successfully created booking {booking.id}",
                extra={"booking_id": booking.id, "room_id": room_id, "user_id": user_id},
            )

            return ServiceResult.success(
                booking.booking_confirmation_code,
                message="successful",
                metadata={"booking_id": booking.id},
            )

        except Exception as e:
            return self._handle_exception(e, "create booking", f"room={room_id} user={user_id}")

    # -------------------------------------------------------------------------
    # Query Operations
    # -------------------------------------------------------------------------

    @track_performance("find_booking_by_confirmation_code")
    def find_by_confirmation_code(self, confirmation_code: str) -> ServiceResult[BookingResponse]:
        """Look up a booking, with its room and owner, by confirmation code."""
        try:
            booking = self.repository.find_by_confirmation_code(confirmation_code)
            if not booking:
                return ServiceResult.fail(
                    ErrorCode.BOOKING_NOT_FOUND,
                    "Booking Not Found",
                    details={"confirmation_code": confirmation_code},
                    severity=ErrorSeverity.WARNING,
                )
            return ServiceResult.success(BookingResponse.model_validate(booking), message="successful")
        except Exception as e:
            return self._handle_exception(e, "find booking by confirmation code", confirmation_code)

    @track_performance("list_bookings")
    def list_all(self) -> ServiceResult[List[BookingResponse]]:
        """All bookings, newest first."""
        try:
            bookings = self.repository.find_all_with_relations()
            return ServiceResult.success(
                [BookingResponse.model_validate(b) for b in bookings],
                message="successful",
                metadata={"count": len(bookings)},
            )
        except Exception as e:
            return self._handle_exception(e, "list bookings")

    # -------------------------------------------------------------------------
    # Cancellation
    # -------------------------------------------------------------------------

    @track_performance("cancel_booking")
    def cancel(self, booking_id: int) -> ServiceResult[bool]:
        """
        Permanently remove a booking, freeing its dates.

        Cancelling an id that no longer exists fails, so a repeated
        cancel reports BOOKING_NOT_FOUND.
        """
        try:
            booking = self.repository.find_by_id(booking_id)
            if not booking:
                return ServiceResult.not_found("Booking", booking_id, code=ErrorCode.BOOKING_NOT_FOUND)

            self.repository.delete(booking_id)
            self._log_operation("cancel booking", booking_id)
            return ServiceResult.success(True, message="successful")
        except Exception as e:
            return self._handle_exception(e, "cancel booking", booking_id)
