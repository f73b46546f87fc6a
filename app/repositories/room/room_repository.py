# app/repositories/room/room_repository.py
"""
Room repository with availability search and room type listing.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import and_, exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import RepositoryError
from app.models.booking.booking import Booking
from app.models.room.room import Room
from app.repositories.base.base_repository import BaseRepository


class RoomRepository(BaseRepository[Room]):
    """
    Repository for Room entity.

    Availability is always computed against the bookings table; rooms
    carry no availability flag of their own.
    """

    def __init__(self, session: Session):
        super().__init__(Room, session)

    # ============================================================================
    # LOOKUPS
    # ============================================================================

    def find_with_bookings(self, room_id: int) -> Optional[Room]:
        """Load a room together with its bookings."""
        query = (
            select(Room)
            .options(selectinload(Room.bookings))
            .where(Room.id == room_id)
        )
        try:
            return self.db.scalars(query).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Loading room {room_id} failed: {str(e)}") from e

    def find_distinct_room_types(self) -> List[str]:
        query = select(Room.room_type).distinct().order_by(Room.room_type)
        try:
            return list(self.db.scalars(query))
        except SQLAlchemyError as e:
            raise RepositoryError(f"Listing room types failed: {str(e)}") from e

    # ============================================================================
    # AVAILABILITY
    # ============================================================================

    def find_available(
        self,
        check_in: date,
        check_out: date,
        room_type: Optional[str] = None,
    ) -> List[Room]:
        """
        Rooms with no booking overlapping ``[check_in, check_out)``.

        Args:
            check_in: Requested arrival date
            check_out: Requested departure date (exclusive)
            room_type: Optional exact room type filter

        Returns:
            Matching rooms, newest id first
        """
        overlapping = exists().where(
            and_(
                Booking.room_id == Room.id,
                Booking.check_in_date < check_out,
                Booking.check_out_date > check_in,
            )
        )
        query = select(Room).where(~overlapping)

        if room_type:
            query = query.where(Room.room_type == room_type)

        query = query.order_by(Room.id.desc())

        try:
            return list(self.db.scalars(query))
        except SQLAlchemyError as e:
            raise RepositoryError(f"Availability search failed: {str(e)}") from e

    def find_without_bookings(self) -> List[Room]:
        """Rooms that have never been booked (or whose bookings were all cancelled)."""
        query = (
            select(Room)
            .where(~exists().where(Booking.room_id == Room.id))
            .order_by(Room.id.desc())
        )
        try:
            return list(self.db.scalars(query))
        except SQLAlchemyError as e:
            raise RepositoryError(f"Listing unbooked rooms failed: {str(e)}") from e
