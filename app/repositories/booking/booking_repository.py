# app/repositories/booking/booking_repository.py
"""
Booking repository.

Data access for bookings: per-room reservation sets for the overlap
check, confirmation code lookup and newest-first listing.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import RepositoryError
from app.models.booking.booking import Booking
from app.repositories.base.base_repository import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    """Repository for room bookings."""

    def __init__(self, session: Session):
        super().__init__(Booking, session)

    def list_for_room(self, room_id: int) -> List[Booking]:
        """
        Load every booking currently held against a room.

        Ordered by check-in date so callers can scan the range list in
        calendar order.
        """
        query = (
            select(Booking)
            .where(Booking.room_id == room_id)
            .order_by(Booking.check_in_date, Booking.id)
        )
        try:
            return list(self.db.scalars(query))
        except SQLAlchemyError as e:
            raise RepositoryError(f"Loading bookings for room {room_id} failed: {str(e)}") from e

    def find_by_confirmation_code(self, code: str) -> Optional[Booking]:
        """
        Find the booking carrying ``code``.

        Codes are not unique at the storage level; the oldest match wins.
        """
        query = (
            select(Booking)
            .options(joinedload(Booking.room), joinedload(Booking.user))
            .where(Booking.booking_confirmation_code == code)
            .order_by(Booking.id)
            .limit(1)
        )
        try:
            return self.db.scalars(query).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Confirmation code lookup failed: {str(e)}") from e

    def find_all_with_relations(self) -> List[Booking]:
        """All bookings with room and user loaded, newest id first."""
        query = (
            select(Booking)
            .options(joinedload(Booking.room), joinedload(Booking.user))
            .order_by(Booking.id.desc())
        )
        try:
            return list(self.db.scalars(query))
        except SQLAlchemyError as e:
            raise RepositoryError(f"Listing bookings failed: {str(e)}") from e
