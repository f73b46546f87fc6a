"""
Booking model.

A reservation of one room by one user over a half-open date range
``[check_in_date, check_out_date)``.
"""

from datetime import date as Date
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    Date as SQLDate,
    ForeignKey,
    Index,
    Integer,
    String,
    event,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import TimestampModel

if TYPE_CHECKING:
    from app.models.room.room import Room
    from app.models.user.user import User

__all__ = ["Booking"]


class Booking(TimestampModel):
    """
    Core booking entity for room reservations.

    Attributes:
        check_in_date: First night of the stay
        check_out_date: Departure day, exclusive
        num_of_adults: Adult guests (at least one)
        num_of_children: Child guests
        total_num_of_guests: Derived, adults plus children
        booking_confirmation_code: Random code handed to the guest
        room_id: Booked room
        user_id: Booking owner
    """

    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint("check_out_date > check_in_date", name="ck_bookings_date_range"),
        CheckConstraint("num_of_adults >= 1", name="ck_bookings_adults"),
        CheckConstraint("num_of_children >= 0", name="ck_bookings_children"),
        Index("ix_bookings_room_dates", "room_id", "check_in_date", "check_out_date"),
    )

    check_in_date: Mapped[Date] = mapped_column(
        SQLDate,
        nullable=False,
        comment="Check-in date",
    )
    check_out_date: Mapped[Date] = mapped_column(
        SQLDate,
        nullable=False,
        comment="Check-out date (exclusive)",
    )

    num_of_adults: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    num_of_children: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_num_of_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Indexed for lookup; uniqueness is not enforced
    booking_confirmation_code: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="Confirmation code returned to the guest",
    )

    room_id: Mapped[int] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    room: Mapped["Room"] = relationship("Room", back_populates="bookings")
    user: Mapped["User"] = relationship("User", back_populates="bookings")

    def calculate_total_num_of_guests(self) -> int:
        """Recompute the derived guest total from the adult and child counts."""
        self.total_num_of_guests = (self.num_of_adults or 0) + (self.num_of_children or 0)
        return self.total_num_of_guests

    def __repr__(self) -> str:
        return (
            f"<Booking {self.id} room={self.room_id} "
            f"{self.check_in_date}..{self.check_out_date} code={self.booking_confirmation_code}>"
        )


@event.listens_for(Booking, "before_insert")
@event.listens_for(Booking, "before_update")
def _recalculate_guests(mapper, connection, target: Booking) -> None:
    """Keep total_num_of_guests consistent on every write."""
    target.calculate_total_num_of_guests()
