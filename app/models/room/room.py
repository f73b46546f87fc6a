# app/models/room/room.py
"""
Room model.

A bookable room with its type, nightly price, description and photo
reference. Owns the bookings made against it.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import TimestampModel

if TYPE_CHECKING:
    from app.models.booking.booking import Booking

__all__ = ["Room"]


class Room(TimestampModel):
    """
    Core room entity.

    Attributes:
        room_type: Free-form room category (e.g. "Single", "Suite")
        room_price: Price per night, never negative
        room_description: Marketing description
        room_photo_url: URI of the room photo
        bookings: Reservations made against this room
    """

    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("room_price >= 0", name="ck_rooms_price_non_negative"),
    )

    room_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Room category",
    )
    room_price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        comment="Nightly price",
    )
    room_description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    room_photo_url: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="Photo reference (URI)",
    )

    bookings: Mapped[List["Booking"]] = relationship(
        "Booking",
        back_populates="room",
        cascade="all, delete-orphan",
        lazy="select",
    )

    def __repr__(self) -> str:
        return f"<Room {self.id} ({self.room_type})>"
