# --- File: app/schemas/booking/booking_response.py ---
"""
Booking response schemas.

``BookingResponse`` is the full booking view: stay dates, guest counts,
confirmation code and summaries of the booked room and its owner.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer

from app.schemas.common.base import BaseResponseSchema

__all__ = [
    "RoomSummary",
    "UserSummary",
    "BookingSummary",
    "BookingWithRoom",
    "BookingResponse",
]


class RoomSummary(BaseResponseSchema):
    room_type: str
    room_price: Decimal
    room_photo_url: Optional[str] = None
    room_description: Optional[str] = None

    @field_serializer("room_price")
    def serialize_price(self, value: Decimal) -> float:
        return float(value)


class UserSummary(BaseResponseSchema):
    name: str
    email: str
    phone_number: Optional[str] = None


class BookingSummary(BaseResponseSchema):
    """Booking fields without related objects."""

    check_in_date: date
    check_out_date: date
    num_of_adults: int
    num_of_children: int
    total_num_of_guests: int
    booking_confirmation_code: str = Field(..., description="Confirmation code")


class BookingWithRoom(BookingSummary):
    room: Optional[RoomSummary] = None


class BookingResponse(BookingWithRoom):
    user: Optional[UserSummary] = None
