"""
Booking schemas package.
"""

from app.schemas.booking.booking_base import BookingCreate, BookingRequest
from app.schemas.booking.booking_response import (
    BookingResponse,
    BookingSummary,
    BookingWithRoom,
    RoomSummary,
    UserSummary,
)

__all__ = [
    "BookingCreate",
    "BookingRequest",
    "BookingResponse",
    "BookingSummary",
    "BookingWithRoom",
    "RoomSummary",
    "UserSummary",
]
