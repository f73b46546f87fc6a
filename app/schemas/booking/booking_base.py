# --- File: app/schemas/booking/booking_base.py ---
"""
Booking request schemas.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field, field_validator

from app.schemas.common.base import BaseCreateSchema
from app.utils.date_utils import today_utc

__all__ = [
    "BookingCreate",
    "BookingRequest",
]


class BookingCreate(BaseCreateSchema):
    """
    Stay dates and guest counts for a new booking.

    The ordering of the two dates is checked by the booking service so
    that it can answer with its own error code.
    """

    check_in_date: date = Field(..., description="Arrival date")
    check_out_date: date = Field(..., description="Departure date (exclusive)")
    num_of_adults: int = Field(..., ge=1, description="Adult guests")
    num_of_children: int = Field(default=0, ge=0, description="Child guests")


class BookingRequest(BookingCreate):
    """Booking body accepted over HTTP; the stay must end in the future."""

    @field_validator("check_out_date")
    @classmethod
    def check_out_in_future(cls, v: date) -> date:
        if v <= today_utc():
            raise ValueError("Check-out date must be in the future")
        return v
