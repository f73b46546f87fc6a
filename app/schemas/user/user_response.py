# --- File: app/schemas/user/user_response.py ---
"""
User response schemas.

The password hash is never part of any response.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from app.schemas.booking.booking_response import BookingWithRoom
from app.schemas.common.base import BaseResponseSchema

__all__ = [
    "UserResponse",
    "UserDetailResponse",
]


class UserResponse(BaseResponseSchema):
    email: str
    name: str
    phone_number: Optional[str] = None
    role: str


class UserDetailResponse(UserResponse):
    """User with booking history; each booking carries its room."""

    bookings: List[BookingWithRoom] = Field(default_factory=list)
