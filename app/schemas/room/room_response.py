# --- File: app/schemas/room/room_response.py ---
"""
Room response schemas.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from app.schemas.booking.booking_response import BookingSummary, RoomSummary

__all__ = [
    "RoomResponse",
    "RoomDetailResponse",
]


class RoomResponse(RoomSummary):
    """Room as listed in the inventory."""
    pass


class RoomDetailResponse(RoomResponse):
    """Room together with the bookings held against it."""

    bookings: List[BookingSummary] = Field(default_factory=list)
