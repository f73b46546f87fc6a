# --- File: app/schemas/room/room_base.py ---
"""
Room create and update schemas.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field

from app.schemas.common.base import BaseCreateSchema, BaseUpdateSchema

__all__ = [
    "RoomCreate",
    "RoomUpdate",
]


class RoomCreate(BaseCreateSchema):
    """Data required to add a room to the inventory."""

    room_type: str = Field(..., min_length=1, max_length=100, description="Room category")
    room_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Nightly price")
    room_description: Optional[str] = Field(default=None, description="Room description")
    room_photo_url: Optional[str] = Field(default=None, max_length=500, description="Photo URI")


class RoomUpdate(BaseUpdateSchema):
    """Partial room update; omitted fields keep their current value."""

    room_type: Optional[str] = Field(default=None, min_length=1, max_length=100)
    room_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    room_description: Optional[str] = None
    room_photo_url: Optional[str] = Field(default=None, max_length=500)
