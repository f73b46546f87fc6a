"""
Room schemas package.
"""

from app.schemas.room.room_base import RoomCreate, RoomUpdate
from app.schemas.room.room_response import RoomDetailResponse, RoomResponse

__all__ = [
    "RoomCreate",
    "RoomUpdate",
    "RoomResponse",
    "RoomDetailResponse",
]
