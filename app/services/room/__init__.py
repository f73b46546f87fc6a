"""
Room service layer.
"""

from app.services.room.room_service import RoomService

__all__ = ["RoomService"]
