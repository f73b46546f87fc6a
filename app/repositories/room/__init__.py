# app/repositories/room/__init__.py
"""
Room repositories package.
"""

from app.repositories.room.room_repository import RoomRepository

__all__ = ["RoomRepository"]
