# models/__init__.py
from app.models.base import BaseModel, TimestampModel, UserRole
from app.models.booking import Booking
from app.models.room import Room
from app.models.user import User

__all__ = [
    "BaseModel",
    "TimestampModel",
    "UserRole",
    "Booking",
    "Room",
    "User",
]
