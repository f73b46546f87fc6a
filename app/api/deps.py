# app/api/deps.py
"""
Dependency providers used by the v1 routers.

Each service is built per request on top of the request's database
session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.dependencies import (
    get_current_user,
    require_admin,
    require_roles,
    require_user_or_admin,
)
from app.db.session import get_db
from app.repositories.booking import BookingRepository
from app.repositories.room import RoomRepository
from app.repositories.user import UserRepository
from app.services.auth import AuthService
from app.services.booking import BookingService
from app.services.room import RoomService
from app.services.user import UserService


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    return BookingService(
        BookingRepository(db),
        db,
        room_repository=RoomRepository(db),
        user_repository=UserRepository(db),
    )


def get_room_service(db: Session = Depends(get_db)) -> RoomService:
    return RoomService(RoomRepository(db), db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db), db)


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db), db)


__all__ = [
    "get_db",
    "get_current_user",
    "require_admin",
    "require_roles",
    "require_user_or_admin",
    "get_booking_service",
    "get_room_service",
    "get_user_service",
    "get_auth_service",
]
