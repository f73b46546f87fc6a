"""
Pytest configuration and shared fixtures.

Every test gets a fresh in-memory SQLite database. The API client shares
the test's session through a ``get_db`` override, so data created by a
fixture is visible to the endpoints and vice versa.
"""
import os

# Must be set before the application settings are first imported
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-hotel-manager")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token, hash_password
from app.db.init_db import drop_db, init_db
from app.db.session import get_db
from app.main import create_app
from app.models import Booking, Room, User
from app.repositories.booking import BookingRepository
from app.repositories.room import RoomRepository
from app.repositories.user import UserRepository
from app.services.booking import BookingService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    drop_db(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Session:
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session: Session) -> TestClient:
    app = create_app(init_schema=False)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Data factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_room(db_session: Session) -> Callable[..., Room]:
    def _make_room(room_type: str = "Double", price: str = "120.00", **kwargs) -> Room:
        room = Room(
            room_type=room_type,
            room_price=Decimal(price),
            room_description=kwargs.get("description", f"A {room_type.lower()} room"),
            room_photo_url=kwargs.get("photo_url", "https://cdn.example.com/rooms/room.jpg"),
        )
        return RoomRepository(db_session).create(room)

    return _make_room


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., User]:
    counter = {"n": 0}

    def _make_user(email: str = None, role: str = "USER", password: str = "s3cret-pass") -> User:
        counter["n"] += 1
        user = User(
            email=email or f"guest{counter['n']}@example.com",
            name=f"Guest {counter['n']}",
            phone_number="555-0100",
            password_hash=hash_password(password),
            role=role,
        )
        return UserRepository(db_session).create(user)

    return _make_user


@pytest.fixture
def make_booking(db_session: Session) -> Callable[..., Booking]:
    """Insert a booking directly, bypassing the availability check."""

    def _make_booking(room: Room, user: User, check_in: date, check_out: date, code: str = "SEEDED0001") -> Booking:
        booking = Booking(
            check_in_date=check_in,
            check_out_date=check_out,
            num_of_adults=1,
            num_of_children=0,
            booking_confirmation_code=code,
            room_id=room.id,
            user_id=user.id,
        )
        return BookingRepository(db_session).create(booking)

    return _make_booking


@pytest.fixture
def booking_service(db_session: Session) -> BookingService:
    return BookingService(
        BookingRepository(db_session),
        db_session,
        room_repository=RoomRepository(db_session),
        user_repository=UserRepository(db_session),
    )


# ---------------------------------------------------------------------------
# Authentication helpers
# ---------------------------------------------------------------------------

def auth_header(user: User) -> dict:
    token = create_access_token(subject=user.email, user_id=user.id, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(make_user) -> User:
    return make_user(email="admin@example.com", role="ADMIN")


@pytest.fixture
def guest_user(make_user) -> User:
    return make_user(email="guest@example.com", role="USER")


@pytest.fixture
def admin_headers(admin_user: User) -> dict:
    return auth_header(admin_user)


@pytest.fixture
def guest_headers(guest_user: User) -> dict:
    return auth_header(guest_user)
