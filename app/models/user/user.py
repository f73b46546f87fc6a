"""
User model configuration.
"""
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from app.models.base.base_model import TimestampModel
from app.models.base.enums import UserRole

if TYPE_CHECKING:
    from app.models.booking.booking import Booking


class User(TimestampModel):
    """
    Core User entity.

    Holds authentication credentials and the role used for access
    control. Bookings made by the user are removed with the account.
    """
    __tablename__ = "users"
    __table_args__ = (
        {"comment": "User accounts and credentials"}
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Unique email address (normalized to lowercase)"
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name of the user"
    )
    phone_number: Mapped[Optional[str]] = mapped_column(
        String(30),
        nullable=True,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=UserRole.USER.value,
        index=True,
        comment="Primary user role for access control"
    )

    bookings: Mapped[List["Booking"]] = relationship(
        "Booking",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    @validates("email")
    def normalize_email(self, key: str, value: str) -> str:
        return value.strip().lower() if value else value

    @validates("role")
    def default_role(self, key: str, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            return UserRole.USER.value
        return str(value).strip().upper()

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"
