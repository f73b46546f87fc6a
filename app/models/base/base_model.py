"""
Declarative bases shared by the room, user and booking models.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.db.base import Base


class BaseModel(Base):
    """
    Abstract base carrying the integer primary key.

    Identity is a store-assigned autoincrement integer, so ordering by
    ``id`` descending lists the newest records first.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Primary key",
    )

    def __repr__(self) -> str:
        """String representation of model instance."""
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"


class TimestampModel(BaseModel):
    """
    Base model with automatic timestamp tracking.

    Includes created_at and updated_at fields managed by the database.
    """

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Record creation timestamp",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
        comment="Record last update timestamp",
    )
