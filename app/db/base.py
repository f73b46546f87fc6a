"""SQLAlchemy Base class for all models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Root SQLAlchemy base class."""
    pass


def import_models() -> None:
    """Import all models to register them with SQLAlchemy."""
    # Imported for their side effect of registering mappers on Base.metadata
    from app.models import booking, room, user  # noqa: F401
