"""Database initialization utilities."""
from typing import Optional

from sqlalchemy.engine import Engine

from app.core.logging import get_logger
from app.db.base import Base, import_models

logger = get_logger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize the database by creating all missing tables.

    Suitable for development and testing; production schemas should be
    managed by migrations.
    """
    if bind is None:
        from app.db.session import engine
        bind = engine

    import_models()
    Base.metadata.create_all(bind=bind)
    logger.info(f"Database initialized with {len(Base.metadata.tables)} tables")


def drop_db(bind: Optional[Engine] = None) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data!
    """
    if bind is None:
        from app.db.session import engine
        bind = engine

    import_models()
    Base.metadata.drop_all(bind=bind)
    logger.warning("All database tables dropped")
