"""Engine and per-request session for the configured database."""
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.config.settings import settings

engine = create_engine(settings.get_database_url(), **settings.get_engine_options())

# expire_on_commit stays on: services re-read rows after writes
SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db() -> Iterator[Session]:
    """FastAPI dependency: one session per request, closed when the response is sent."""
    with SessionLocal() as session:
        yield session
