"""
User Repository - account lookup and identity management.
"""
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import RepositoryError
from app.models.booking.booking import Booking
from app.models.user import User
from app.repositories.base.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for User entity.
    """

    def __init__(self, db: Session):
        super().__init__(User, db)

    # ==================== Lookup Operations ====================

    def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address (normalized to lowercase).

        Args:
            email: Email address to search

        Returns:
            User entity or None
        """
        if not email:
            return None
        query = select(User).where(func.lower(User.email) == email.strip().lower())
        try:
            return self.db.scalars(query).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Email lookup failed: {str(e)}") from e

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def find_with_bookings(self, user_id: int) -> Optional[User]:
        """Load a user with bookings and each booking's room."""
        query = (
            select(User)
            .options(selectinload(User.bookings).selectinload(Booking.room))
            .where(User.id == user_id)
        )
        try:
            return self.db.scalars(query).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Loading bookings of user {user_id} failed: {str(e)}") from e

    def list_all(self) -> List[User]:
        return self.find_all(newest_first=True)

    def delete_by_id(self, user_id: int) -> bool:
        return self.delete(user_id)
