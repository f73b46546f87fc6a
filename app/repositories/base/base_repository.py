"""
Generic persistence operations shared by the room, user and booking repositories.

Every SQLAlchemy failure rolls the session back and is re-raised as
``RepositoryError``; a uniqueness violation on insert becomes
``EntityAlreadyExistsError``.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import EntityAlreadyExistsError, RepositoryError
from app.core.logging import get_logger
from app.models.base import BaseModel

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """CRUD for one mapped model over an injected session."""

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def _write(self, entity: Optional[ModelType], commit: bool) -> None:
        if commit:
            self.db.commit()
            if entity is not None:
                self.db.refresh(entity)
        else:
            self.db.flush()

    # ==================== Create ====================

    def create(self, entity: ModelType, commit: bool = True) -> ModelType:
        """
        Insert a new entity.

        Args:
            entity: Transient model instance
            commit: Commit now; otherwise only flush so the id is assigned

        Returns:
            The same instance, now persistent
        """
        name = self.model.__name__
        try:
            self.db.add(entity)
            self._write(entity, commit)
        except IntegrityError as e:
            self.db.rollback()
            raise EntityAlreadyExistsError(f"{name} violates a uniqueness constraint") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Creating {name} failed: {e}") from e

        logger.info(f"Created {name} {entity.id}")
        return entity

    # ==================== Read ====================

    def find_by_id(self, id: int) -> Optional[ModelType]:
        try:
            return self.db.get(self.model, id)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Loading {self.model.__name__} {id} failed: {e}") from e

    def find_all(self, newest_first: bool = True) -> List[ModelType]:
        """Every row; ids grow with insertion, so id order is creation order."""
        order = self.model.id.desc() if newest_first else self.model.id.asc()
        try:
            return list(self.db.scalars(select(self.model).order_by(order)))
        except SQLAlchemyError as e:
            raise RepositoryError(f"Listing {self.model.__name__} failed: {e}") from e

    # ==================== Update ====================

    def update(self, entity: ModelType, data: Dict[str, Any], commit: bool = True) -> ModelType:
        """Set the given attributes on a loaded entity; unknown keys are skipped."""
        try:
            for key, value in data.items():
                if hasattr(entity, key):
                    setattr(entity, key, value)
            self._write(entity, commit)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Updating {self.model.__name__} {entity.id} failed: {e}") from e

        logger.info(f"Updated {self.model.__name__} {entity.id}")
        return entity

    # ==================== Delete ====================

    def delete(self, id: int, commit: bool = True) -> bool:
        """
        Delete by id. ORM cascades on the model remove dependent rows.

        Returns:
            False when no row has that id
        """
        entity = self.find_by_id(id)
        if entity is None:
            return False
        try:
            self.db.delete(entity)
            self._write(None, commit)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Deleting {self.model.__name__} {id} failed: {e}") from e

        logger.info(f"Deleted {self.model.__name__} {id}")
        return True
