"""
Base repository with generic CRUD operations.

Repositories share the request's session and never commit: writes are
flushed so that ids and defaults are populated, and the UnitOfWork that
owns the session commits or rolls back.
"""

from typing import Generic, TypeVar, Type, List, Optional, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from taskboard.models.base import Base
from taskboard.core.exceptions import NotFoundException, DatabaseException


# Generic type bound to SQLAlchemy Base
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic CRUD over one model.

    Integrity violations are re-raised unchanged so callers can turn them
    into conflicts; any other SQLAlchemy error becomes DatabaseException.

    Example:
        class UserRepository(BaseRepository[User]):
            def __init__(self, db: Session):
                super().__init__(User, db)
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def _flush(self, action: str) -> None:
        try:
            self.db.flush()
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to {action} {self.model.__name__}") from e

    def get(self, id: str) -> Optional[ModelType]:
        try:
            return self.db.get(self.model, id)
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to get {self.model.__name__} with id {id}") from e

    def get_or_fail(self, id: str) -> ModelType:
        """
        Get a record by id.

        Raises:
            NotFoundException: If no record has this id
        """
        obj = self.get(id)
        if obj is None:
            raise NotFoundException(self.model.__name__, id)
        return obj

    def get_all(self) -> List[ModelType]:
        """All records in store order."""
        try:
            return self.db.query(self.model).all()
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to get all {self.model.__name__}") from e

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count records matching the equality ``filters``."""
        try:
            query = self.db.query(self.model)
            for key, value in (filters or {}).items():
                query = query.filter(getattr(self.model, key) == value)
            return query.count()
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to count {self.model.__name__}") from e

    def create_from_dict(self, data: Dict[str, Any]) -> ModelType:
        obj = self.model(**data)
        self.db.add(obj)
        self._flush("create")
        return obj

    def update_by_id(self, id: str, data: Dict[str, Any]) -> Optional[ModelType]:
        """
        Write the keys present in ``data``; a None value is written as NULL.

        Returns:
            The updated record, or None if no record has this id
        """
        obj = self.get(id)
        if obj is None:
            return None

        for key, value in data.items():
            setattr(obj, key, value)
        self._flush("update")
        return obj

    def delete_by_id(self, id: str) -> bool:
        """Delete a record; False if it did not exist."""
        obj = self.get(id)
        if obj is None:
            return False

        self.db.delete(obj)
        self._flush("delete")
        return True

    def exists(self, id: str) -> bool:
        try:
            return self.db.query(self.model.id).filter(self.model.id == id).first() is not None
        except SQLAlchemyError as e:
            raise DatabaseException(f"Failed to check existence of {self.model.__name__}") from e
