# backend/sportclass/repositories/base_repository.py
"""
Base Repository Pattern for SportClass

Provides the foundation for all repository classes with:
- Common CRUD operations on ORM rows
- Type safety with generics
- Transaction support (managed by services)
- Row <-> domain entity mapping hooks

Repositories hand immutable domain entities to the services; ORM rows never
leave the data access layer.
"""

from abc import ABC, abstractmethod
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.constants import DEFAULT_QUERY_LIMIT
from ..core.exceptions import RepositoryException
from ..core.ulid_helper import generate_ulid

# Type variable for generic model support
T = TypeVar("T")

logger = logging.getLogger(__name__)


class IRepository(ABC, Generic[T]):
    """
    Abstract repository interface defining core data access methods.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """
        Retrieve a row by its primary key.

        Returns:
            The row if found, None otherwise
        """

    @abstractmethod
    def get_all(self, skip: int = 0, limit: int = DEFAULT_QUERY_LIMIT) -> List[T]:
        """Retrieve rows with pagination."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """
        Delete a row by its primary key.

        Returns:
            True if deleted, False if not found

        Raises:
            RepositoryException: If deletion fails due to constraints
        """

    @abstractmethod
    def exists(self, **kwargs: Any) -> bool:
        """Check if a row exists with given criteria."""

    @abstractmethod
    def count(self, **kwargs: Any) -> int:
        """Count rows matching given criteria."""


class BaseRepository(IRepository[T]):
    """
    Concrete base repository implementation with common data access patterns.

    Attributes:
        db: SQLAlchemy session
        model: SQLAlchemy model class
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize repository with database session and model.

        Args:
            db: SQLAlchemy session (managed by service layer)
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    def get_by_id(self, id: str) -> Optional[T]:
        try:
            return self.db.get(self.model, id)
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting {self.model.__name__} by id {id}: {str(e)}")
            raise RepositoryException(f"Failed to retrieve {self.model.__name__}: {str(e)}")

    def get_all(self, skip: int = 0, limit: int = DEFAULT_QUERY_LIMIT) -> List[T]:
        """
        Retrieve all rows with pagination, oldest first.
        """
        try:
            return (
                self.db.query(self.model)
                .order_by(self.model.id)
                .offset(skip)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error getting all {self.model.__name__}: {str(e)}")
            raise RepositoryException(f"Failed to retrieve {self.model.__name__} list: {str(e)}")

    def insert(self, **kwargs: Any) -> T:
        """
        Insert a new row, assigning a ULID when no id is given.

        Note: Does NOT commit - transaction management is handled by service layer.
        """
        if not kwargs.get("id"):
            kwargs["id"] = generate_ulid()
        try:
            row = self.model(**kwargs)
            self.db.add(row)
            self.db.flush()
            return row
        except IntegrityError as exc:
            self.logger.error(
                "Integrity error creating %s: %s", self.model.__name__, exc, exc_info=True
            )
            self.db.rollback()
            raise RepositoryException(f"Integrity constraint violated: {exc}") from exc
        except SQLAlchemyError as e:
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to create {self.model.__name__}: {str(e)}")

    def update_fields(self, id: str, **kwargs: Any) -> Optional[T]:
        """
        Update an existing row.

        Only updates provided fields, preserves others.
        """
        try:
            row = self.get_by_id(id)
            if row is None:
                return None

            for key, value in kwargs.items():
                if hasattr(row, key):
                    setattr(row, key, value)

            self.db.flush()
            return row
        except IntegrityError as exc:
            self.logger.error(f"Integrity error updating {self.model.__name__} {id}: {exc}")
            self.db.rollback()
            raise RepositoryException(f"Integrity constraint violated: {exc}") from exc
        except SQLAlchemyError as e:
            self.logger.error(f"Error updating {self.model.__name__} {id}: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to update {self.model.__name__}: {str(e)}")

    def delete(self, id: str) -> bool:
        """
        Delete a row by its primary key.

        Returns False if row not found, raises exception for constraint violations.
        """
        try:
            row = self.get_by_id(id)
            if row is None:
                return False

            self.db.delete(row)
            self.db.flush()
            return True
        except IntegrityError as e:
            self.logger.error(
                f"Cannot delete {self.model.__name__} {id} due to constraints: {str(e)}"
            )
            self.db.rollback()
            raise RepositoryException(f"Cannot delete due to existing references: {str(e)}")
        except SQLAlchemyError as e:
            self.logger.error(f"Error deleting {self.model.__name__} {id}: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to delete {self.model.__name__}: {str(e)}")

    def exists(self, **kwargs: Any) -> bool:
        """Check if a row exists with given criteria."""
        try:
            return self.db.query(self.model).filter_by(**kwargs).first() is not None
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking existence: {str(e)}")
            raise RepositoryException(f"Failed to check existence: {str(e)}")

    def count(self, **kwargs: Any) -> int:
        """Count rows matching given criteria."""
        try:
            return self.db.query(self.model).filter_by(**kwargs).count()
        except SQLAlchemyError as e:
            self.logger.error(f"Error counting records: {str(e)}")
            raise RepositoryException(f"Failed to count records: {str(e)}")

    def find_by(self, **kwargs: Any) -> List[T]:
        """
        Find rows by given criteria (exact match).
        """
        try:
            return self.db.query(self.model).filter_by(**kwargs).order_by(self.model.id).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error finding by criteria: {str(e)}")
            raise RepositoryException(f"Failed to find records: {str(e)}")
