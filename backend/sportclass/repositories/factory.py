# backend/sportclass/repositories/factory.py
"""
Repository Factory for SportClass

Provides centralized creation of repository instances,
ensuring consistent initialization and dependency injection.
"""

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from .base_repository import BaseRepository

# Avoid circular imports
if TYPE_CHECKING:
    from .content_repository import ContentRepository
    from .lesson_repository import LessonRepository
    from .lookup_store import SqlLookupStore
    from .sport_repository import SportRepository
    from .teacher_repository import TeacherRepository


class RepositoryFactory:
    """
    Factory class for creating repository instances.

    Centralizes repository creation so services never build repositories
    by hand.
    """

    @staticmethod
    def create_base_repository(db: Session, model) -> BaseRepository:
        """Create a generic base repository for any model."""
        return BaseRepository(db, model)

    @staticmethod
    def create_sport_repository(db: Session) -> "SportRepository":
        from .sport_repository import SportRepository

        return SportRepository(db)

    @staticmethod
    def create_teacher_repository(db: Session) -> "TeacherRepository":
        from .teacher_repository import TeacherRepository

        return TeacherRepository(db)

    @staticmethod
    def create_content_repository(db: Session) -> "ContentRepository":
        from .content_repository import ContentRepository

        return ContentRepository(db)

    @staticmethod
    def create_lesson_repository(db: Session) -> "LessonRepository":
        """Create repository for lesson persistence and conflict queries."""
        from .lesson_repository import LessonRepository

        return LessonRepository(db)

    @staticmethod
    def create_lookup_store(db: Session) -> "SqlLookupStore":
        """Create the SQL-backed lookup store used by the booking service."""
        from .lookup_store import SqlLookupStore

        return SqlLookupStore(db)
