"""
Repository layer for SportClass.

Key Components:
- BaseRepository: generic CRUD over ORM rows
- Sport/Teacher/Content/LessonRepository: row <-> entity mapping and queries
- LookupStore / SqlLookupStore: the booking service's store boundary
- RepositoryFactory: construction point for all of the above

Usage:
    from sportclass.repositories import RepositoryFactory

    store = RepositoryFactory.create_lookup_store(db)
    lessons = store.find_lessons_by_teacher_and_date(teacher_id, lesson_date)
"""

from .base_repository import BaseRepository, IRepository
from .content_repository import ContentRepository
from .factory import RepositoryFactory
from .lesson_repository import LessonRepository
from .lookup_store import LookupStore, SqlLookupStore
from .sport_repository import SportRepository
from .teacher_repository import TeacherRepository

__all__ = [
    "BaseRepository",
    "IRepository",
    "RepositoryFactory",
    "SportRepository",
    "TeacherRepository",
    "ContentRepository",
    "LessonRepository",
    "LookupStore",
    "SqlLookupStore",
]
