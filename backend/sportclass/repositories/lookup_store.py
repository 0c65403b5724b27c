# backend/sportclass/repositories/lookup_store.py
"""
Lookup Store for the booking orchestrator.

``LookupStore`` is the narrow read/write boundary the booking service
depends on. ``SqlLookupStore`` implements it over the SQLAlchemy
repositories; tests may pass any object with the same methods.
"""

from datetime import date
import logging
from typing import List, Optional, Protocol

from sqlalchemy.orm import Session

from ..domain.entities import Content, Lesson, Sport, Teacher
from .factory import RepositoryFactory

logger = logging.getLogger(__name__)


class LookupStore(Protocol):
    """Entity lookups and lesson persistence used by BookingService."""

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        ...

    def get_content(self, content_id: str) -> Optional[Content]:
        ...

    def get_sport(self, sport_id: str) -> Optional[Sport]:
        ...

    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        ...

    def find_lessons_by_teacher_and_date(
        self, teacher_id: str, lesson_date: date
    ) -> List[Lesson]:
        ...

    def save_lesson(self, lesson: Lesson) -> Lesson:
        ...

    def delete_lesson(self, lesson_id: str) -> bool:
        ...

    def lesson_exists(self, lesson_id: str) -> bool:
        ...


class SqlLookupStore:
    """LookupStore backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db
        self.teacher_repository = RepositoryFactory.create_teacher_repository(db)
        self.content_repository = RepositoryFactory.create_content_repository(db)
        self.sport_repository = RepositoryFactory.create_sport_repository(db)
        self.lesson_repository = RepositoryFactory.create_lesson_repository(db)

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        return self.teacher_repository.get_teacher(teacher_id)

    def get_content(self, content_id: str) -> Optional[Content]:
        return self.content_repository.get_content(content_id)

    def get_sport(self, sport_id: str) -> Optional[Sport]:
        return self.sport_repository.get_sport(sport_id)

    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        return self.lesson_repository.get_lesson(lesson_id)

    def find_lessons_by_teacher_and_date(
        self, teacher_id: str, lesson_date: date
    ) -> List[Lesson]:
        return self.lesson_repository.find_by_teacher_and_date(teacher_id, lesson_date)

    def save_lesson(self, lesson: Lesson) -> Lesson:
        """
        Persist ``lesson``.

        A lesson without an id is inserted and comes back with its new ULID;
        a lesson with an id that is already stored is updated in place.
        """
        if lesson.id and self.lesson_repository.lesson_exists(lesson.id):
            saved = self.lesson_repository.save_changes(lesson)
            if saved is not None:
                return saved
        return self.lesson_repository.add(lesson)

    def delete_lesson(self, lesson_id: str) -> bool:
        return self.lesson_repository.delete(lesson_id)

    def lesson_exists(self, lesson_id: str) -> bool:
        return self.lesson_repository.lesson_exists(lesson_id)
