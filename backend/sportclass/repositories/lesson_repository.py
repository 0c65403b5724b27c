# backend/sportclass/repositories/lesson_repository.py
"""
Lesson Repository for SportClass

Data access for lessons. The conflict scan goes through
``find_by_teacher_and_date``, an indexed lookup on (teacher_id, lesson_date),
never a scan of every lesson.
"""

from datetime import date, datetime
import logging
from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..domain.entities import Lesson, restore_lesson
from ..models.lesson import LessonRow
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class LessonRepository(BaseRepository[LessonRow]):
    """Repository for lesson persistence and schedule queries."""

    def __init__(self, db: Session):
        super().__init__(db, LessonRow)

    @staticmethod
    def to_entity(row: LessonRow) -> Lesson:
        return restore_lesson(
            id=row.id,
            title=row.title,
            lesson_date=row.lesson_date,
            start_time=row.start_time,
            duration_minutes=row.duration_minutes,
            location=row.location,
            sport_id=row.sport_id,
            teacher_id=row.teacher_id,
            content_id=row.content_id,
        )

    def _query(self, *criteria) -> List[Lesson]:
        try:
            rows = (
                self.db.query(LessonRow)
                .filter(*criteria)
                .order_by(LessonRow.lesson_date, LessonRow.start_time, LessonRow.id)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error querying lessons: {str(e)}")
            raise RepositoryException(f"Failed to query lessons: {str(e)}")
        return [self.to_entity(row) for row in rows]

    def get_lesson(self, lesson_id: str) -> Optional[Lesson]:
        row = self.get_by_id(lesson_id)
        return self.to_entity(row) if row is not None else None

    def list_lessons(self, skip: int = 0, limit: int = 100) -> List[Lesson]:
        try:
            rows = (
                self.db.query(LessonRow)
                .order_by(LessonRow.lesson_date, LessonRow.start_time, LessonRow.id)
                .offset(skip)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing lessons: {str(e)}")
            raise RepositoryException(f"Failed to list lessons: {str(e)}")
        return [self.to_entity(row) for row in rows]

    def find_by_teacher_and_date(
        self,
        teacher_id: str,
        lesson_date: date,
        exclude_lesson_id: Optional[str] = None,
    ) -> List[Lesson]:
        """
        Get a teacher's lessons on one calendar date, ordered by start time.

        Args:
            teacher_id: The teacher to check
            lesson_date: The date to check
            exclude_lesson_id: Optional lesson ID to leave out

        Returns:
            Lessons that could conflict with a window on that date
        """
        criteria = [LessonRow.teacher_id == teacher_id, LessonRow.lesson_date == lesson_date]
        if exclude_lesson_id:
            criteria.append(LessonRow.id != exclude_lesson_id)
        return self._query(*criteria)

    def find_by_teacher(self, teacher_id: str) -> List[Lesson]:
        return self._query(LessonRow.teacher_id == teacher_id)

    def find_by_content(self, content_id: str) -> List[Lesson]:
        return self._query(LessonRow.content_id == content_id)

    def find_upcoming(self, now: datetime) -> List[Lesson]:
        """Lessons whose start is strictly after ``now``."""
        return self._query(
            or_(
                LessonRow.lesson_date > now.date(),
                and_(LessonRow.lesson_date == now.date(), LessonRow.start_time > now.time()),
            )
        )

    def find_in_period(self, start: datetime, end: datetime) -> List[Lesson]:
        """Lessons starting within [start, end]."""
        candidates = self._query(
            LessonRow.lesson_date >= start.date(),
            LessonRow.lesson_date <= end.date(),
        )
        return [lesson for lesson in candidates if start <= lesson.starts_at <= end]

    def add(self, lesson: Lesson) -> Lesson:
        row = self.insert(
            id=lesson.id,
            title=lesson.title,
            lesson_date=lesson.lesson_date,
            start_time=lesson.start_time,
            duration_minutes=lesson.duration_minutes,
            location=lesson.location,
            sport_id=lesson.sport_id,
            teacher_id=lesson.teacher_id,
            content_id=lesson.content_id,
        )
        return self.to_entity(row)

    def save_changes(self, lesson: Lesson) -> Optional[Lesson]:
        row = self.update_fields(
            lesson.id,
            title=lesson.title,
            lesson_date=lesson.lesson_date,
            start_time=lesson.start_time,
            duration_minutes=lesson.duration_minutes,
            location=lesson.location,
        )
        return self.to_entity(row) if row is not None else None

    def lesson_exists(self, lesson_id: str) -> bool:
        return self.exists(id=lesson_id)
