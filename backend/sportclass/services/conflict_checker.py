# backend/sportclass/services/conflict_checker.py
"""
Conflict Checker Service for SportClass

Scans a teacher's lessons on one date for windows that overlap a proposed
lesson. Only lessons of the same teacher on the same date are considered;
the overlap rule itself lives in ``sportclass.domain.scheduling``.
"""

from datetime import date, time
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..domain.entities import Lesson
from ..domain.scheduling import overlaps
from ..repositories import LookupStore, RepositoryFactory
from .base import BaseService

logger = logging.getLogger(__name__)


class ConflictChecker(BaseService):
    """Service for detecting lesson overlaps for a teacher."""

    def __init__(self, db: Session, store: Optional[LookupStore] = None):
        """
        Initialize conflict checker service.

        Args:
            db: Database session
            store: Optional LookupStore instance
        """
        super().__init__(db)
        self.store = store or RepositoryFactory.create_lookup_store(db)

    @BaseService.measure_operation("find_conflicts")
    def find_conflicts(
        self,
        teacher_id: str,
        lesson_date: date,
        start_time: time,
        duration_minutes: int,
        exclude_lesson_id: Optional[str] = None,
    ) -> List[Lesson]:
        """
        Lessons of ``teacher_id`` on ``lesson_date`` overlapping the window.

        Args:
            teacher_id: The teacher to check
            lesson_date: The date to check
            start_time: Start of the proposed window
            duration_minutes: Length of the proposed window
            exclude_lesson_id: Optional lesson ID to leave out of the check

        Returns:
            Conflicting lessons ordered by start time, then id
        """
        existing = self.store.find_lessons_by_teacher_and_date(teacher_id, lesson_date)

        conflicts = [
            lesson
            for lesson in existing
            if lesson.id != exclude_lesson_id
            and overlaps(
                lesson_date,
                start_time,
                duration_minutes,
                lesson.lesson_date,
                lesson.start_time,
                lesson.duration_minutes,
            )
        ]
        conflicts.sort(key=lambda lesson: (lesson.start_time, lesson.id or ""))

        if conflicts:
            self.logger.info(
                f"Found {len(conflicts)} lesson conflicts for teacher {teacher_id} "
                f"on {lesson_date} at {start_time:%H:%M} ({duration_minutes} min)"
            )

        return conflicts

    def has_conflict(
        self,
        teacher_id: str,
        lesson_date: date,
        start_time: time,
        duration_minutes: int,
        exclude_lesson_id: Optional[str] = None,
    ) -> bool:
        """Simplified boolean check for quick validation."""
        return bool(
            self.find_conflicts(
                teacher_id, lesson_date, start_time, duration_minutes, exclude_lesson_id
            )
        )
