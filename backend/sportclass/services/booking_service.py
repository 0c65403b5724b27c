# backend/sportclass/services/booking_service.py
"""
Booking Service for SportClass

Decides whether a proposed lesson may be booked and whether an existing
lesson may be cancelled. Every rejection is a typed exception from
``sportclass.core.exceptions``; nothing is retried and store failures
propagate unchanged.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.booking_lock import teacher_booking_lock
from ..core.clock import Clock, local_now
from ..core.constants import DEFAULT_LESSON_DURATION, DEFAULT_QUERY_LIMIT, MAX_QUERY_LIMIT
from ..core.exceptions import (
    AlreadyOccurredException,
    DomainException,
    NotFoundException,
    ScheduleConflictException,
    SpecializationMismatchException,
    TeacherInactiveException,
    ValidationException,
)
from ..domain import validators
from ..domain.entities import Lesson, LessonStatus, create_lesson_from_content
from ..domain.scheduling import is_eligible
from ..monitoring.prometheus_metrics import prometheus_metrics
from ..repositories import LessonRepository, LookupStore, RepositoryFactory
from .base import BaseService
from .conflict_checker import ConflictChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CancellationAck:
    """Acknowledgement returned by a successful cancellation."""

    lesson_id: str
    cancelled_at: datetime


class BookingService(BaseService):
    """
    Service layer for lesson booking and cancellation.

    Checks run cheapest first: teacher, then content and its sport, then
    eligibility, then the conflict scan. An inactive or ineligible teacher
    is rejected before any conflict work is done.
    """

    def __init__(
        self,
        db: Session,
        store: Optional[LookupStore] = None,
        clock: Clock = local_now,
        lesson_repository: Optional[LessonRepository] = None,
    ):
        """
        Initialize booking service.

        Args:
            db: Database session
            store: Optional LookupStore; defaults to the SQL-backed store
            clock: Source of "now" for past-date and cancellation checks
            lesson_repository: Optional LessonRepository for read queries
        """
        super().__init__(db)
        self.store = store or RepositoryFactory.create_lookup_store(db)
        self.clock = clock
        self.lesson_repository = lesson_repository or RepositoryFactory.create_lesson_repository(db)
        self.conflict_checker = ConflictChecker(db, store=self.store)

    def _reject(self, operation: str, exc: DomainException) -> DomainException:
        prometheus_metrics.record_rejection(operation, exc.code)
        self.logger.info(f"{operation} rejected: {exc.code} - {exc.message}")
        return exc

    @BaseService.measure_operation("book_lesson")
    def book_lesson(
        self,
        teacher_id: str,
        content_id: str,
        lesson_date: date,
        start_time: time,
        *,
        title: Optional[str] = None,
        location: Optional[str] = None,
    ) -> Lesson:
        """
        Book a lesson for a teacher from a content.

        Args:
            teacher_id: Teacher giving the lesson
            content_id: Content taught; its sport gates eligibility
            lesson_date: Calendar date of the lesson
            start_time: Local start time
            title: Optional title, defaults to "Aula de <content title>"
            location: Optional location, defaults to "Local padrão"

        Returns:
            The persisted lesson, carrying its assigned id

        Raises:
            NotFoundException: Teacher, content or its sport does not exist
            TeacherInactiveException: The teacher is deactivated
            SpecializationMismatchException: The teacher cannot teach the sport
            ValidationException: A lesson field is out of bounds
            ScheduleConflictException: The window overlaps an existing lesson
        """
        self.log_operation(
            "book_lesson",
            teacher_id=teacher_id,
            content_id=content_id,
            lesson_date=str(lesson_date),
            start_time=str(start_time),
        )

        with teacher_booking_lock(teacher_id):
            # 1. Teacher
            teacher = self.store.get_teacher(teacher_id)
            if teacher is None:
                raise self._reject("book_lesson", NotFoundException("Teacher", teacher_id))
            if not teacher.active:
                raise self._reject("book_lesson", TeacherInactiveException(teacher_id))

            # 2. Content and the sport it belongs to
            content = self.store.get_content(content_id)
            if content is None:
                raise self._reject("book_lesson", NotFoundException("Content", content_id))
            sport = self.store.get_sport(content.sport_id)
            if sport is None:
                raise self._reject("book_lesson", NotFoundException("Sport", content.sport_id))

            # 3. Eligibility
            if not is_eligible(teacher, sport.name):
                raise self._reject(
                    "book_lesson",
                    SpecializationMismatchException(
                        required=sport.name, actual=teacher.specialization
                    ),
                )

            # 4. Candidate window
            today = self.clock().date()
            try:
                lesson_date = validators.validate_lesson_date(lesson_date, today)
                start_time = validators.validate_start_time(start_time)
                duration = validators.validate_lesson_duration(
                    content.duration_minutes or DEFAULT_LESSON_DURATION
                )
                validators.validate_same_day_window(start_time, duration)
            except ValidationException as exc:
                raise self._reject("book_lesson", exc)

            # 5. Conflict scan
            conflicts = self.conflict_checker.find_conflicts(
                teacher_id, lesson_date, start_time, duration
            )
            if conflicts:
                raise self._reject("book_lesson", ScheduleConflictException(conflicts[0].id))

            # 6. Construct through the validators and persist
            try:
                candidate = create_lesson_from_content(
                    datetime.combine(lesson_date, start_time),
                    teacher,
                    content,
                    today=today,
                    location=location,
                    title=title,
                )
            except ValidationException as exc:
                raise self._reject("book_lesson", exc)

            with self.transaction():
                lesson = self.store.save_lesson(candidate)

        self.logger.info(
            f"Booked lesson {lesson.id} for teacher {teacher_id} on {lesson.lesson_date} "
            f"{lesson.start_time:%H:%M}-{lesson.end_time:%H:%M}"
        )
        return lesson

    @BaseService.measure_operation("cancel_lesson")
    def cancel_lesson(self, lesson_id: str) -> CancellationAck:
        """
        Cancel a lesson that has not started yet.

        Raises:
            NotFoundException: No lesson with this id
            AlreadyOccurredException: The lesson's start is not strictly in the future
        """
        self.log_operation("cancel_lesson", lesson_id=lesson_id)

        lesson = self.store.get_lesson(lesson_id)
        if lesson is None:
            raise self._reject("cancel_lesson", NotFoundException("Lesson", lesson_id))

        now = self.clock()
        if not lesson.starts_at > now:
            raise self._reject(
                "cancel_lesson", AlreadyOccurredException(lesson_id, lesson.starts_at)
            )

        with self.transaction():
            self.store.delete_lesson(lesson_id)

        self.logger.info(f"Cancelled lesson {lesson_id} scheduled for {lesson.starts_at}")
        return CancellationAck(lesson_id=lesson_id, cancelled_at=now)

    def find_conflicts(
        self,
        teacher_id: str,
        lesson_date: date,
        start_time: time,
        duration_minutes: int,
    ) -> List[Lesson]:
        """
        Every lesson a hypothetical booking would conflict with.

        Read-only; repeated calls without intervening writes return the same
        lessons in the same order.
        """
        return self.conflict_checker.find_conflicts(
            teacher_id, lesson_date, start_time, duration_minutes
        )

    # Read operations

    @BaseService.measure_operation("get_lesson")
    def get_lesson(self, lesson_id: str) -> Lesson:
        lesson = self.store.get_lesson(lesson_id)
        if lesson is None:
            raise NotFoundException("Lesson", lesson_id)
        return lesson

    @BaseService.measure_operation("list_lessons")
    def list_lessons(self, skip: int = 0, limit: int = DEFAULT_QUERY_LIMIT) -> List[Lesson]:
        return self.lesson_repository.list_lessons(skip=max(skip, 0), limit=min(limit, MAX_QUERY_LIMIT))

    @BaseService.measure_operation("list_lessons_for_teacher")
    def list_lessons_for_teacher(self, teacher_id: str) -> List[Lesson]:
        return self.lesson_repository.find_by_teacher(teacher_id)

    @BaseService.measure_operation("list_lessons_for_content")
    def list_lessons_for_content(self, content_id: str) -> List[Lesson]:
        return self.lesson_repository.find_by_content(content_id)

    @BaseService.measure_operation("list_upcoming_lessons")
    def list_upcoming_lessons(self) -> List[Lesson]:
        """Lessons that start strictly after now."""
        return self.lesson_repository.find_upcoming(self.clock())

    @BaseService.measure_operation("list_lessons_in_period")
    def list_lessons_in_period(self, start: datetime, end: datetime) -> List[Lesson]:
        if end < start:
            raise ValidationException("end", "must not be before start")
        return self.lesson_repository.find_in_period(start, end)

    def lesson_status(self, lesson: Lesson) -> LessonStatus:
        """Booked until the lesson's start passes, occurred afterwards."""
        return lesson.status_at(self.clock())
