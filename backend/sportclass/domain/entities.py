# backend/sportclass/domain/entities.py
"""
Immutable domain entities for the scheduling core.

Sport, Teacher, Content and Lesson are frozen dataclasses. They are built
only through the factory functions below, which run every field validator,
so an entity in hand always satisfies its invariants. Changes produce new
values (``deactivate(teacher)``, ``update_sport(...)``) instead of mutating
in place.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Optional

from ..core import constants
from ..core.exceptions import ValidationException
from . import validators


class LessonPeriod(str, Enum):
    """Part of the day a lesson starts in."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class LessonStatus(str, Enum):
    """
    Lifecycle status of a persisted lesson.

    Never stored: a booked lesson becomes ``OCCURRED`` once its start is no
    longer in the future.
    """

    BOOKED = "booked"
    OCCURRED = "occurred"


@dataclass(frozen=True)
class Sport:
    name: str
    category: str
    id: Optional[str] = None

    @property
    def is_team_sport(self) -> bool:
        return self.category.casefold() == constants.CATEGORY_TEAM.casefold()

    @property
    def is_individual(self) -> bool:
        return self.category.casefold() == constants.CATEGORY_INDIVIDUAL.casefold()

    @property
    def is_aquatic(self) -> bool:
        if self.category.casefold() == constants.CATEGORY_AQUATIC.casefold():
            return True
        lowered = self.name.casefold()
        return any(marker in lowered for marker in constants.AQUATIC_NAME_MARKERS)

    @property
    def full_description(self) -> str:
        return f"{self.name} ({self.category})"

    def supports_level(self, level: str) -> bool:
        """Every sport is offered at every content level."""
        return level in constants.CONTENT_LEVELS


@dataclass(frozen=True)
class Teacher:
    name: str
    email: str
    specialization: str
    active: bool = True
    id: Optional[str] = None

    def has_specialization_in(self, term: str) -> bool:
        """Case-insensitive substring match, used for classification queries only."""
        return term.casefold() in self.specialization.casefold()

    @property
    def is_team_sport_specialist(self) -> bool:
        return self.has_specialization_in("coletivo")

    @property
    def is_individual_sport_specialist(self) -> bool:
        return self.has_specialization_in("individual")

    @property
    def short_name(self) -> str:
        parts = self.name.split()
        if len(parts) == 1:
            return parts[0]
        return f"{parts[0]} {parts[-1]}"


@dataclass(frozen=True)
class Content:
    title: str
    level: str
    duration_minutes: int
    sport_id: str
    description: Optional[str] = None
    url: Optional[str] = None
    id: Optional[str] = None

    @property
    def is_fundamental(self) -> bool:
        return self.level == constants.LEVEL_FUNDAMENTAL_II

    @property
    def is_high_school(self) -> bool:
        return self.level == constants.LEVEL_MEDIO

    @property
    def is_video(self) -> bool:
        lowered = (self.url or "").lower()
        return any(marker in lowered for marker in constants.VIDEO_URL_MARKERS)

    @property
    def is_pdf(self) -> bool:
        lowered = (self.url or "").lower()
        return any(marker in lowered for marker in constants.PDF_URL_MARKERS)


@dataclass(frozen=True)
class Lesson:
    title: str
    lesson_date: date
    start_time: time
    duration_minutes: int
    location: str
    sport_id: str
    teacher_id: str
    content_id: Optional[str] = None
    id: Optional[str] = None

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.lesson_date, self.start_time)

    @property
    def ends_at(self) -> datetime:
        return self.starts_at + timedelta(minutes=self.duration_minutes)

    @property
    def end_time(self) -> time:
        # Factories guarantee the window ends on the same day.
        return self.ends_at.time()

    @property
    def is_long(self) -> bool:
        return self.duration_minutes > constants.LONG_LESSON_THRESHOLD

    @property
    def period(self) -> LessonPeriod:
        if self.start_time < constants.AFTERNOON_STARTS_AT:
            return LessonPeriod.MORNING
        if self.start_time < constants.EVENING_STARTS_AT:
            return LessonPeriod.AFTERNOON
        return LessonPeriod.EVENING

    @property
    def full_description(self) -> str:
        return (
            f"{self.title} - {self.lesson_date.isoformat()} at {self.start_time:%H:%M} "
            f"({self.duration_minutes} min) in {self.location}"
        )

    def status_at(self, now: datetime) -> LessonStatus:
        if self.starts_at > now:
            return LessonStatus.BOOKED
        return LessonStatus.OCCURRED


# Factories


def create_sport(name: str, category: str, id: Optional[str] = None) -> Sport:
    return Sport(
        name=validators.validate_sport_name(name),
        category=validators.validate_sport_category(category),
        id=id,
    )


def update_sport(sport: Sport, name: str, category: str) -> Sport:
    return create_sport(name, category, id=sport.id)


def create_teacher(
    name: str,
    email: str,
    specialization: str,
    active: bool = True,
    id: Optional[str] = None,
) -> Teacher:
    return Teacher(
        name=validators.validate_teacher_name(name),
        email=validators.validate_email_address(email),
        specialization=validators.validate_specialization(specialization),
        active=bool(active),
        id=id,
    )


def deactivate(teacher: Teacher) -> Teacher:
    return replace(teacher, active=False)


def activate(teacher: Teacher) -> Teacher:
    return replace(teacher, active=True)


def create_content(
    title: str,
    level: str,
    duration_minutes: int,
    sport_id: str,
    description: Optional[str] = None,
    url: Optional[str] = None,
    id: Optional[str] = None,
) -> Content:
    return Content(
        title=validators.validate_title(title),
        level=validators.validate_level(level),
        duration_minutes=validators.validate_content_duration(duration_minutes),
        sport_id=validators.require_reference(sport_id, "sport_id"),
        description=validators.validate_description(description),
        url=validators.validate_url(url),
        id=id,
    )


def _build_lesson(
    *,
    title: str,
    lesson_date: date,
    start_time: time,
    duration_minutes: int,
    location: str,
    sport_id: str,
    teacher_id: str,
    content_id: Optional[str],
    id: Optional[str],
    today: Optional[date],
) -> Lesson:
    if today is not None:
        lesson_date = validators.validate_lesson_date(lesson_date, today)
    elif not isinstance(lesson_date, date):
        raise ValidationException("lesson_date", "must be a calendar date")
    start_time = validators.validate_start_time(start_time)
    duration_minutes = validators.validate_lesson_duration(duration_minutes)
    validators.validate_same_day_window(start_time, duration_minutes)
    return Lesson(
        title=validators.validate_title(title),
        lesson_date=lesson_date,
        start_time=start_time,
        duration_minutes=duration_minutes,
        location=validators.validate_location(location),
        sport_id=validators.require_reference(sport_id, "sport_id"),
        teacher_id=validators.require_reference(teacher_id, "teacher_id"),
        content_id=content_id,
        id=id,
    )


def create_lesson(
    title: str,
    lesson_date: date,
    start_time: time,
    duration_minutes: int,
    location: str,
    sport_id: str,
    teacher_id: str,
    content_id: Optional[str] = None,
    *,
    today: date,
) -> Lesson:
    """
    Canonical lesson factory.

    ``today`` is the clock's current date; a lesson may not be created for
    an earlier date.
    """
    return _build_lesson(
        title=title,
        lesson_date=lesson_date,
        start_time=start_time,
        duration_minutes=duration_minutes,
        location=location,
        sport_id=sport_id,
        teacher_id=teacher_id,
        content_id=content_id,
        id=None,
        today=today,
    )


def create_lesson_from_content(
    starts_at: datetime,
    teacher: Teacher,
    content: Content,
    *,
    today: date,
    location: Optional[str] = None,
    title: Optional[str] = None,
) -> Lesson:
    """
    Convenience wrapper deriving title, location and duration from the content.

    The derived "Aula de <content>" title is cut to the title length limit; an
    explicit ``title`` is validated as given.
    """
    if not title:
        title = f"{constants.LESSON_TITLE_PREFIX}{content.title}"
        title = title[: constants.MAX_TITLE_LENGTH].rstrip()
    return create_lesson(
        title=title,
        lesson_date=starts_at.date(),
        start_time=starts_at.time(),
        duration_minutes=content.duration_minutes or constants.DEFAULT_LESSON_DURATION,
        location=location or constants.DEFAULT_LESSON_LOCATION,
        sport_id=content.sport_id,
        teacher_id=teacher.id,
        content_id=content.id,
        today=today,
    )


def restore_lesson(
    id: str,
    title: str,
    lesson_date: date,
    start_time: time,
    duration_minutes: int,
    location: str,
    sport_id: str,
    teacher_id: str,
    content_id: Optional[str] = None,
) -> Lesson:
    """
    Rebuild a persisted lesson.

    Runs the same field validators except the creation-time rule on past
    dates, since stored lessons legitimately age into the past.
    """
    return _build_lesson(
        title=title,
        lesson_date=lesson_date,
        start_time=start_time,
        duration_minutes=duration_minutes,
        location=location,
        sport_id=sport_id,
        teacher_id=teacher_id,
        content_id=content_id,
        id=id,
        today=None,
    )


def with_id(entity, id: str):
    """Return a copy of ``entity`` carrying its assigned identity."""
    return replace(entity, id=id)
