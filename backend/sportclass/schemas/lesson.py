# backend/sportclass/schemas/lesson.py
"""
Lesson schemas for SportClass.

Request models only check shapes; field bounds are enforced by the domain
validators so every bound violation surfaces as the same ValidationException.
"""

from datetime import date, datetime, time
from typing import Optional

from pydantic import Field

from ..domain.entities import Lesson, LessonPeriod, LessonStatus
from ._strict_base import StrictModel, StrictRequestModel


class LessonCreate(StrictRequestModel):
    """Book a lesson for a teacher from a content."""

    teacher_id: str = Field(..., description="Teacher giving the lesson")
    content_id: str = Field(..., description="Content taught in the lesson")
    lesson_date: date = Field(..., description="Date of the lesson")
    start_time: time = Field(..., description="Local start time (06:00-22:00)")
    title: Optional[str] = Field(None, description="Defaults to 'Aula de <content title>'")
    location: Optional[str] = Field(None, description="Defaults to 'Local padrão'")


class LessonResponse(StrictModel):
    id: str
    title: str
    lesson_date: date
    start_time: time
    end_time: time
    duration_minutes: int
    location: str
    sport_id: str
    teacher_id: str
    content_id: Optional[str] = None
    period: LessonPeriod
    is_long: bool
    status: LessonStatus

    @classmethod
    def from_entity(cls, lesson: Lesson, now: datetime) -> "LessonResponse":
        return cls(
            id=lesson.id,
            title=lesson.title,
            lesson_date=lesson.lesson_date,
            start_time=lesson.start_time,
            end_time=lesson.end_time,
            duration_minutes=lesson.duration_minutes,
            location=lesson.location,
            sport_id=lesson.sport_id,
            teacher_id=lesson.teacher_id,
            content_id=lesson.content_id,
            period=lesson.period,
            is_long=lesson.is_long,
            status=lesson.status_at(now),
        )


class ConflictResponse(StrictModel):
    """Lessons a hypothetical booking would collide with."""

    has_conflict: bool
    conflicts: list[LessonResponse]
