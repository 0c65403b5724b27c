# backend/sportclass/models/lesson.py
"""
Lesson model.

Lessons store their own date, start time and duration. The composite index
on (teacher_id, lesson_date) backs the conflict scan, which only ever looks
at one teacher's lessons on one calendar date.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Time,
)
from sqlalchemy.sql import func
import ulid

from ..database import Base


class LessonRow(Base):
    __tablename__ = "lessons"

    id = Column(String(26), primary_key=True, default=lambda: str(ulid.ULID()))
    title = Column(String(200), nullable=False)
    lesson_date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    location = Column(String(100), nullable=False)

    sport_id = Column(String(26), ForeignKey("sports.id"), nullable=False)
    teacher_id = Column(String(26), ForeignKey("teachers.id"), nullable=False)
    content_id = Column(String(26), ForeignKey("contents.id"), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("ix_lessons_teacher_date", "teacher_id", "lesson_date"),
        CheckConstraint(
            "duration_minutes >= 30 AND duration_minutes <= 240",
            name="ck_lessons_duration_range",
        ),
    )

    def __repr__(self) -> str:
        return f"<LessonRow {self.id} {self.lesson_date} {self.start_time}>"
