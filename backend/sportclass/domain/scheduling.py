"""
Scheduling rules: lesson overlap and teacher eligibility.

Overlap uses an inclusive boundary: a lesson that ends exactly when another
starts still conflicts with it. Windows are compared as offsets from
midnight, so a window never rolls over into the next day.
"""

from __future__ import annotations

from datetime import date, time, timedelta

from .entities import Lesson, Teacher


def _offset(start: time) -> timedelta:
    return timedelta(
        hours=start.hour,
        minutes=start.minute,
        seconds=start.second,
        microseconds=start.microsecond,
    )


def overlaps(
    date_a: date,
    start_a: time,
    duration_a: int,
    date_b: date,
    start_b: time,
    duration_b: int,
) -> bool:
    """Return True when two lesson windows intersect, boundaries included."""
    if date_a != date_b:
        return False

    begin_a = _offset(start_a)
    end_a = begin_a + timedelta(minutes=duration_a)
    begin_b = _offset(start_b)
    end_b = begin_b + timedelta(minutes=duration_b)

    return not (end_a < begin_b or begin_a > end_b)


def lessons_overlap(first: Lesson, second: Lesson) -> bool:
    return overlaps(
        first.lesson_date,
        first.start_time,
        first.duration_minutes,
        second.lesson_date,
        second.start_time,
        second.duration_minutes,
    )


def is_eligible(teacher: Teacher, sport_name: str) -> bool:
    """
    Whether ``teacher`` may teach the sport called ``sport_name``.

    Case-insensitive exact match against the specialization. Never raises;
    callers turn False into a rejection.
    """
    if teacher is None or not teacher.specialization or not sport_name:
        return False
    return teacher.specialization.strip().casefold() == sport_name.strip().casefold()
