"""
Field validators for Sport, Teacher, Content and Lesson.

Each validator returns the normalized value (strings trimmed) or raises
ValidationException naming the offending field. They have no side effects
and are shared by the entity factories and the update helpers.
"""

from __future__ import annotations

from datetime import date, time
from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email

from ..core import constants
from ..core.exceptions import ValidationException


def require_text(value: Any, field: str, min_length: int, max_length: int) -> str:
    """Trim ``value`` and enforce inclusive length bounds."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationException(field, "must not be null or empty")
    cleaned = value.strip()
    if len(cleaned) < min_length or len(cleaned) > max_length:
        raise ValidationException(
            field, f"must be between {min_length} and {max_length} characters"
        )
    return cleaned


def optional_text(value: Any, field: str, max_length: int) -> Optional[str]:
    """Trim an optional string; blank becomes None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationException(field, "must be a string")
    cleaned = value.strip()
    if not cleaned:
        return None
    if len(cleaned) > max_length:
        raise ValidationException(field, f"must be at most {max_length} characters")
    return cleaned


def require_reference(value: Any, field: str) -> str:
    """A reference to another entity must be a non-empty identifier."""
    if value is None or not str(value).strip():
        raise ValidationException(field, "must reference an existing record")
    return str(value).strip()


# Sport


def validate_sport_name(value: Any) -> str:
    return require_text(
        value, "name", constants.MIN_SPORT_NAME_LENGTH, constants.MAX_SPORT_NAME_LENGTH
    )


def validate_sport_category(value: Any) -> str:
    return require_text(
        value,
        "category",
        constants.MIN_SPORT_CATEGORY_LENGTH,
        constants.MAX_SPORT_CATEGORY_LENGTH,
    )


# Teacher


def validate_teacher_name(value: Any) -> str:
    return require_text(
        value, "name", constants.MIN_TEACHER_NAME_LENGTH, constants.MAX_TEACHER_NAME_LENGTH
    )


def validate_specialization(value: Any) -> str:
    return require_text(
        value,
        "specialization",
        constants.MIN_SPECIALIZATION_LENGTH,
        constants.MAX_SPECIALIZATION_LENGTH,
    )


def validate_email_address(value: Any) -> str:
    """Syntactic email check; the domain part is lower-cased."""
    cleaned = require_text(value, "email", 3, constants.MAX_EMAIL_LENGTH)
    try:
        result = validate_email(cleaned, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationException("email", str(exc)) from exc
    return result.normalized


# Content


def validate_title(value: Any) -> str:
    return require_text(value, "title", constants.MIN_TITLE_LENGTH, constants.MAX_TITLE_LENGTH)


def validate_description(value: Any) -> Optional[str]:
    return optional_text(value, "description", constants.MAX_DESCRIPTION_LENGTH)


def validate_url(value: Any) -> Optional[str]:
    return optional_text(value, "url", constants.MAX_URL_LENGTH)


def validate_level(value: Any) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationException("level", "must not be null or empty")
    cleaned = value.strip()
    if cleaned not in constants.CONTENT_LEVELS:
        allowed = " or ".join(f"'{level}'" for level in constants.CONTENT_LEVELS)
        raise ValidationException("level", f"must be {allowed}")
    return cleaned


def validate_content_duration(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationException("duration_minutes", "must be an integer number of minutes")
    if value <= 0:
        raise ValidationException("duration_minutes", "must be greater than zero")
    return value


# Lesson


def validate_lesson_date(value: Any, today: date) -> date:
    if value is None:
        raise ValidationException("lesson_date", "must not be null")
    if not isinstance(value, date):
        raise ValidationException("lesson_date", "must be a calendar date")
    if value < today:
        raise ValidationException("lesson_date", "must not be in the past")
    return value


def validate_start_time(value: Any) -> time:
    if value is None:
        raise ValidationException("start_time", "must not be null")
    if not isinstance(value, time):
        raise ValidationException("start_time", "must be a time of day")
    if value < constants.EARLIEST_LESSON_START or value > constants.LATEST_LESSON_START:
        raise ValidationException(
            "start_time",
            f"must be between {constants.EARLIEST_LESSON_START:%H:%M} "
            f"and {constants.LATEST_LESSON_START:%H:%M}",
        )
    return value


def validate_lesson_duration(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationException("duration_minutes", "must be an integer number of minutes")
    if value <= 0:
        raise ValidationException("duration_minutes", "must be greater than zero")
    if value < constants.MIN_LESSON_DURATION or value > constants.MAX_LESSON_DURATION:
        raise ValidationException(
            "duration_minutes",
            f"must be between {constants.MIN_LESSON_DURATION} "
            f"and {constants.MAX_LESSON_DURATION} minutes",
        )
    return value


def validate_same_day_window(start_time: time, duration_minutes: int) -> None:
    """A lesson window must end on the day it starts."""
    start_minutes = start_time.hour * 60 + start_time.minute
    if start_minutes + duration_minutes >= 24 * 60:
        raise ValidationException("duration_minutes", "lesson must end before midnight")


def validate_location(value: Any) -> str:
    return require_text(
        value, "location", constants.MIN_LOCATION_LENGTH, constants.MAX_LOCATION_LENGTH
    )
