"""
Database models for the SportClass scheduling service.

Rows are plain persistence records; repositories map them to the immutable
domain entities in ``sportclass.domain.entities``.
"""

from .content import ContentRow
from .lesson import LessonRow
from .sport import SportRow
from .teacher import TeacherRow

__all__ = [
    "ContentRow",
    "LessonRow",
    "SportRow",
    "TeacherRow",
]
