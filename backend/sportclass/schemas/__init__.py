"""Request and response schemas for the SportClass API."""

from .content import ContentCreate, ContentResponse
from .lesson import ConflictResponse, LessonCreate, LessonResponse
from .sport import SportCreate, SportResponse, SportUpdate
from .teacher import TeacherCreate, TeacherResponse

__all__ = [
    "ConflictResponse",
    "ContentCreate",
    "ContentResponse",
    "LessonCreate",
    "LessonResponse",
    "SportCreate",
    "SportResponse",
    "SportUpdate",
    "TeacherCreate",
    "TeacherResponse",
]
