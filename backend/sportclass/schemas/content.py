# backend/sportclass/schemas/content.py
"""Content schemas for SportClass."""

from typing import Optional

from pydantic import Field

from ..domain.entities import Content
from ._strict_base import StrictModel, StrictRequestModel


class ContentCreate(StrictRequestModel):
    title: str = Field(..., description="Content title")
    level: str = Field(..., description="'Fundamental II' or 'Médio'")
    duration_minutes: int = Field(..., description="Length of the content in minutes")
    sport_id: str = Field(..., description="Sport the content belongs to")
    description: Optional[str] = None
    url: Optional[str] = None


class ContentResponse(StrictModel):
    id: str
    title: str
    level: str
    duration_minutes: int
    sport_id: str
    description: Optional[str] = None
    url: Optional[str] = None
    is_video: bool

    @classmethod
    def from_entity(cls, content: Content) -> "ContentResponse":
        return cls(
            id=content.id,
            title=content.title,
            level=content.level,
            duration_minutes=content.duration_minutes,
            sport_id=content.sport_id,
            description=content.description,
            url=content.url,
            is_video=content.is_video,
        )
